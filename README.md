# snakegame

A classic snake arcade game. You steer the snake around an 800×600 field and
eat the red fruit to score points and grow. Keep the head away from your own
tail. The snake wraps around the edges of the window. If it leaves the field
on one side, it comes back in on the opposite side.

## Installing

```
pip install .
```

This also installs `pygame`. The game uses it to open its window, draw the
field and read the keyboard.

## Playing

```
snakegame
```

The game runs at 60 frames per second. The snake moves one segment every tenth
frame.

Controls:

| Action       | Keys              |
|--------------|-------------------|
| Turn left    | Left arrow or `Q` |
| Turn right   | Right arrow or `D`|
| Turn up      | Up arrow or `Z`   |
| Turn down    | Down arrow or `S` |
| Quit         | `Esc` or close the window |

The snake cannot reverse onto itself. A turn is only taken when it is at a
right angle to the current heading. After a turn, no further turn is accepted
until the head has moved on by a step.

One fruit is on the field at a time, and each fruit you eat is worth one point.
The current score appears in the top left corner. The game ends when the head
overlaps the body, from the fourth segment on. At that point the score counter
is cleared and a "Game over!" message stays on screen until you close the
window.

The score line in that message is written when the game starts, so it always
shows 0.

### Font

The game looks for `Fonts/PressStart2P-Regular.ttf` relative to the directory
it is started from. If the file cannot be loaded, it prints an error message
and uses pygame's default font instead.

## Using it from code

The game logic can run without opening a window:

```python
from snakegame.game import Game
from snakegame.snake import Key

game = Game()
game.update({Key.DOWN})   # one frame with the Down key held
print(game.points, game.end_game)
print(game.snake.head)
```

Modules:

- `snakegame.shapes`
  - `Rect`: a position, size, fill colour and outline, with `intersects` and `move`.
  - Touching edges do not count as an intersection.
- `snakegame.fruit`
  - `Fruit(width, height, rng=None)`: places a fruit at a random spot in the field.
  - You can pass any object with a `randrange` method as `rng`, for repeatable placement.
- `snakegame.snake`
  - `Key`: the steering keys.
  - `Snake`: the segments, with the head first.
    - `Snake.update(pressed, width, height)` runs one frame: it reads the held keys, moves the snake and wraps it around the field.
    - `grow`, `place`, `wrap_around` and `collides_with_self` are also available on their own.
- `snakegame.game`
  - `Game(width=800, height=600, rng=None)`: holds the snake, the fruits, the points and the end-of-game flag.
    - `Game.update(pressed)` adds fruit spawning, scoring and the game-over check on top of the snake's update.
    - `Game.render(surface, font, big_font)` draws a frame onto a pygame surface.
  - `main()`: the `snakegame` command.

## What it does not do

The game has no restart, pause or menu. After a game over you close the window
and start the command again. Scores are not saved anywhere.

## Running the tests

```
pip install ".[test]"
pytest
```