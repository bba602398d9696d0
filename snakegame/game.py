"""Game state, the frame update and the window loop."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

import pygame

from snakegame.fruit import Fruit
from snakegame.shapes import BLACK, WHITE
from snakegame.snake import Key, Snake

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FRAME_RATE = 60
BACKGROUND = (141, 161, 89)
FONT_PATH = "Fonts/PressStart2P-Regular.ttf"
END_TEXT_POSITION = (20, 200)


class Game:
    """Snake, fruits, score and end-of-game state."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT, rng=None) -> None:
        self.width = width
        self.height = height
        self._rng = rng
        self.fruit_spawn = 1
        self.points = 0
        self.end_game = False
        self.grew = False
        self.fruit_spawn_timer_max = 10.0
        self.fruit_spawn_timer = self.fruit_spawn_timer_max
        self.fruits: list[Fruit] = []
        self.ui_text = ""
        self._end_text = f" Game over!\nyour score: {self.points}"
        self.snake = Snake()
        self.snake.place(width / 2.0, height / 2.0)

    def spawn_fruits(self) -> None:
        """Tick the spawn timer and add a fruit when it has run out."""
        if self.fruit_spawn_timer < self.fruit_spawn_timer_max:
            self.fruit_spawn_timer += 1.0
        elif len(self.fruits) < self.fruit_spawn:
            self.fruits.append(Fruit(self.width, self.height, self._rng))
            self.fruit_spawn_timer = 0.0

    def update_collision(self) -> None:
        """Eat every fruit the head touches, scoring and growing for each."""
        for fruit in reversed(list(self.fruits)):
            if self.snake.head.intersects(fruit.shape):
                self.points += 1
                self.fruits.remove(fruit)
                self.snake.grow()
                self.grew = True
                self.spawn_fruits()

    def update_text(self) -> None:
        self.ui_text = f"Points: {self.points}\n"

    def update(self, pressed: Iterable[Key]) -> None:
        """Advance the game by one frame."""
        if self.end_game:
            return
        self.spawn_fruits()
        self.update_text()
        self.snake.update(pressed, self.width, self.height)
        self.update_collision()
        if not self.grew and self.snake.collides_with_self():
            self.ui_text = ""
            self.end_game = True
        self.grew = False

    def end_text(self) -> str:
        """Text shown once the game is over; fixed when the game is created."""
        return self._end_text

    def render(self, surface: pygame.Surface, font: pygame.font.Font, big_font: pygame.font.Font) -> None:
        """Draw the whole frame onto a surface."""
        surface.fill(BACKGROUND)
        _blit_lines(surface, font, self.ui_text, WHITE, (0, 0))
        self.snake.render(surface)
        for fruit in self.fruits:
            fruit.render(surface)
        if self.end_game:
            _blit_lines(surface, big_font, self.end_text(), BLACK, END_TEXT_POSITION)


def _blit_lines(surface, font, text, color, origin) -> None:
    x, y = origin
    for line in text.splitlines():
        surface.blit(font.render(line, True, color), (x, y))
        y += font.get_linesize()


_KEY_CODES = {
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.Q: pygame.K_q,
    Key.D: pygame.K_d,
    Key.Z: pygame.K_z,
    Key.S: pygame.K_s,
}


def _pressed_keys() -> set[Key]:
    state = pygame.key.get_pressed()
    return {key for key, code in _KEY_CODES.items() if state[code]}


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(FONT_PATH, size)
    except (OSError, FileNotFoundError):
        print("ERROR::GAME::INITFONTS::Failed to load font!")
        return pygame.font.Font(None, size)


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="snakegame", description="Play Snake.")
    parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake Game")
        font = _load_font(24)
        big_font = _load_font(60)
        clock = pygame.time.Clock()
        game = Game(WINDOW_WIDTH, WINDOW_HEIGHT)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            game.update(_pressed_keys())
            game.render(surface, font, big_font)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0