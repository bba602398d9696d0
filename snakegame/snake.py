"""The snake: its segments, steering, movement and wrapping."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from enum import Enum, auto

import pygame

from snakegame.shapes import BLACK, BLUE, CYAN, Rect

log = logging.getLogger(__name__)

START_POSITION = 300.0
MOVE_EVERY_N_FRAMES = 10
OUTLINE_THICKNESS = 2.0


class Key(Enum):
    """Keys that steer the snake."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    Q = auto()
    D = auto()
    Z = auto()
    S = auto()


class Snake:
    """A snake of square segments moving one grid step every few frames."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.movement_speed = 5.0
        self.direction: tuple[float, float] = (self.movement_speed, 0.0)
        self.segment_size = 25.0
        self.segment_spacing = 0.0
        self._segments: list[Rect] = []
        self._frame = 0
        self._input_processed = False
        self._last_head_pos: tuple[float, float] | None = None
        self._build_segments()
        if x > 0.0 or y > 0.0:
            self.place(x, y)

    def _new_segment(self, x: float, y: float, fill=BLUE) -> Rect:
        return Rect(
            x, y, self.segment_size, self.segment_size,
            fill=fill, outline=OUTLINE_THICKNESS,
        )

    def _build_segments(self) -> None:
        step = self.segment_size + self.segment_spacing
        self._segments = [
            self._new_segment(START_POSITION, START_POSITION, CYAN),
            self._new_segment(START_POSITION - step, START_POSITION),
            self._new_segment(START_POSITION - 2 * step, START_POSITION),
        ]

    @property
    def body(self) -> tuple[Rect, ...]:
        """All segments, head first."""
        return tuple(self._segments)

    @property
    def head(self) -> Rect:
        return self._segments[0]

    def update_input(self, pressed: Iterable[Key]) -> None:
        """Turn the snake according to the pressed keys; no reversing, one turn per step."""
        if self._input_processed:
            current = self.head.position
            if self._last_head_pos is None:
                self._last_head_pos = current
            if self._last_head_pos == current:
                return
            self._input_processed = False
            self._last_head_pos = current

        keys = set(pressed)
        dx, dy = self.direction
        speed = self.movement_speed
        if keys & {Key.LEFT, Key.Q} and dx == 0:
            new_direction = (-speed, 0.0)
        elif keys & {Key.RIGHT, Key.D} and dx == 0:
            new_direction = (speed, 0.0)
        elif keys & {Key.UP, Key.Z} and dy == 0:
            new_direction = (0.0, -speed)
        elif keys & {Key.DOWN, Key.S} and dy == 0:
            new_direction = (0.0, speed)
        else:
            return
        self.direction = new_direction
        self._input_processed = True

    def place(self, x: float, y: float) -> None:
        """Put the head at (x, y) with the body laid out to its left."""
        step = self.segment_size + self.segment_spacing
        for index, segment in enumerate(self._segments):
            segment.x = x - index * step
            segment.y = y

    def reset_shape(self) -> None:
        """Give every segment the standard size and body colour."""
        for segment in self._segments:
            segment.width = segment.height = self.segment_size
            segment.fill = BLUE

    def wrap_around(self, width: int, height: int) -> None:
        """Move segments that left the playfield to its opposite edge."""
        for segment in self._segments:
            if segment.x < 0.0:
                segment.x = width - self.segment_size
            if segment.right > width:
                segment.x = 0.0
            if segment.y < 0.0:
                segment.y = height - self.segment_size
            if segment.bottom > height:
                segment.y = 0.0

    def update(self, pressed: Iterable[Key], width: int, height: int) -> None:
        """Run one frame: steer, move and wrap."""
        self.update_input(pressed)
        self.move()
        self.wrap_around(width, height)

    def grow(self) -> None:
        """Add a segment behind the tail."""
        if not self._segments:
            return
        tail = self._segments[-1]
        if len(self._segments) >= 2:
            before = self._segments[-2]
            x = tail.x + (tail.x - before.x)
            y = tail.y + (tail.y - before.y)
        else:
            ox, oy = -self.direction[0], -self.direction[1]
            length = math.hypot(ox, oy)
            if length > 0:
                ox, oy = ox / length, oy / length
            step = self.segment_size + self.segment_spacing
            x = tail.x + ox * step
            y = tail.y + oy * step
        self._segments.append(self._new_segment(x, y))
        log.debug("snake grew! new size: %d", len(self._segments))

    def move(self) -> None:
        """Count a frame and, every few frames, advance one grid step."""
        if not self._segments:
            return
        self._frame += 1
        if self._frame % MOVE_EVERY_N_FRAMES != 0:
            return

        previous = [segment.position for segment in self._segments]
        step = self.segment_size + self.segment_spacing
        dx, dy = self.direction
        length = math.hypot(dx, dy)
        if length > 0:
            dx, dy = dx / length, dy / length
        self.head.move(dx * step, dy * step)
        for segment, (px, py) in zip(self._segments[1:], previous):
            segment.x, segment.y = px, py

    def collides_with_self(self) -> bool:
        """Return True if the head overlaps a segment from the fourth one on."""
        head = self.head if self._segments else None
        if head is None or len(self._segments) < 4:
            return False
        for segment in self._segments[3:]:
            if head.intersects(segment):
                log.debug("head position: (%s, %s)", head.x, head.y)
                log.debug("colliding segment position: (%s, %s)", segment.x, segment.y)
                return True
        return False

    def render(self, surface: pygame.Surface) -> None:
        """Draw every segment with its outline."""
        for segment in self._segments:
            area = pygame.Rect(
                int(segment.x), int(segment.y), int(segment.width), int(segment.height)
            )
            pygame.draw.rect(surface, segment.fill, area)
            if segment.outline > 0:
                pygame.draw.rect(surface, BLACK, area, int(segment.outline))