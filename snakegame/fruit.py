"""The fruit the snake eats."""

from __future__ import annotations

import random
from typing import Protocol

import pygame

from snakegame.shapes import RED, Rect

FRUIT_SIZE = 50.0
FRUIT_SCALE = 0.5


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


class Fruit:
    """A square fruit placed at a random spot inside the playfield."""

    def __init__(self, width: int, height: int, rng: _RandRange | None = None) -> None:
        source = rng if rng is not None else random
        x = max(0.0, float(source.randrange(width) - FRUIT_SIZE))
        y = max(0.0, float(source.randrange(height) - FRUIT_SIZE))
        side = FRUIT_SIZE * FRUIT_SCALE
        self.shape = Rect(x, y, side, side, fill=RED)
        self.age = 0

    def update(self) -> None:
        """Advance the fruit by one frame; it ages but stays where it was placed."""
        self.age += 1

    def render(self, surface: pygame.Surface) -> None:
        """Draw the fruit onto a surface."""
        rect = self.shape
        pygame.draw.rect(
            surface,
            rect.fill,
            pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height)),
        )