"""Axis-aligned rectangles used for every object drawn on the playfield."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)


@dataclass
class Rect:
    """A filled rectangle with an optional outline drawn inside its bounds."""

    x: float
    y: float
    width: float
    height: float
    fill: Color = WHITE
    outline: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom

    def move(self, dx: float, dy: float) -> None:
        """Shift the rectangle by the given offset."""
        self.x += dx
        self.y += dy