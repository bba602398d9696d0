"""A snake arcade game: eat fruit, grow, and avoid your own tail."""

__version__ = "0.1.0"
__all__ = ["fruit", "game", "shapes", "snake"]