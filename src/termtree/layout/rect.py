"""Axis-aligned integer rectangles in buffer coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

__all__ = ["Margin", "Rect"]


@dataclass(frozen=True)
class Margin:
    """Empty cells kept clear on each side of a rectangle."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ValueError(f"Margin values must be non-negative: {self}")

    @classmethod
    def uniform(cls, value: int) -> "Margin":
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, vertical: int, horizontal: int) -> "Margin":
        return cls(vertical, horizontal, vertical, horizontal)

    @property
    def horizontal_total(self) -> int:
        return self.left + self.right

    @property
    def vertical_total(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class Rect:
    """
    Rectangle covering ``width`` x ``height`` cells starting at ``(x, y)``.

    A rectangle with zero width or zero height is *empty*; rendering into an
    empty rectangle is always a no-op.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect dimensions must be non-negative (got {self.width}x{self.height})"
            )

    @classmethod
    def of(cls, width: int, height: int) -> "Rect":
        """Return a rectangle of the given size anchored at the origin."""

        return cls(0, 0, width, height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Return True when the cell ``(x, y)`` lies inside this rectangle."""

        return self.left <= x < self.right and self.top <= y < self.bottom

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        """Return the overlap with *other*, or ``None`` when they do not overlap."""

        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)

    def inner(self, margin: Margin) -> "Rect":
        """Shrink by *margin*; sizes are clamped at zero."""

        return Rect(
            self.x + margin.left,
            self.y + margin.top,
            max(0, self.width - margin.horizontal_total),
            max(0, self.height - margin.vertical_total),
        )

    def rows(self) -> Iterator["Rect"]:
        """Yield one single-row rectangle per row, top to bottom."""

        for row in range(self.top, self.bottom):
            yield Rect(self.x, row, self.width, 1)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"
