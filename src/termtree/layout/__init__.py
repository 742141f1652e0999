"""Geometry, sizing constraints and the default layout solver."""

from .constraint import (
    Constraint,
    Direction,
    Fill,
    Fit,
    Flex,
    Length,
    Max,
    Min,
    Percentage,
    Ratio,
    fill,
    fit,
    length,
    max_size,
    min_size,
    percentage,
    ratio,
)
from .rect import Margin, Rect
from .solver import LayoutError, split

__all__ = [
    "Constraint",
    "Direction",
    "Fill",
    "Fit",
    "Flex",
    "LayoutError",
    "Length",
    "Margin",
    "Max",
    "Min",
    "Percentage",
    "Ratio",
    "Rect",
    "fill",
    "fit",
    "length",
    "max_size",
    "min_size",
    "percentage",
    "ratio",
    "split",
]
