"""Sizing directives consumed by the layout solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "Constraint",
    "Direction",
    "Fill",
    "Fit",
    "Flex",
    "Length",
    "Max",
    "Min",
    "Percentage",
    "Ratio",
    "fill",
    "fit",
    "length",
    "max_size",
    "min_size",
    "percentage",
    "ratio",
]


class Direction(str, Enum):
    """Axis along which a layout splits its area."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Flex(str, Enum):
    """Placement of the cells left over once every slot has its size."""

    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


def _require_non_negative(value: int, label: str) -> None:
    if value < 0:
        raise ValueError(f"{label} cannot be negative: {value}")


@dataclass(frozen=True)
class Length:
    """Exactly ``value`` cells."""

    value: int

    def __post_init__(self) -> None:
        _require_non_negative(self.value, "Length")


@dataclass(frozen=True)
class Percentage:
    """``value`` percent of the available cells."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError(f"Percentage must be between 0 and 100: {self.value}")


@dataclass(frozen=True)
class Ratio:
    """``numerator / denominator`` of the available cells."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise ValueError(f"Denominator must be positive: {self.denominator}")
        _require_non_negative(self.numerator, "Numerator")


@dataclass(frozen=True)
class Min:
    """At least ``value`` cells; grows into leftover space."""

    value: int

    def __post_init__(self) -> None:
        _require_non_negative(self.value, "Min")


@dataclass(frozen=True)
class Max:
    """At most ``value`` cells; grows into leftover space up to the cap."""

    value: int

    def __post_init__(self) -> None:
        _require_non_negative(self.value, "Max")


@dataclass(frozen=True)
class Fill:
    """Share of the leftover space proportional to ``weight``."""

    weight: int = 1

    def __post_init__(self) -> None:
        if self.weight < 1:
            raise ValueError(f"Fill weight must be >= 1: {self.weight}")


@dataclass(frozen=True)
class Fit:
    """Size to the element's preferred size along the layout axis."""


Constraint = Union[Length, Percentage, Ratio, Min, Max, Fill, Fit]


def length(value: int) -> Length:
    return Length(value)


def percentage(value: int) -> Percentage:
    return Percentage(value)


def ratio(numerator: int, denominator: int) -> Ratio:
    return Ratio(numerator, denominator)


def min_size(value: int) -> Min:
    return Min(value)


def max_size(value: int) -> Max:
    return Max(value)


def fill(weight: int = 1) -> Fill:
    return Fill(weight)


def fit() -> Fit:
    return Fit()
