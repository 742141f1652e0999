"""Converters from textual style property values to typed values.

Every converter is fail-soft: malformed input yields ``None`` so callers fall
back to their defaults instead of aborting a render pass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, TypeVar

from rich.color import Color, ColorParseError
from rich.style import Style

from termtree.layout.constraint import (
    Constraint,
    Fill,
    Fit,
    Flex,
    Length,
    Max,
    Min,
    Percentage,
    Ratio,
)
from termtree.layout.rect import Margin

__all__ = [
    "ColorConverter",
    "ConstraintConverter",
    "FlexConverter",
    "Gutter",
    "GutterConverter",
    "IntegerConverter",
    "MarginConverter",
    "PropertyConverter",
    "TextStyleConverter",
]

T_co = TypeVar("T_co", covariant=True)

_INT_RE = re.compile(r"^\d+$")
_CALL_RE = re.compile(r"^(?P<name>fill|min|max)\(\s*(?P<arg>\d+)\s*\)$")
_RATIO_RE = re.compile(r"^(?P<num>\d+)\s*/\s*(?P<den>\d+)$")

_TEXT_STYLE_WORDS: Dict[str, str] = {
    "bold": "bold",
    "dim": "dim",
    "italic": "italic",
    "underline": "underline",
    "underlined": "underline",
    "reverse": "reverse",
    "reversed": "reverse",
    "strike": "strike",
    "crossed-out": "strike",
    "blink": "blink",
}


class PropertyConverter(Protocol[T_co]):
    """Turns a raw property string into a typed value, or ``None`` when malformed."""

    def convert(self, raw: str) -> Optional[T_co]:
        ...


@dataclass(frozen=True)
class Gutter:
    """Two-axis spacing in cells."""

    horizontal: int
    vertical: int

    def __post_init__(self) -> None:
        if self.horizontal < 0 or self.vertical < 0:
            raise ValueError(f"Gutter values must be non-negative: {self}")

    @classmethod
    def uniform(cls, value: int) -> "Gutter":
        return cls(value, value)


def _non_negative_values(raw: str, max_count: int) -> Optional[List[int]]:
    """Whitespace-separated non-negative integers, at most *max_count* of them."""

    tokens = str(raw or "").split()
    if not 1 <= len(tokens) <= max_count:
        return None
    if not all(_INT_RE.match(token) for token in tokens):
        return None
    return [int(token) for token in tokens]


class GutterConverter:
    """Parse ``"N"`` (uniform) or ``"H V"`` into a :class:`Gutter`."""

    def convert(self, raw: str) -> Optional[Gutter]:
        values = _non_negative_values(raw, 2)
        if values is None:
            return None
        if len(values) == 1:
            return Gutter.uniform(values[0])
        return Gutter(values[0], values[1])


class MarginConverter:
    """Parse a CSS-style margin: ``"T"``, ``"V H"``, ``"T H B"`` or ``"T R B L"``."""

    def convert(self, raw: str) -> Optional[Margin]:
        values = _non_negative_values(raw, 4)
        if values is None:
            return None
        if len(values) == 1:
            return Margin.uniform(values[0])
        if len(values) == 2:
            return Margin.symmetric(values[0], values[1])
        if len(values) == 3:
            return Margin(values[0], values[1], values[2], values[1])
        return Margin(*values)


class FlexConverter:
    """Parse ``start``, ``center``, ``end``, ``space-between``, ``space-around`` or ``space-evenly``."""

    def convert(self, raw: str) -> Optional[Flex]:
        text = str(raw or "").strip().lower().replace("_", "-")
        try:
            return Flex(text)
        except ValueError:
            return None


class IntegerConverter:
    """Parse a single integer no smaller than ``minimum``."""

    def __init__(self, minimum: int = 0) -> None:
        self.minimum = minimum

    def convert(self, raw: str) -> Optional[int]:
        text = str(raw or "").strip()
        try:
            value = int(text)
        except ValueError:
            return None
        if value < self.minimum:
            return None
        return value


class ColorConverter:
    """Parse a color name, ``#rrggbb`` or ``rgb(r,g,b)`` value."""

    def convert(self, raw: str) -> Optional[Color]:
        text = str(raw or "").strip()
        if not text:
            return None
        try:
            return Color.parse(text)
        except ColorParseError:
            return None


class TextStyleConverter:
    """Parse whitespace-separated text modifiers such as ``"bold underline"``."""

    def convert(self, raw: str) -> Optional[Style]:
        words = str(raw or "").lower().split()
        if not words:
            return None
        if words == ["none"]:
            return Style.null()
        flags: Dict[str, bool] = {}
        for word in words:
            attribute = _TEXT_STYLE_WORDS.get(word)
            if attribute is None:
                return None
            flags[attribute] = True
        return Style(**flags)


class ConstraintConverter:
    """
    Parse a sizing constraint.

    Accepted forms: ``"5"`` (length), ``"50%"`` (percentage), ``"1/3"`` (ratio),
    ``"fill"``, ``"fill(2)"``, ``"fit"``, ``"min(3)"`` and ``"max(10)"``.
    """

    def convert(self, raw: str) -> Optional[Constraint]:
        text = str(raw or "").strip().lower()
        if not text:
            return None
        try:
            if _INT_RE.match(text):
                return Length(int(text))
            if text.endswith("%") and _INT_RE.match(text[:-1]):
                return Percentage(int(text[:-1]))
            if text == "fill":
                return Fill()
            if text == "fit":
                return Fit()
            ratio_match = _RATIO_RE.match(text)
            if ratio_match:
                return Ratio(int(ratio_match.group("num")), int(ratio_match.group("den")))
            call_match = _CALL_RE.match(text)
            if call_match:
                name = call_match.group("name")
                arg = int(call_match.group("arg"))
                if name == "fill":
                    return Fill(arg)
                if name == "min":
                    return Min(arg)
                return Max(arg)
        except ValueError:
            return None
        return None
