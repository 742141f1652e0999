"""Style values and attribute helpers shared by styleable elements."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from rich.style import Style

from .properties import (
    ColorConverter,
    ConstraintConverter,
    FlexConverter,
    Gutter,
    GutterConverter,
    IntegerConverter,
    MarginConverter,
    PropertyConverter,
    TextStyleConverter,
)

EMPTY_STYLE: Style = Style.null()


def patch(base: Style, override: Optional[Style]) -> Style:
    """Return *base* with every field set on *override* taking precedence."""

    if override is None:
        return base
    return base + override


def merge_attributes(*layers: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """Merge attribute layers left to right; later keys win. Result is read-only."""

    merged: Dict[str, str] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return MappingProxyType(merged)


__all__ = [
    "ColorConverter",
    "ConstraintConverter",
    "FlexConverter",
    "EMPTY_STYLE",
    "Gutter",
    "GutterConverter",
    "IntegerConverter",
    "MarginConverter",
    "PropertyConverter",
    "Style",
    "TextStyleConverter",
    "merge_attributes",
    "patch",
]
