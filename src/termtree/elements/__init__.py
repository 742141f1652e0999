"""Containers, deferred nodes and leaf elements."""

from .container import Column, Row, StackContainer
from .gauge import GaugeElement
from .lazy import LazyElement, LazyState, Producer
from .spacer import Spacer
from .text import TextElement, wrap_lines
from .widget import GenericWidgetElement

__all__ = [
    "Column",
    "GaugeElement",
    "GenericWidgetElement",
    "LazyElement",
    "LazyState",
    "Producer",
    "Row",
    "Spacer",
    "StackContainer",
    "TextElement",
    "wrap_lines",
]
