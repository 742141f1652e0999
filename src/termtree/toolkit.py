"""Factory functions for building element trees declaratively."""

from __future__ import annotations

from typing import Optional

from termtree.element.element import Element
from termtree.elements.container import Column, Row
from termtree.elements.gauge import GaugeElement
from termtree.elements.lazy import LazyElement, Producer
from termtree.elements.spacer import Spacer
from termtree.elements.text import TextElement
from termtree.elements.widget import GenericWidgetElement
from termtree.layout.constraint import fill, fit, length, max_size, min_size, percentage, ratio
from termtree.terminal.frame import Widget

__all__ = [
    "column",
    "fill",
    "fit",
    "gauge",
    "lazy",
    "length",
    "max_size",
    "min_size",
    "percentage",
    "ratio",
    "row",
    "spacer",
    "text",
    "widget",
]


def column(*children: Element, spacing: Optional[int] = None, **kwargs) -> Column:
    return Column(*children, spacing=spacing, **kwargs)


def row(*children: Element, spacing: Optional[int] = None, **kwargs) -> Row:
    return Row(*children, spacing=spacing, **kwargs)


def lazy(producer: Producer) -> LazyElement:
    """Node whose child is rebuilt by *producer* on every render."""

    return LazyElement(producer)


def widget(target: Widget, **kwargs) -> GenericWidgetElement:
    return GenericWidgetElement(target, **kwargs)


def text(content: str = "", **kwargs) -> TextElement:
    return TextElement(content, **kwargs)


def gauge(ratio: float = 0.0, **kwargs) -> GaugeElement:
    return GaugeElement(ratio, **kwargs)


def spacer(length: Optional[int] = None) -> Spacer:
    return Spacer(length)
