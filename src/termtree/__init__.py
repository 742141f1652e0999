"""Retained-mode element tree for composing terminal user interfaces."""

from termtree.css import StyleEngine, StylesheetError, load_stylesheet, parse_stylesheet
from termtree.element import (
    DefaultRenderContext,
    Element,
    ElementStateError,
    EventRouter,
    FocusManager,
    RenderContext,
    StyledElement,
)
from termtree.elements import (
    Column,
    GaugeElement,
    GenericWidgetElement,
    LazyElement,
    Row,
    Spacer,
    TextElement,
)
from termtree.events import EventResult, KeyCode, KeyEvent, MouseEvent, MouseEventKind
from termtree.layout import Flex, LayoutError, Margin, Rect
from termtree.terminal import Buffer, ConsoleBackend, Frame, Terminal, render_to_text
from termtree.toolkit import (
    column,
    fill,
    fit,
    gauge,
    lazy,
    length,
    max_size,
    min_size,
    percentage,
    ratio,
    row,
    spacer,
    text,
    widget,
)

__version__ = "0.1.0"

__all__ = [
    "Buffer",
    "Column",
    "ConsoleBackend",
    "DefaultRenderContext",
    "Element",
    "ElementStateError",
    "EventResult",
    "EventRouter",
    "Flex",
    "FocusManager",
    "Frame",
    "GaugeElement",
    "GenericWidgetElement",
    "KeyCode",
    "KeyEvent",
    "LayoutError",
    "LazyElement",
    "Margin",
    "MouseEvent",
    "MouseEventKind",
    "Rect",
    "RenderContext",
    "Row",
    "Spacer",
    "StyleEngine",
    "StyledElement",
    "StylesheetError",
    "Terminal",
    "TextElement",
    "column",
    "fill",
    "fit",
    "gauge",
    "lazy",
    "length",
    "load_stylesheet",
    "max_size",
    "min_size",
    "parse_stylesheet",
    "percentage",
    "ratio",
    "render_to_text",
    "row",
    "spacer",
    "text",
    "widget",
]
