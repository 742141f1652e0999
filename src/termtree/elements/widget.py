"""Generic element wrapping any :class:`~termtree.terminal.frame.Widget`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from termtree.element.styled import StyledElement
from termtree.layout.rect import Rect
from termtree.terminal.frame import Widget

if TYPE_CHECKING:
    from termtree.element.context import RenderContext
    from termtree.terminal.frame import Frame

__all__ = ["GenericWidgetElement"]


class GenericWidgetElement(StyledElement):
    """Places a widget in the tree; sizing hints come from the widget when it offers them."""

    def __init__(self, widget: Widget, **kwargs) -> None:
        if widget is None:
            raise ValueError("Widget cannot be null")
        super().__init__(**kwargs)
        self._widget = widget

    @property
    def widget(self) -> Widget:
        return self._widget

    def preferred_width(self) -> int:
        hint = getattr(self._widget, "preferred_width", None)
        return max(0, int(hint())) if callable(hint) else 0

    def preferred_height(self) -> int:
        hint = getattr(self._widget, "preferred_height", None)
        return max(0, int(hint())) if callable(hint) else 0

    def render_content(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        style = context.current_style()
        if style:
            frame.buffer.set_style(area, style)
        frame.render_widget(self._widget, area)
