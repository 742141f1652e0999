"""Frame handed to elements for one render pass, plus the widget protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from termtree.layout.rect import Rect

from .buffer import Buffer

__all__ = ["Frame", "SizedWidget", "Widget"]


@runtime_checkable
class Widget(Protocol):
    """Anything that can draw itself into a buffer region."""

    def render(self, area: Rect, buffer: Buffer) -> None:
        ...


@runtime_checkable
class SizedWidget(Widget, Protocol):
    """Widget that also reports an intrinsic size."""

    def preferred_width(self) -> int:
        ...

    def preferred_height(self) -> int:
        ...


class Frame:
    """Write target for one render pass; elements never read it back."""

    def __init__(self, buffer: Buffer) -> None:
        self.buffer = buffer

    @property
    def area(self) -> Rect:
        return self.buffer.area

    def render_widget(self, widget: Widget, area: Rect) -> None:
        widget.render(area, self.buffer)
