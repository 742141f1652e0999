"""Capability contract shared by every node of the element tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

from termtree.events import (
    DragHandler,
    EventResult,
    KeyEvent,
    KeyEventHandler,
    MouseEvent,
    MouseEventHandler,
)
from termtree.layout.constraint import Constraint
from termtree.layout.rect import Rect

if TYPE_CHECKING:
    from termtree.terminal.frame import Frame

    from .context import RenderContext

__all__ = ["Element", "ElementStateError"]

_NO_ATTRIBUTES: Mapping[str, str] = MappingProxyType({})


class ElementStateError(RuntimeError):
    """Raised when an element is asked to change state it only accepts once."""


class Element(ABC):
    """
    A node of the element tree.

    Only :meth:`render` is required; every other capability has a neutral
    default so leaf nodes override just what they support. Rendering into an
    empty area must be a no-op.
    """

    @abstractmethod
    def render(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        ...

    def preferred_width(self) -> int:
        return 0

    def preferred_height(self) -> int:
        return 0

    def preferred_width_for(self, context: "RenderContext") -> int:
        """Width including anything *context* contributes, such as cascaded spacing."""

        return self.preferred_width()

    def preferred_height_for(self, available_width: int, context: "RenderContext") -> int:
        """Height needed when laid out in *available_width* columns."""

        return self.preferred_height()

    def constraint(self) -> Optional[Constraint]:
        """Layout constraint requested from the parent, or ``None`` to let it choose."""

        return None

    def id(self) -> Optional[str]:
        return None

    def is_focusable(self) -> bool:
        return False

    def is_draggable(self) -> bool:
        return False

    def key_event_handler(self) -> Optional[KeyEventHandler]:
        return None

    def mouse_event_handler(self) -> Optional[MouseEventHandler]:
        return None

    def drag_handler(self) -> Optional[DragHandler]:
        return None

    def handle_key_event(self, event: KeyEvent, focused: bool) -> EventResult:
        if not focused:
            return EventResult.UNHANDLED
        handler = self.key_event_handler()
        if handler is None:
            return EventResult.UNHANDLED
        return handler(event)

    def handle_mouse_event(self, event: MouseEvent) -> EventResult:
        handler = self.mouse_event_handler()
        if handler is None:
            return EventResult.UNHANDLED
        return handler(event)

    def rendered_area(self) -> Optional[Rect]:
        return None

    # Cascade metadata

    def style_type(self) -> str:
        """Type name matched by stylesheet type selectors: the class name without an ``Element`` suffix."""

        name = type(self).__name__
        if name.endswith("Element") and name != "Element":
            return name[: -len("Element")]
        return name

    def style_classes(self) -> frozenset[str]:
        return frozenset()

    def style_attributes(self) -> Mapping[str, str]:
        return _NO_ATTRIBUTES
