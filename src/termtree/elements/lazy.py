"""Deferred node that re-derives its child from a producer on every render."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from termtree.element.element import Element
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
    from termtree.element.context import RenderContext
    from termtree.terminal.frame import Frame

__all__ = ["LazyElement", "LazyState", "Producer"]

Producer = Callable[[], Optional[Element]]


class LazyState(str, Enum):
    UNEVALUATED = "unevaluated"
    EVALUATED = "evaluated"


class LazyElement(Element):
    """
    Element whose child is produced by calling ``producer``.

    Each render resets the node to :attr:`LazyState.UNEVALUATED`, calls the
    producer once and renders the fresh child. Queries made outside a render
    evaluate the producer at most once and then read the cached child, so the
    producer may run outside a render pass. It must therefore be idempotent
    and free of side effects beyond reading the state it closes over.

    A producer returning ``None`` yields an element with neutral defaults.
    """

    def __init__(self, producer: Producer) -> None:
        if producer is None:
            raise ValueError("Producer cannot be null")
        self._producer = producer
        self._state = LazyState.UNEVALUATED
        self._child: Optional[Element] = None

    @property
    def state(self) -> LazyState:
        return self._state

    def invalidate(self) -> None:
        self._state = LazyState.UNEVALUATED
        self._child = None

    def _evaluate(self) -> Optional[Element]:
        if self._state is LazyState.UNEVALUATED:
            self._child = self._producer()
            self._state = LazyState.EVALUATED
        return self._child

    def render(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        self.invalidate()
        if area.is_empty:
            return
        child = self._evaluate()
        if child is None:
            return
        context.render_child(child, frame, area)

    def preferred_width(self) -> int:
        child = self._evaluate()
        return child.preferred_width() if child is not None else 0

    def preferred_height(self) -> int:
        child = self._evaluate()
        return child.preferred_height() if child is not None else 0

    def preferred_width_for(self, context: "RenderContext") -> int:
        child = self._evaluate()
        return child.preferred_width_for(context) if child is not None else 0

    def preferred_height_for(self, available_width: int, context: "RenderContext") -> int:
        child = self._evaluate()
        return child.preferred_height_for(available_width, context) if child is not None else 0

    def constraint(self) -> Optional[Constraint]:
        child = self._evaluate()
        return child.constraint() if child is not None else None

    def id(self) -> Optional[str]:
        child = self._evaluate()
        return child.id() if child is not None else None

    def is_focusable(self) -> bool:
        child = self._evaluate()
        return child is not None and child.is_focusable()

    def is_draggable(self) -> bool:
        child = self._evaluate()
        return child is not None and child.is_draggable()

    def key_event_handler(self) -> Optional[KeyEventHandler]:
        child = self._evaluate()
        return child.key_event_handler() if child is not None else None

    def mouse_event_handler(self) -> Optional[MouseEventHandler]:
        child = self._evaluate()
        return child.mouse_event_handler() if child is not None else None

    def drag_handler(self) -> Optional[DragHandler]:
        child = self._evaluate()
        return child.drag_handler() if child is not None else None

    def handle_key_event(self, event: KeyEvent, focused: bool) -> EventResult:
        child = self._evaluate()
        if child is None:
            return EventResult.UNHANDLED
        return child.handle_key_event(event, focused)

    def handle_mouse_event(self, event: MouseEvent) -> EventResult:
        child = self._evaluate()
        if child is None:
            return EventResult.UNHANDLED
        return child.handle_mouse_event(event)

    def rendered_area(self) -> Optional[Rect]:
        child = self._evaluate()
        return child.rendered_area() if child is not None else None
