"""Routes keyboard and mouse events to the elements of the latest frame."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from termtree.events import (
    DragHandler,
    Event,
    EventResult,
    GlobalEventHandler,
    KeyEvent,
    MouseEvent,
    MouseEventKind,
)

from .element import Element
from .registry import ElementRegistry, FocusManager

__all__ = ["EventRouter"]

logger = logging.getLogger(__name__)

_POINTER_KINDS = (MouseEventKind.MOVE, MouseEventKind.SCROLL_UP, MouseEventKind.SCROLL_DOWN)


class EventRouter:
    """
    Dispatches input events by focus and position.

    The router survives across frames; each frame rebinds it to that frame's
    registry with :meth:`bind`. Key events reach the focused element first,
    then global handlers, then every other element with ``focused=False``.
    Mouse events reach global handlers first, then the elements under the
    pointer, topmost first.
    """

    def __init__(self, focus_manager: FocusManager) -> None:
        self.focus_manager = focus_manager
        self._registry = ElementRegistry()
        self._global_handlers: List[GlobalEventHandler] = []
        self._drag_element: Optional[Element] = None
        self._drag_handler: Optional[DragHandler] = None
        self._drag_origin: Tuple[int, int] = (0, 0)

    @property
    def registry(self) -> ElementRegistry:
        return self._registry

    def bind(self, registry: ElementRegistry) -> None:
        self._registry = registry
        if self._drag_element is not None and self._drag_element not in registry:
            logger.debug("Drag source left the tree; cancelling drag")
            self.cancel_drag()

    def add_global_handler(self, handler: GlobalEventHandler) -> None:
        self._global_handlers.append(handler)

    def remove_global_handler(self, handler: GlobalEventHandler) -> bool:
        try:
            self._global_handlers.remove(handler)
        except ValueError:
            return False
        return True

    @property
    def is_dragging(self) -> bool:
        return self._drag_element is not None

    def cancel_drag(self) -> None:
        self._drag_element = None
        self._drag_handler = None

    def route(self, event: Event) -> EventResult:
        if isinstance(event, KeyEvent):
            return self._route_key(event)
        result = self._offer_global(event)
        if result.is_handled:
            return result
        if isinstance(event, MouseEvent):
            return self._route_mouse(event)
        return EventResult.UNHANDLED

    def _offer_global(self, event: Event) -> EventResult:
        for handler in list(self._global_handlers):
            if handler(event).is_handled:
                return EventResult.HANDLED
        return EventResult.UNHANDLED

    def _route_key(self, event: KeyEvent) -> EventResult:
        if event.is_focus_next:
            return EventResult.HANDLED if self.focus_manager.focus_next() else EventResult.UNHANDLED
        if event.is_focus_previous:
            return (
                EventResult.HANDLED if self.focus_manager.focus_previous() else EventResult.UNHANDLED
            )
        if event.is_cancel and self._drag_element is not None:
            self.cancel_drag()
            return EventResult.HANDLED

        focused = self._registry.find_by_id(self.focus_manager.focused_id)
        if focused is not None and focused.handle_key_event(event, True).is_handled:
            return EventResult.HANDLED

        if self._offer_global(event).is_handled:
            return EventResult.HANDLED

        for element in self._registry.elements():
            if element is focused:
                continue
            if element.handle_key_event(event, False).is_handled:
                return EventResult.HANDLED

        if event.is_cancel and self.focus_manager.focused_id is not None:
            self.focus_manager.clear_focus()
            return EventResult.HANDLED
        return EventResult.UNHANDLED

    def _route_mouse(self, event: MouseEvent) -> EventResult:
        if self._drag_element is not None and self._drag_handler is not None:
            if event.kind is MouseEventKind.DRAG:
                origin_x, origin_y = self._drag_origin
                self._drag_handler.on_drag(event.x, event.y, event.x - origin_x, event.y - origin_y)
                return EventResult.HANDLED
            if event.kind is MouseEventKind.RELEASE:
                handler = self._drag_handler
                self.cancel_drag()
                handler.on_drag_end(event.x, event.y)
                return EventResult.HANDLED

        if event.kind is MouseEventKind.PRESS and event.is_left_button:
            return self._route_press(event)

        if event.kind in _POINTER_KINDS:
            for element in self._registry.elements_at(event.x, event.y):
                if element.handle_mouse_event(event).is_handled:
                    return EventResult.HANDLED
        return EventResult.UNHANDLED

    def _route_press(self, event: MouseEvent) -> EventResult:
        for element in self._registry.elements_at(event.x, event.y):
            focused = False
            element_id = element.id()
            if element.is_focusable() and element_id is not None:
                focused = self.focus_manager.set_focus(element_id)

            drag_handler = element.drag_handler() if element.is_draggable() else None
            if drag_handler is not None:
                self._drag_element = element
                self._drag_handler = drag_handler
                self._drag_origin = (event.x, event.y)
                drag_handler.on_drag_start(event.x, event.y)
                return EventResult.HANDLED

            if element.handle_mouse_event(event).is_handled or focused:
                return EventResult.HANDLED

        self.focus_manager.clear_focus()
        return EventResult.UNHANDLED
