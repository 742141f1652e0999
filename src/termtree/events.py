"""Keyboard and mouse input events routed through the element tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Union

__all__ = [
    "DragHandler",
    "Event",
    "EventResult",
    "GlobalEventHandler",
    "KeyCode",
    "KeyEvent",
    "KeyEventHandler",
    "MouseButton",
    "MouseEvent",
    "MouseEventHandler",
    "MouseEventKind",
]


class EventResult(str, Enum):
    """Outcome of offering an event to a handler."""

    HANDLED = "handled"
    UNHANDLED = "unhandled"

    @property
    def is_handled(self) -> bool:
        return self is EventResult.HANDLED


class KeyCode(str, Enum):
    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    TAB = "tab"
    BACKTAB = "backtab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` is set only for :attr:`KeyCode.CHAR`."""

    code: KeyCode
    char: Optional[str] = None
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @classmethod
    def of_char(cls, char: str, *, ctrl: bool = False, alt: bool = False) -> "KeyEvent":
        return cls(KeyCode.CHAR, char=char, ctrl=ctrl, alt=alt)

    @property
    def is_focus_next(self) -> bool:
        return self.code is KeyCode.TAB and not self.shift

    @property
    def is_focus_previous(self) -> bool:
        return self.code is KeyCode.BACKTAB or (self.code is KeyCode.TAB and self.shift)

    @property
    def is_cancel(self) -> bool:
        return self.code is KeyCode.ESCAPE


class MouseEventKind(str, Enum):
    PRESS = "press"
    RELEASE = "release"
    DRAG = "drag"
    MOVE = "move"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


class MouseButton(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    NONE = "none"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at cell ``(x, y)``."""

    kind: MouseEventKind
    x: int
    y: int
    button: MouseButton = MouseButton.LEFT

    @property
    def is_left_button(self) -> bool:
        return self.button is MouseButton.LEFT


Event = Union[KeyEvent, MouseEvent]
KeyEventHandler = Callable[[KeyEvent], EventResult]
MouseEventHandler = Callable[[MouseEvent], EventResult]
GlobalEventHandler = Callable[[Event], EventResult]


class DragHandler(Protocol):
    """Receives the phases of a drag started on a draggable element."""

    def on_drag_start(self, x: int, y: int) -> None:
        ...

    def on_drag(self, x: int, y: int, delta_x: int, delta_y: int) -> None:
        ...

    def on_drag_end(self, x: int, y: int) -> None:
        ...
