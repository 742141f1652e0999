from __future__ import annotations

from typing import List, Tuple

from termtree.element import ElementRegistry, EventRouter, FocusManager, StyledElement
from termtree.events import (
    Event,
    EventResult,
    KeyCode,
    KeyEvent,
    MouseButton,
    MouseEvent,
    MouseEventKind,
)
from termtree.layout import Rect


class Box(StyledElement):
    def render_content(self, frame, area, context) -> None:
        return None


class RecordingDrag:
    def __init__(self) -> None:
        self.calls: List[Tuple] = []

    def on_drag_start(self, x: int, y: int) -> None:
        self.calls.append(("start", x, y))

    def on_drag(self, x: int, y: int, delta_x: int, delta_y: int) -> None:
        self.calls.append(("drag", x, y, delta_x, delta_y))

    def on_drag_end(self, x: int, y: int) -> None:
        self.calls.append(("end", x, y))


def _recorder(log: List[str], name: str, result: EventResult = EventResult.HANDLED):
    def handler(event: Event) -> EventResult:
        log.append(name)
        return result

    return handler


def _router(*entries: Tuple[StyledElement, Rect]) -> EventRouter:
    registry = ElementRegistry()
    for element, area in entries:
        registry.register(element, area)
    focus = FocusManager()
    focus.sync(registry.focus_chain())
    router = EventRouter(focus)
    router.bind(registry)
    return router


def _press(x: int, y: int, button: MouseButton = MouseButton.LEFT) -> MouseEvent:
    return MouseEvent(MouseEventKind.PRESS, x, y, button)


def test_tab_and_backtab_move_focus() -> None:
    router = _router(
        (Box(id="a", focusable=True), Rect(0, 0, 2, 1)),
        (Box(id="b", focusable=True), Rect(2, 0, 2, 1)),
    )

    assert router.route(KeyEvent(KeyCode.TAB)).is_handled
    assert router.focus_manager.focused_id == "a"
    router.route(KeyEvent(KeyCode.TAB))
    assert router.focus_manager.focused_id == "b"
    router.route(KeyEvent(KeyCode.BACKTAB))
    assert router.focus_manager.focused_id == "a"


def test_tab_without_focusable_elements_is_unhandled() -> None:
    router = _router((Box(), Rect.of(2, 2)))

    assert router.route(KeyEvent(KeyCode.TAB)) is EventResult.UNHANDLED


def test_key_goes_to_focused_element_before_global_handlers() -> None:
    log: List[str] = []
    focused = Box(id="f", focusable=True, on_key=_recorder(log, "focused"))
    router = _router((focused, Rect.of(2, 2)))
    router.add_global_handler(_recorder(log, "global"))
    router.focus_manager.set_focus("f")

    assert router.route(KeyEvent.of_char("x")).is_handled
    assert log == ["focused"]


def test_unhandled_key_reaches_global_handlers_then_elements() -> None:
    log: List[str] = []
    focused = Box(id="f", focusable=True, on_key=_recorder(log, "focused", EventResult.UNHANDLED))

    class Hotkey(Box):
        def handle_key_event(self, event: KeyEvent, focused: bool) -> EventResult:
            log.append(f"hotkey focused={focused}")
            return EventResult.HANDLED

    router = _router((focused, Rect.of(2, 2)), (Hotkey(), Rect.of(2, 2)))
    router.add_global_handler(_recorder(log, "global", EventResult.UNHANDLED))
    router.focus_manager.set_focus("f")

    assert router.route(KeyEvent.of_char("q")).is_handled
    assert log == ["focused", "global", "hotkey focused=False"]


def test_removed_global_handler_is_not_called() -> None:
    log: List[str] = []
    handler = _recorder(log, "global")
    router = _router()
    router.add_global_handler(handler)

    assert router.remove_global_handler(handler)
    assert not router.remove_global_handler(handler)
    assert router.route(KeyEvent.of_char("x")) is EventResult.UNHANDLED
    assert log == []


def test_escape_clears_focus_when_nothing_handles_it() -> None:
    router = _router((Box(id="a", focusable=True), Rect.of(2, 2)))
    router.focus_manager.set_focus("a")

    assert router.route(KeyEvent(KeyCode.ESCAPE)).is_handled
    assert router.focus_manager.focused_id is None
    assert router.route(KeyEvent(KeyCode.ESCAPE)) is EventResult.UNHANDLED


def test_press_focuses_topmost_focusable_element() -> None:
    outer = Box(id="outer", focusable=True)
    inner = Box(id="inner", focusable=True)
    router = _router((outer, Rect.of(10, 10)), (inner, Rect(2, 2, 3, 3)))

    assert router.route(_press(3, 3)).is_handled
    assert router.focus_manager.focused_id == "inner"
    router.route(_press(8, 8))
    assert router.focus_manager.focused_id == "outer"


def test_press_outside_everything_clears_focus() -> None:
    router = _router((Box(id="a", focusable=True), Rect.of(2, 2)))
    router.focus_manager.set_focus("a")

    assert router.route(_press(5, 5)) is EventResult.UNHANDLED
    assert router.focus_manager.focused_id is None


def test_press_falls_through_to_element_underneath() -> None:
    log: List[str] = []
    under = Box(on_mouse=_recorder(log, "under"))
    over = Box(on_mouse=_recorder(log, "over", EventResult.UNHANDLED))
    router = _router((under, Rect.of(4, 4)), (over, Rect.of(4, 4)))

    assert router.route(_press(1, 1)).is_handled
    assert log == ["over", "under"]


def test_drag_lifecycle() -> None:
    drag = RecordingDrag()
    handle = Box(on_drag=drag)
    router = _router((handle, Rect(0, 0, 3, 1)))

    router.route(_press(1, 0))
    assert router.is_dragging
    router.route(MouseEvent(MouseEventKind.DRAG, 4, 2))
    router.route(MouseEvent(MouseEventKind.RELEASE, 5, 2))

    assert drag.calls == [("start", 1, 0), ("drag", 4, 2, 3, 2), ("end", 5, 2)]
    assert not router.is_dragging


def test_escape_cancels_active_drag() -> None:
    drag = RecordingDrag()
    router = _router((Box(on_drag=drag), Rect.of(3, 3)))
    router.route(_press(0, 0))

    assert router.route(KeyEvent(KeyCode.ESCAPE)).is_handled
    assert not router.is_dragging
    assert router.route(MouseEvent(MouseEventKind.DRAG, 2, 2)) is EventResult.UNHANDLED


def test_scroll_goes_to_element_under_pointer() -> None:
    log: List[str] = []
    left = Box(on_mouse=_recorder(log, "left"))
    right = Box(on_mouse=_recorder(log, "right"))
    router = _router((left, Rect(0, 0, 2, 2)), (right, Rect(2, 0, 2, 2)))

    assert router.route(MouseEvent(MouseEventKind.SCROLL_DOWN, 3, 1)).is_handled
    assert log == ["right"]


def test_global_handler_sees_mouse_events_first() -> None:
    log: List[str] = []
    box = Box(on_mouse=_recorder(log, "box"))
    router = _router((box, Rect.of(2, 2)))
    router.add_global_handler(_recorder(log, "global"))

    router.route(_press(0, 0))

    assert log == ["global"]


def test_right_button_press_does_not_change_focus() -> None:
    router = _router((Box(id="a", focusable=True), Rect.of(2, 2)))

    router.route(_press(0, 0, MouseButton.RIGHT))

    assert router.focus_manager.focused_id is None


def test_bind_cancels_drag_when_source_leaves_tree() -> None:
    drag = RecordingDrag()
    router = _router((Box(on_drag=drag), Rect.of(3, 3)))
    router.route(_press(0, 0))

    router.bind(ElementRegistry())

    assert not router.is_dragging
