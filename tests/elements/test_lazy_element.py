from __future__ import annotations

from typing import List

import pytest

from termtree.element import DefaultRenderContext
from termtree.elements import Column, LazyElement, LazyState, TextElement
from termtree.events import EventResult, KeyCode, KeyEvent
from termtree.layout import Length, Rect, length
from tests.helpers.recording import RecordingElement, render_once


class CountingProducer:
    def __init__(self, **child_kwargs) -> None:
        self.child_kwargs = child_kwargs
        self.produced: List[RecordingElement] = []

    def __call__(self) -> RecordingElement:
        child = RecordingElement(f"child{len(self.produced)}", **self.child_kwargs)
        self.produced.append(child)
        return child


def test_null_producer_is_rejected() -> None:
    with pytest.raises(ValueError):
        LazyElement(None)  # type: ignore[arg-type]


def test_producer_is_not_called_on_construction() -> None:
    producer = CountingProducer()

    lazy = LazyElement(producer)

    assert producer.produced == []
    assert lazy.state is LazyState.UNEVALUATED


def test_queries_before_render_evaluate_once() -> None:
    producer = CountingProducer(width=4, height=2, constraint=length(2))
    lazy = LazyElement(producer)

    assert lazy.preferred_width() == 4
    assert lazy.preferred_height() == 2
    assert lazy.preferred_width_for(DefaultRenderContext.create_empty()) == 4
    assert lazy.constraint() == Length(2)
    assert not lazy.is_focusable()

    assert len(producer.produced) == 1
    assert lazy.state is LazyState.EVALUATED


def test_each_render_uses_a_fresh_child() -> None:
    producer = CountingProducer()
    lazy = LazyElement(producer)

    render_once(lazy, 3, 1)
    render_once(lazy, 5, 2)

    first, second = producer.produced
    assert first.rendered == [Rect(0, 0, 3, 1)]
    assert second.rendered == [Rect(0, 0, 5, 2)]


def test_queries_after_render_reuse_the_rendered_child() -> None:
    producer = CountingProducer(width=7)
    lazy = LazyElement(producer)

    render_once(lazy, 3, 1)
    assert lazy.preferred_width() == 7

    assert len(producer.produced) == 1


def test_empty_area_does_not_call_producer() -> None:
    producer = CountingProducer()
    lazy = LazyElement(producer)

    render_once(lazy, 0, 0)

    assert producer.produced == []
    assert lazy.state is LazyState.UNEVALUATED


def test_null_child_yields_neutral_defaults() -> None:
    lazy = LazyElement(lambda: None)

    assert lazy.preferred_width() == 0
    assert lazy.preferred_height() == 0
    assert lazy.preferred_height_for(10, DefaultRenderContext.create_empty()) == 0
    assert lazy.preferred_width_for(DefaultRenderContext.create_empty()) == 0
    assert lazy.constraint() is None
    assert lazy.id() is None
    assert not lazy.is_focusable()
    assert not lazy.is_draggable()
    assert lazy.key_event_handler() is None
    assert lazy.mouse_event_handler() is None
    assert lazy.drag_handler() is None
    assert lazy.rendered_area() is None
    assert lazy.handle_key_event(KeyEvent(KeyCode.ENTER), True) is EventResult.UNHANDLED

    _, context = render_once(lazy, 4, 4)
    assert context.registry.elements() == [lazy]


def test_lazy_reflects_state_changes_between_renders() -> None:
    state = {"label": "before"}
    lazy = LazyElement(lambda: TextElement(state["label"]))

    first, _ = render_once(Column(lazy), 8, 1)
    state["label"] = "after"
    second, _ = render_once(Column(lazy), 8, 1)

    assert first.plain_lines() == ["before  "]
    assert second.plain_lines() == ["after   "]


def test_delegates_key_events_to_child() -> None:
    seen: List[KeyEvent] = []

    def on_key(event: KeyEvent) -> EventResult:
        seen.append(event)
        return EventResult.HANDLED

    lazy = LazyElement(lambda: TextElement("x", id="t", focusable=True, on_key=on_key))

    assert lazy.id() == "t"
    assert lazy.is_focusable()
    assert lazy.handle_key_event(KeyEvent(KeyCode.ENTER), True) is EventResult.HANDLED
    assert len(seen) == 1
