from __future__ import annotations

from typing import List

import pytest

from termtree.css import StyleEngine
from termtree.element import DefaultRenderContext
from termtree.elements import Row, TextElement
from termtree.layout import Direction, Fill, Flex, Length, Rect, fit, length
from termtree.layout import solver as layout_solver
from tests.helpers.recording import RecordingElement, render_once


def test_row_splits_horizontally_with_spacing() -> None:
    left = RecordingElement("left", width=3, constraint=fit())
    right = RecordingElement("right")

    render_once(Row(left, right, spacing=2), 10, 1)

    assert left.rendered == [Rect(0, 0, 3, 1)]
    assert right.rendered == [Rect(5, 0, 5, 1)]


def test_row_passes_horizontal_direction_to_solver(monkeypatch: pytest.MonkeyPatch) -> None:
    directions: List[Direction] = []
    real_split = layout_solver.split

    def spy(constraints, area, direction=Direction.VERTICAL, flex=Flex.START):
        directions.append(direction)
        return real_split(constraints, area, direction, flex)

    monkeypatch.setattr(layout_solver, "split", spy)

    render_once(Row(RecordingElement()), 4, 2)

    assert directions == [Direction.HORIZONTAL]


def test_row_uses_horizontal_gutter_and_css_width(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []
    real_split = layout_solver.split

    def spy(constraints, area, direction=Direction.VERTICAL, flex=Flex.START):
        seen.append(list(constraints))
        return real_split(constraints, area, direction, flex)

    monkeypatch.setattr(layout_solver, "split", spy)
    engine = StyleEngine.from_source("Row { spacing: 2 5; } Recording { width: 4; height: 9; }")

    render_once(Row(RecordingElement(), RecordingElement()), 20, 3, DefaultRenderContext(engine))

    assert seen == [[Length(4), Length(2), Length(4)]]


def test_zero_width_row_renders_nothing() -> None:
    child = RecordingElement()

    _, context = render_once(Row(child, spacing=1), 0, 5)

    assert child.rendered == []
    assert len(context.registry) == 0


def test_row_children_render_left_to_right() -> None:
    row = Row(TextElement("ab").fit(), TextElement("cd"), spacing=1)

    buffer, _ = render_once(row, 6, 1)

    assert buffer.plain_lines() == ["ab cd "]


def test_row_preferred_sizes() -> None:
    row = Row(
        RecordingElement(width=2, height=3),
        RecordingElement(width=5, height=1),
        spacing=1,
    )

    assert row.preferred_width() == 8
    assert row.preferred_height() == 3
    assert row.preferred_height_for(4, DefaultRenderContext.create_empty()) == 3
    assert Row().preferred_height() == 0


def test_default_constraint_is_fill() -> None:
    row = Row(RecordingElement(), RecordingElement())

    constraints = row.build_constraints(Rect.of(10, 1), DefaultRenderContext.create_empty(), 0)

    assert constraints == [Fill(), Fill()]


def test_flex_space_between_pushes_children_to_the_edges() -> None:
    row = Row(TextElement("a").length(1), TextElement("b").length(1), flex=Flex.SPACE_BETWEEN)

    buffer, _ = render_once(row, 5, 1)

    assert buffer.plain_lines() == ["a   b"]


def test_cascade_flex_and_margin_apply_to_rows() -> None:
    engine = StyleEngine.from_source("Row { flex: center; margin: 0 1; }")
    row = Row(TextElement("ab").fit())

    buffer, _ = render_once(row, 8, 1, DefaultRenderContext(engine))

    assert buffer.plain_lines() == ["   ab   "]


def test_fit_row_with_cascade_spacing_is_measured_with_it() -> None:
    engine = StyleEngine.from_source("Row.inner { spacing: 1; }")
    inner = Row(TextElement("ab").fit(), TextElement("cd").fit(), classes=["inner"]).fit()
    context = DefaultRenderContext(engine)

    buffer, _ = render_once(Row(inner, TextElement("z")), 8, 1, context)

    assert inner.preferred_width() == 4
    assert inner.preferred_width_for(context) == 5
    assert buffer.plain_lines() == ["ab cdz  "]


def test_child_widths_respect_fixed_and_fit_children() -> None:
    row = Row(
        RecordingElement(constraint=length(4)),
        RecordingElement(),
        RecordingElement(width=3, constraint=fit()),
    )

    assert row.child_widths(13, DefaultRenderContext.create_empty()) == [4, 6, 3]


def test_wrapped_text_height_uses_the_width_left_by_siblings() -> None:
    row = Row(TextElement("xxxx").length(4), TextElement("aa bb cc dd", wrap=True))

    assert row.preferred_height_for(12, DefaultRenderContext.create_empty()) == 2


def test_flexible_children_share_the_width_when_measuring_height() -> None:
    row = Row(TextElement("aa bb", wrap=True), TextElement("cc dd", wrap=True))

    assert row.preferred_height_for(6, DefaultRenderContext.create_empty()) == 2
    assert row.preferred_height_for(10, DefaultRenderContext.create_empty()) == 1
