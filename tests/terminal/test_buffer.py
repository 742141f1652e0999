from __future__ import annotations

import pytest
from rich.style import Style

from termtree.layout import Rect
from termtree.terminal import Buffer, Cell


def test_new_buffer_is_blank() -> None:
    buffer = Buffer.empty(3, 2)

    assert buffer.plain_lines() == ["   ", "   "]
    assert buffer.get(2, 1) == Cell()


def test_get_outside_area_raises() -> None:
    buffer = Buffer(Rect(2, 1, 3, 2))

    assert buffer.get(2, 1).symbol == " "
    with pytest.raises(IndexError):
        buffer.get(0, 0)
    with pytest.raises(IndexError):
        buffer.get(5, 1)


def test_set_string_clips_at_right_edge() -> None:
    buffer = Buffer.empty(4, 1)

    end = buffer.set_string(2, 0, "abc")

    assert buffer.plain_lines() == ["  ab"]
    assert end == 4


def test_set_string_respects_max_width() -> None:
    buffer = Buffer.empty(6, 1)

    buffer.set_string(0, 0, "abcdef", max_width=2)

    assert buffer.plain_lines() == ["ab    "]


def test_set_string_skips_cells_left_of_buffer() -> None:
    buffer = Buffer.empty(3, 1)

    end = buffer.set_string(-1, 0, "abc")

    assert buffer.plain_lines() == ["bc "]
    assert end == 2


def test_set_string_outside_rows_is_ignored() -> None:
    buffer = Buffer.empty(3, 1)

    assert buffer.set_string(0, 3, "abc") == 0
    assert buffer.plain_lines() == ["   "]


def test_writes_patch_existing_styles() -> None:
    buffer = Buffer.empty(3, 1)

    buffer.set_style(Rect.of(3, 1), Style(bgcolor="blue"))
    buffer.set_string(0, 0, "x", Style(color="red"))
    buffer.fill(Rect(2, 0, 1, 1), "-", Style(bold=True))

    assert buffer.get(0, 0).style == Style(color="red", bgcolor="blue")
    assert buffer.get(1, 0).style == Style(bgcolor="blue")
    assert buffer.get(2, 0) == Cell("-", Style(bgcolor="blue", bold=True))


def test_set_style_ignores_area_outside_buffer() -> None:
    buffer = Buffer.empty(2, 2)

    buffer.set_style(Rect(5, 5, 2, 2), Style(bold=True))
    buffer.fill(Rect(1, 1, 4, 4), "#")

    assert buffer.plain_lines() == ["  ", " #"]
    assert buffer.get(0, 0).style == Style.null()


def test_to_text_lines_carries_styles_and_skips_wide_trailers() -> None:
    buffer = Buffer.empty(4, 1)
    buffer.set_string(0, 0, "日x", Style(color="red"))

    (line,) = buffer.to_text_lines()

    assert line.plain == "日x "
    assert line.spans[0].style == Style(color="red")
