from __future__ import annotations

from pathlib import Path

import pytest

from termtree.css import (
    CompoundSelector,
    StylesheetError,
    StyleTarget,
    load_stylesheet,
    parse_selector,
    parse_stylesheet,
)


def test_parse_rules_in_source_order_with_comments() -> None:
    sheet = parse_stylesheet(
        """
        /* base */
        * { color: white; }
        Column.sidebar { spacing: 1; background: #202020 }
        """
    )

    assert len(sheet) == 2
    first, second = sheet.rules
    assert first.properties == {"color": "white"}
    assert second.properties == {"spacing": "1", "background": "#202020"}
    assert (first.order, second.order) == (0, 1)


def test_selector_list_yields_one_rule_per_selector() -> None:
    sheet = parse_stylesheet("Text, #title { text-style: bold; }")

    assert [str(rule.selector) for rule in sheet.rules] == ["Text", "#title"]
    assert {rule.order for rule in sheet.rules} == {0}


def test_rules_without_declarations_are_dropped() -> None:
    assert len(parse_stylesheet("Text { }")) == 0


def test_compound_selector_components() -> None:
    selector = parse_selector("Gauge-filled#cpu.warn[role=meter]:focus")
    (part,) = selector.parts

    assert part == CompoundSelector(
        type_name="Gauge-filled",
        id="cpu",
        classes=("warn",),
        attributes=(("role", "meter"),),
        focus=True,
    )
    assert selector.specificity == (1, 3, 1)


def test_descendant_selector_and_quoted_attribute() -> None:
    selector = parse_selector('Column#app Text[label="a b"]')

    assert len(selector.parts) == 2
    assert selector.parts[1].attributes == (("label", "a b"),)
    assert selector.specificity == (1, 1, 2)


def test_universal_selector_has_zero_specificity() -> None:
    selector = parse_selector("*")

    assert selector.specificity == (0, 0, 0)
    assert selector.matches(StyleTarget(type_name="Anything"))


@pytest.mark.parametrize(
    "source",
    [
        "Text:hover { color: red; }",
        "Text..x { color: red; }",
        "#a#b { color: red; }",
        ".x Text$ { color: red; }",
        "Text { color red; }",
        "stray text",
    ],
)
def test_invalid_stylesheets_raise(source: str) -> None:
    with pytest.raises(StylesheetError):
        parse_stylesheet(source)


def test_stylesheet_error_is_a_value_error() -> None:
    assert issubclass(StylesheetError, ValueError)


def test_descendant_matching_walks_ancestors() -> None:
    selector = parse_selector("Column.outer Text")
    outer = StyleTarget(type_name="Column", classes=frozenset({"outer"}))
    inner = StyleTarget(type_name="Column")
    text = StyleTarget(type_name="Text")

    assert selector.matches(text, (outer, inner))
    assert not selector.matches(text, (inner,))
    assert not selector.matches(StyleTarget(type_name="Gauge"), (outer,))


def test_load_stylesheet_reads_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "theme.tcss"
    path.write_text("Text { color: red; }", encoding="utf-8")

    assert len(load_stylesheet(path)) == 1


def test_load_stylesheet_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(StylesheetError):
        load_stylesheet(tmp_path / "missing.tcss")
