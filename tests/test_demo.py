from __future__ import annotations

import io

from rich.console import Console

import termtree
from termtree import toolkit as tk
from termtree.css import StyleEngine
from termtree.demo import DEFAULT_STYLESHEET, DemoState, build_demo
from termtree.events import EventResult, KeyCode, KeyEvent
from termtree.terminal import ConsoleBackend, Terminal


def _terminal(width: int = 40, height: int = 12) -> Terminal:
    console = Console(file=io.StringIO(), width=width, color_system=None)
    return Terminal(
        ConsoleBackend(console), width, height, StyleEngine.from_source(DEFAULT_STYLESHEET)
    )


def _row_containing(lines: list[str], needle: str) -> str:
    return next(line for line in lines if needle in line)


def test_demo_state_wraps_selection() -> None:
    state = DemoState()

    assert state.on_key(KeyEvent(KeyCode.UP)) is EventResult.HANDLED
    assert state.selected == len(state.tasks) - 1
    assert state.on_key(KeyEvent(KeyCode.DOWN)) is EventResult.HANDLED
    assert state.selected == 0
    assert state.on_key(KeyEvent.of_char("x")) is EventResult.UNHANDLED


def test_demo_renders_title_and_tasks() -> None:
    terminal = _terminal()

    lines = terminal.render(build_demo()).plain_lines()

    assert lines[0].startswith("termtree demo")
    assert lines[1].strip() == ""
    assert _row_containing(lines, "fetch").startswith("> fetch")
    assert "60%" in _row_containing(lines, "build")
    assert terminal.registry.focus_chain() == ["tasks"]


def test_keys_on_focused_task_list_move_selection_across_frames() -> None:
    terminal = _terminal()
    state = DemoState()
    terminal.render(build_demo(state))

    terminal.dispatch(KeyEvent(KeyCode.TAB))
    assert terminal.dispatch(KeyEvent(KeyCode.DOWN)) is EventResult.HANDLED
    lines = terminal.render(build_demo(state)).plain_lines()

    assert state.selected == 1
    assert _row_containing(lines, "build").startswith("> build")
    assert _row_containing(lines, "fetch").startswith("  fetch")


def test_unfocused_task_list_ignores_arrow_keys() -> None:
    terminal = _terminal()
    state = DemoState()
    terminal.render(build_demo(state))

    assert terminal.dispatch(KeyEvent(KeyCode.DOWN)) is EventResult.UNHANDLED
    assert state.selected == 0


def test_toolkit_builds_the_same_tree_as_constructors() -> None:
    tree = tk.column(
        tk.text("a").length(1),
        tk.row(tk.text("b"), tk.gauge(0.5), spacing=1),
        tk.spacer(1),
        spacing=0,
    )

    lines = termtree.render_to_text(tree, 6, 3)

    assert lines[0] == "a     "
    assert lines[1].startswith("b")
    assert lines[2] == "      "
    assert isinstance(tree, termtree.Column)
    assert tk.length(2) == termtree.layout.Length(2)
