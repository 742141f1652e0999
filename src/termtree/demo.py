"""Built-in demo tree rendered by ``termtree render``."""

from __future__ import annotations

from typing import Dict, List

from termtree import toolkit as tk
from termtree.element import Element
from termtree.events import EventResult, KeyCode, KeyEvent

DEFAULT_STYLESHEET = """
/* Default demo theme */
Column#app { spacing: 1; }
Text.title { text-style: bold; color: cyan; }
Text.muted { text-style: dim; }
Gauge-filled { background: green; color: black; }
Row.tasks { spacing: 2; }
"""

_TASKS: List[Dict[str, object]] = [
    {"name": "fetch", "ratio": 1.0},
    {"name": "build", "ratio": 0.6},
    {"name": "test", "ratio": 0.25},
]


class DemoState:
    """Mutable state captured by the demo's lazy nodes."""

    def __init__(self) -> None:
        self.selected = 0
        self.tasks = [dict(task) for task in _TASKS]

    def on_key(self, event: KeyEvent) -> EventResult:
        if event.code is KeyCode.DOWN:
            self.selected = (self.selected + 1) % len(self.tasks)
            return EventResult.HANDLED
        if event.code is KeyCode.UP:
            self.selected = (self.selected - 1) % len(self.tasks)
            return EventResult.HANDLED
        return EventResult.UNHANDLED


def _task_row(state: DemoState, index: int) -> Element:
    task = state.tasks[index]
    marker = ">" if index == state.selected else " "
    label = tk.text(f"{marker} {task['name']}").length(10)
    if index == state.selected:
        label.bold()
    return tk.row(
        label,
        tk.gauge(float(task["ratio"])).fill(),  # type: ignore[arg-type]
        classes=["tasks"],
    ).length(1)


def build_demo(state: DemoState | None = None) -> Element:
    """Return the demo tree; lazy nodes re-read *state* on every render."""

    state = state or DemoState()
    tasks = tk.column(
        *(tk.lazy(lambda index=index: _task_row(state, index)) for index in range(len(state.tasks)))
    )
    return tk.column(
        tk.text("termtree demo", classes=["title"]).length(1),
        tk.text("Arrow keys move the selection; Tab cycles focus.", classes=["muted"], wrap=True).fit(),
        tasks.focusable().set_id("tasks").on_key(state.on_key),
        tk.spacer(),
        id="app",
    )
