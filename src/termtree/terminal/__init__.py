"""Cell buffer, frame and the console-backed terminal driver."""

from .buffer import Buffer, Cell
from .console import ConsoleBackend, Terminal, render_to_text
from .frame import Frame, SizedWidget, Widget

__all__ = [
    "Buffer",
    "Cell",
    "ConsoleBackend",
    "Frame",
    "SizedWidget",
    "Terminal",
    "Widget",
    "render_to_text",
]
