"""Drive render passes and flush their buffers to a ``rich`` console."""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console

from termtree.css.engine import StyleEngine
from termtree.element.context import DefaultRenderContext
from termtree.element.element import Element
from termtree.element.registry import ElementRegistry, FocusManager
from termtree.element.router import EventRouter
from termtree.events import Event, EventResult
from termtree.layout.rect import Rect

from .buffer import Buffer
from .frame import Frame

__all__ = ["ConsoleBackend", "Terminal", "render_to_text"]

logger = logging.getLogger(__name__)


class ConsoleBackend:
    """Writes buffers to a ``rich`` console, one unwrapped line per row."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def size(self) -> tuple[int, int]:
        return self.console.width, self.console.height

    def draw(self, buffer: Buffer) -> None:
        for line in buffer.to_text_lines():
            self.console.print(line, no_wrap=True, overflow="crop", crop=True)


class Terminal:
    """
    Runs render passes for an element tree.

    Each :meth:`draw` builds a fresh buffer and render context, so nothing
    registered during one frame survives into the next. Focus and event
    routing state persist across frames.
    """

    def __init__(
        self,
        backend: Optional[ConsoleBackend] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        style_engine: Optional[StyleEngine] = None,
    ) -> None:
        self.backend = backend or ConsoleBackend()
        default_width, default_height = self.backend.size()
        self.width = width if width is not None else default_width
        self.height = height if height is not None else default_height
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Terminal size must be non-negative: {self.width}x{self.height}")
        self.style_engine = style_engine
        self.focus_manager = FocusManager()
        self.router = EventRouter(self.focus_manager)
        self.last_buffer: Optional[Buffer] = None
        self.frame_count = 0

    @property
    def area(self) -> Rect:
        return Rect.of(self.width, self.height)

    @property
    def registry(self) -> ElementRegistry:
        return self.router.registry

    def render(self, root: Element) -> Buffer:
        """Render *root* off-screen and bind focus and routing to the result."""

        buffer = Buffer(self.area)
        context = DefaultRenderContext(self.style_engine, self.focus_manager)
        context.render_child(root, Frame(buffer), buffer.area)
        self.focus_manager.sync(context.registry.focus_chain())
        self.router.bind(context.registry)
        self.last_buffer = buffer
        self.frame_count += 1
        logger.debug(
            "Frame %d rendered: %d elements registered, focus=%r",
            self.frame_count,
            len(context.registry),
            self.focus_manager.focused_id,
        )
        return buffer

    def draw(self, root: Element) -> Buffer:
        buffer = self.render(root)
        self.backend.draw(buffer)
        return buffer

    def dispatch(self, event: Event) -> EventResult:
        return self.router.route(event)


def render_to_text(
    root: Element,
    width: int,
    height: int,
    style_engine: Optional[StyleEngine] = None,
) -> List[str]:
    """Render *root* into a ``width`` x ``height`` buffer and return its plain rows."""

    buffer = Buffer(Rect.of(width, height))
    context = DefaultRenderContext(style_engine)
    context.render_child(root, Frame(buffer), buffer.area)
    return buffer.plain_lines()
