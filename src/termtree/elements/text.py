"""Leaf text node."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from rich.cells import cell_len, chop_cells

from termtree.element.styled import StyledElement
from termtree.layout.rect import Rect

if TYPE_CHECKING:
    from termtree.element.context import RenderContext
    from termtree.terminal.frame import Frame

__all__ = ["TextElement", "wrap_lines"]


def wrap_lines(content: str, width: int) -> List[str]:
    """Word-wrap *content* to *width* cells; words longer than a line are chopped."""

    if width <= 0:
        return []
    wrapped: List[str] = []
    for paragraph in content.split("\n"):
        line = ""
        for word in paragraph.split():
            candidate = f"{line} {word}" if line else word
            if cell_len(candidate) <= width:
                line = candidate
                continue
            if line:
                wrapped.append(line)
            if cell_len(word) <= width:
                line = word
                continue
            pieces = chop_cells(word, width)
            wrapped.extend(pieces[:-1])
            line = pieces[-1]
        wrapped.append(line)
    return wrapped


class TextElement(StyledElement):
    """
    Text drawn with the current cascading style.

    Without ``wrap`` each line of ``content`` occupies one row and is cut at
    the right edge; with ``wrap`` lines are word-wrapped to the area width.
    """

    def __init__(self, content: str = "", *, wrap: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.content = str(content)
        self.wrap = wrap

    def lines(self) -> List[str]:
        return self.content.split("\n")

    def preferred_width(self) -> int:
        return max((cell_len(line) for line in self.lines()), default=0)

    def preferred_height(self) -> int:
        return len(self.lines())

    def preferred_height_for(self, available_width: int, context: "RenderContext") -> int:
        if not self.wrap:
            return self.preferred_height()
        return len(wrap_lines(self.content, available_width))

    def render_content(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        style = context.current_style()
        lines = wrap_lines(self.content, area.width) if self.wrap else self.lines()
        if style:
            frame.buffer.set_style(area, style)
        for offset, line in enumerate(lines[: area.height]):
            frame.buffer.set_string(area.x, area.y + offset, line, style, max_width=area.width)
