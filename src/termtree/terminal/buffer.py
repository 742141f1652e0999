"""Cell buffer that elements draw into during a render pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rich.cells import cell_len
from rich.style import Style
from rich.text import Text

from termtree.layout.rect import Rect

__all__ = ["Buffer", "Cell"]


def _null_style() -> Style:
    return Style.null()


@dataclass
class Cell:
    """One terminal cell. A wide character leaves an empty ``symbol`` in its trailing cell."""

    symbol: str = " "
    style: Style = field(default_factory=_null_style)


class Buffer:
    """Grid of cells covering ``area``; all writes are clipped to that area."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._rows: List[List[Cell]] = [
            [Cell() for _ in range(area.width)] for _ in range(area.height)
        ]

    @classmethod
    def empty(cls, width: int, height: int) -> "Buffer":
        return cls(Rect.of(width, height))

    def _cell(self, x: int, y: int) -> Optional[Cell]:
        if not self.area.contains(x, y):
            return None
        return self._rows[y - self.area.y][x - self.area.x]

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raises ``IndexError`` outside the buffer."""

        cell = self._cell(x, y)
        if cell is None:
            raise IndexError(f"({x}, {y}) is outside buffer area {self.area}")
        return cell

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        max_width: Optional[int] = None,
    ) -> int:
        """
        Write *text* starting at ``(x, y)`` and return the column after the last cell written.

        Characters that would cross the right edge, or extend past *max_width*
        cells, are dropped; zero-width characters are skipped. *style* is
        patched onto the style already in each written cell.
        """

        applied = style or Style.null()
        limit = self.area.right if max_width is None else min(self.area.right, x + max_width)
        if y < self.area.top or y >= self.area.bottom:
            return x
        column = x
        for char in text:
            width = cell_len(char)
            if width == 0:
                continue
            if column + width > limit:
                break
            if column >= self.area.left:
                cell = self._rows[y - self.area.y][column - self.area.x]
                cell.symbol = char
                cell.style = cell.style + applied
                for offset in range(1, width):
                    trailing = self._rows[y - self.area.y][column + offset - self.area.x]
                    trailing.symbol = ""
                    trailing.style = trailing.style + applied
            column += width
        return column

    def set_style(self, rect: Rect, style: Style) -> None:
        """Patch *style* onto every cell of *rect* that lies inside the buffer."""

        overlap = self.area.intersection(rect)
        if overlap is None or not style:
            return
        for row in overlap.rows():
            for column in range(row.left, row.right):
                cell = self._rows[row.y - self.area.y][column - self.area.x]
                cell.style = cell.style + style

    def fill(self, rect: Rect, symbol: str = " ", style: Optional[Style] = None) -> None:
        """Set every cell of *rect* to *symbol*, patching *style* onto each."""

        overlap = self.area.intersection(rect)
        if overlap is None:
            return
        applied = style or Style.null()
        for row in overlap.rows():
            for column in range(row.left, row.right):
                cell = self._rows[row.y - self.area.y][column - self.area.x]
                cell.symbol = symbol
                cell.style = cell.style + applied

    def plain_lines(self) -> List[str]:
        return ["".join(cell.symbol for cell in row) for row in self._rows]

    def to_text_lines(self) -> List[Text]:
        """Return one styled ``rich`` text per buffer row."""

        lines: List[Text] = []
        for row in self._rows:
            line = Text(no_wrap=True, overflow="crop")
            for cell in row:
                if not cell.symbol:
                    continue
                line.append(cell.symbol, style=cell.style or None)
            lines.append(line)
        return lines
