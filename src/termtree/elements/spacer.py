"""Empty node occupying space in a container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from termtree.element.element import Element
from termtree.layout.constraint import Constraint, Fill, Length
from termtree.layout.rect import Rect

if TYPE_CHECKING:
    from termtree.element.context import RenderContext
    from termtree.terminal.frame import Frame

__all__ = ["Spacer"]


class Spacer(Element):
    """Takes ``length`` cells along the parent's axis, or fills leftover space when ``None``."""

    def __init__(self, length: Optional[int] = None) -> None:
        self._constraint: Constraint = Length(length) if length is not None else Fill()
        self._length = length

    def constraint(self) -> Optional[Constraint]:
        return self._constraint

    def preferred_width(self) -> int:
        return self._length or 0

    def preferred_height(self) -> int:
        return self._length or 0

    def render(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        return None
