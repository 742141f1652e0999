"""Per-frame element registry and the focus manager that outlives frames."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from termtree.layout.rect import Rect

from .element import Element

__all__ = ["ElementRegistry", "FocusManager"]

logger = logging.getLogger(__name__)


class ElementRegistry:
    """
    Elements rendered during one pass and the rectangle each one received.

    Registration order is preserved; registering an element again updates its
    rectangle without moving it. Later registrations are drawn on top.
    """

    def __init__(self) -> None:
        self._entries: Dict[int, Tuple[Element, Rect]] = {}

    def register(self, element: Element, area: Rect) -> None:
        self._entries[id(element)] = (element, area)

    def rect_of(self, element: Element) -> Optional[Rect]:
        entry = self._entries.get(id(element))
        return entry[1] if entry is not None else None

    def elements(self) -> List[Element]:
        return [element for element, _ in self._entries.values()]

    def find_by_id(self, element_id: Optional[str]) -> Optional[Element]:
        if element_id is None:
            return None
        for element, _ in self._entries.values():
            if element.id() == element_id:
                return element
        return None

    def elements_at(self, x: int, y: int) -> List[Element]:
        """Elements whose rectangle contains ``(x, y)``, topmost first."""

        return [
            element
            for element, area in reversed(list(self._entries.values()))
            if area.contains(x, y)
        ]

    def element_at(self, x: int, y: int) -> Optional[Element]:
        hits = self.elements_at(x, y)
        return hits[0] if hits else None

    def focus_chain(self) -> List[str]:
        chain: List[str] = []
        for element, _ in self._entries.values():
            if not element.is_focusable():
                continue
            element_id = element.id()
            if element_id is not None and element_id not in chain:
                chain.append(element_id)
        return chain

    def __iter__(self) -> Iterator[Tuple[Element, Rect]]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, element: object) -> bool:
        return id(element) in self._entries


class FocusManager:
    """Tracks the focused element id across frames."""

    def __init__(self) -> None:
        self._chain: List[str] = []
        self._focused_id: Optional[str] = None

    @property
    def focused_id(self) -> Optional[str]:
        return self._focused_id

    @property
    def chain(self) -> List[str]:
        return list(self._chain)

    def sync(self, chain: Sequence[str]) -> None:
        """Adopt the focus chain of the latest frame, dropping focus from departed ids."""

        self._chain = list(chain)
        if self._focused_id is not None and self._focused_id not in self._chain:
            logger.debug("Focused element %r left the tree; clearing focus", self._focused_id)
            self._focused_id = None

    def set_focus(self, element_id: str) -> bool:
        """Focus *element_id* if it is part of the current chain."""

        if element_id not in self._chain:
            return False
        self._focused_id = element_id
        return True

    def clear_focus(self) -> None:
        self._focused_id = None

    def is_focused(self, element_id: Optional[str]) -> bool:
        return element_id is not None and element_id == self._focused_id

    def focus_next(self) -> bool:
        return self._step(1)

    def focus_previous(self) -> bool:
        return self._step(-1)

    def _step(self, offset: int) -> bool:
        if not self._chain:
            return False
        if self._focused_id not in self._chain:
            index = 0 if offset > 0 else len(self._chain) - 1
        else:
            index = (self._chain.index(self._focused_id) + offset) % len(self._chain)
        self._focused_id = self._chain[index]
        return True
