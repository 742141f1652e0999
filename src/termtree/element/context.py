"""Render context: what a node may ask of the pass rendering it."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from rich.style import Style

from termtree.css.engine import ResolvedStyle, StyleEngine
from termtree.css.model import StyleTarget
from termtree.layout.rect import Rect
from termtree.style import EMPTY_STYLE, patch

from .element import Element
from .registry import ElementRegistry, FocusManager

if TYPE_CHECKING:
    from termtree.terminal.frame import Frame

__all__ = ["DefaultRenderContext", "RenderContext"]

logger = logging.getLogger(__name__)


class RenderContext(ABC):
    """Services available to elements while a frame is being rendered."""

    @abstractmethod
    def render_child(self, child: Element, frame: "Frame", area: Rect) -> None:
        """Render *child* into *area*, then register it. Empty areas are skipped."""

    @abstractmethod
    def register_element(self, element: Element, area: Rect) -> None:
        ...

    @abstractmethod
    def resolve_style(self, element: Element) -> Optional[ResolvedStyle]:
        """Cascade lookup for *element*; ``None`` when no rule matches."""

    @abstractmethod
    def sub_part_style(self, sub_part: str) -> Optional[Style]:
        """Cascade style of a named sub-part of the element being rendered."""

    @abstractmethod
    def current_style(self) -> Style:
        ...

    @abstractmethod
    def element_scope(self, element: Element, style: Style):
        """Context manager that makes *element* and its style current."""

    @abstractmethod
    def is_focused(self, element_id: Optional[str]) -> bool:
        ...


class DefaultRenderContext(RenderContext):
    """
    Context for a single render pass.

    Owns a fresh :class:`ElementRegistry`; the focus manager is shared with the
    caller so focus survives from one pass to the next.
    """

    def __init__(
        self,
        style_engine: Optional[StyleEngine] = None,
        focus_manager: Optional[FocusManager] = None,
    ) -> None:
        self.style_engine = style_engine
        self.focus_manager = focus_manager if focus_manager is not None else FocusManager()
        self.registry = ElementRegistry()
        self._scopes: List[Tuple[Element, Style]] = []

    @classmethod
    def create_empty(cls) -> "DefaultRenderContext":
        """A context without stylesheet and with a private focus manager."""

        return cls()

    def render_child(self, child: Element, frame: "Frame", area: Rect) -> None:
        if area.is_empty:
            return
        child.render(frame, area, self)
        self.register_element(child, area)

    def register_element(self, element: Element, area: Rect) -> None:
        if element.is_focusable() and element.id() is None and element not in self.registry:
            logger.warning(
                "Focusable %s has no id and will not join the focus chain",
                type(element).__name__,
            )
        self.registry.register(element, area)

    def _target_for(self, element: Element, type_name: Optional[str] = None) -> StyleTarget:
        return StyleTarget(
            type_name=type_name or element.style_type(),
            id=element.id(),
            classes=element.style_classes(),
            attributes=element.style_attributes(),
            focused=self.is_focused(element.id()),
        )

    def _ancestor_targets(self, depth: int) -> Tuple[StyleTarget, ...]:
        return tuple(self._target_for(element) for element, _ in self._scopes[:depth])

    def resolve_style(self, element: Element) -> Optional[ResolvedStyle]:
        if self.style_engine is None:
            return None
        depth = len(self._scopes)
        if self._scopes and self._scopes[-1][0] is element:
            depth -= 1
        return self.style_engine.resolve(self._target_for(element), self._ancestor_targets(depth))

    def sub_part_style(self, sub_part: str) -> Optional[Style]:
        if self.style_engine is None or not self._scopes:
            return None
        owner = self._scopes[-1][0]
        target = self._target_for(owner, f"{owner.style_type()}-{sub_part}")
        resolved = self.style_engine.resolve(target, self._ancestor_targets(len(self._scopes) - 1))
        if resolved is None:
            return None
        return patch(self.current_style(), resolved.to_style())

    def current_style(self) -> Style:
        if not self._scopes:
            return EMPTY_STYLE
        return self._scopes[-1][1]

    @contextmanager
    def element_scope(self, element: Element, style: Style) -> Iterator[Style]:
        scoped = patch(self.current_style(), style)
        self._scopes.append((element, scoped))
        try:
            yield scoped
        finally:
            self._scopes.pop()

    def is_focused(self, element_id: Optional[str]) -> bool:
        return self.focus_manager.is_focused(element_id)
