"""Base class for elements carrying explicit style, cascade metadata and handlers."""

from __future__ import annotations

import itertools
from abc import abstractmethod
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Optional, Set, TypeVar, Union

from rich.color import Color
from rich.style import Style

from termtree.events import DragHandler, KeyEventHandler, MouseEventHandler
from termtree.layout import constraint as constraints
from termtree.layout.constraint import Constraint
from termtree.layout.rect import Rect
from termtree.style import EMPTY_STYLE, merge_attributes

from .element import Element, ElementStateError

if TYPE_CHECKING:
    from termtree.terminal.frame import Frame

    from .context import RenderContext

__all__ = ["StyledElement"]

S = TypeVar("S", bound="StyledElement")

_ID_COUNTER = itertools.count(1)


def _next_id(element: Element) -> str:
    return f"{element.style_type().lower()}-{next(_ID_COUNTER)}"


class StyledElement(Element):
    """
    Element with an explicit style, cascade metadata, layout hints and handlers.

    Subclasses implement :meth:`render_content`; :meth:`render` is a template
    that resolves the cascade, opens an element scope with the effective style
    and registers the element with the context.

    Parameters:
        id: Stable identifier; may be set once.
        classes: Cascade classes.
        style: Explicit style; its fields take precedence over the cascade.
        constraint: Layout constraint requested from the parent.
        focusable: Whether the element joins the focus chain.
        on_key / on_mouse / on_drag: Event handlers.
    """

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Iterable[str] = (),
        style: Optional[Style] = None,
        constraint: Optional[Constraint] = None,
        focusable: bool = False,
        on_key: Optional[KeyEventHandler] = None,
        on_mouse: Optional[MouseEventHandler] = None,
        on_drag: Optional[DragHandler] = None,
    ) -> None:
        self._id: Optional[str] = None
        self._classes: Set[str] = set(classes)
        self._attributes: Dict[str, str] = {}
        self._style: Style = style or EMPTY_STYLE
        self._constraint = constraint
        self._focusable = focusable
        self._key_handler = on_key
        self._mouse_handler = on_mouse
        self._drag_handler = on_drag
        self._rendered_area: Optional[Rect] = None
        if id is not None:
            self.set_id(id)

    # Identity

    def id(self) -> Optional[str]:
        return self._id

    def set_id(self: S, element_id: str) -> S:
        """Assign the id once; any later assignment raises :class:`ElementStateError`."""

        if not element_id:
            raise ValueError("Element id must be a non-empty string")
        if self._id is not None:
            raise ElementStateError(
                f"{type(self).__name__} id is already {self._id!r}; cannot set it to {element_id!r}"
            )
        self._id = element_id
        return self

    # Cascade metadata

    def add_class(self: S, *names: str) -> S:
        self._classes.update(names)
        return self

    def remove_class(self: S, *names: str) -> S:
        self._classes.difference_update(names)
        return self

    def toggle_class(self: S, name: str) -> S:
        if name in self._classes:
            self._classes.discard(name)
        else:
            self._classes.add(name)
        return self

    def has_class(self, name: str) -> bool:
        return name in self._classes

    def attr(self: S, name: str, value: Optional[str]) -> S:
        """Set a style attribute; ``None`` removes it."""

        if value is None:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = str(value)
        return self

    def style_classes(self) -> frozenset[str]:
        return frozenset(self._classes)

    def extra_style_attributes(self) -> Mapping[str, str]:
        """Attributes a subclass derives from its own state."""

        return {}

    def style_attributes(self) -> Mapping[str, str]:
        return merge_attributes(self._attributes, self.extra_style_attributes())

    # Explicit style

    @property
    def explicit_style(self) -> Style:
        return self._style

    def style(self: S, style: Optional[Style]) -> S:
        """Replace the explicit style."""

        self._style = style or EMPTY_STYLE
        return self

    def _add_style(self: S, style: Style) -> S:
        self._style = self._style + style
        return self

    def fg(self: S, color: Union[str, Color]) -> S:
        return self._add_style(Style(color=color))

    def bg(self: S, color: Union[str, Color]) -> S:
        return self._add_style(Style(bgcolor=color))

    def bold(self: S) -> S:
        return self._add_style(Style(bold=True))

    def dim(self: S) -> S:
        return self._add_style(Style(dim=True))

    def italic(self: S) -> S:
        return self._add_style(Style(italic=True))

    def underline(self: S) -> S:
        return self._add_style(Style(underline=True))

    def reverse(self: S) -> S:
        return self._add_style(Style(reverse=True))

    def strike(self: S) -> S:
        return self._add_style(Style(strike=True))

    # Layout

    def constraint(self) -> Optional[Constraint]:
        return self._constraint

    def set_constraint(self: S, value: Optional[Constraint]) -> S:
        self._constraint = value
        return self

    def length(self: S, value: int) -> S:
        return self.set_constraint(constraints.length(value))

    def percent(self: S, value: int) -> S:
        return self.set_constraint(constraints.percentage(value))

    def fill(self: S, weight: int = 1) -> S:
        return self.set_constraint(constraints.fill(weight))

    def min_size(self: S, value: int) -> S:
        return self.set_constraint(constraints.min_size(value))

    def max_size(self: S, value: int) -> S:
        return self.set_constraint(constraints.max_size(value))

    def fit(self: S) -> S:
        return self.set_constraint(constraints.fit())

    # Focus and events

    def is_focusable(self) -> bool:
        return self._focusable

    def focusable(self: S, value: bool = True) -> S:
        self._focusable = value
        return self

    def is_draggable(self) -> bool:
        return self._drag_handler is not None

    def on_key(self: S, handler: Optional[KeyEventHandler]) -> S:
        self._key_handler = handler
        return self

    def on_mouse(self: S, handler: Optional[MouseEventHandler]) -> S:
        self._mouse_handler = handler
        return self

    def on_drag(self: S, handler: Optional[DragHandler]) -> S:
        self._drag_handler = handler
        return self

    def key_event_handler(self) -> Optional[KeyEventHandler]:
        return self._key_handler

    def mouse_event_handler(self) -> Optional[MouseEventHandler]:
        return self._mouse_handler

    def drag_handler(self) -> Optional[DragHandler]:
        return self._drag_handler

    def rendered_area(self) -> Optional[Rect]:
        return self._rendered_area

    # Rendering

    def render(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        if area.is_empty:
            return
        self._rendered_area = area
        if self._focusable and self._id is None:
            self._id = _next_id(self)
        context.register_element(self, area)

        resolved = context.resolve_style(self)
        effective = self._style
        if resolved is not None:
            effective = resolved.to_style() + self._style
        with context.element_scope(self, effective):
            self.render_content(frame, area, context)

    @abstractmethod
    def render_content(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        ...

    def resolve_effective_style(
        self,
        context: "RenderContext",
        sub_part: Optional[str],
        explicit: Optional[Style],
        default: Style,
    ) -> Style:
        """
        Pick the style for this element or one of its sub-parts.

        Precedence is explicit (when non-empty), then the cascade rule for
        *sub_part* (or for the element itself when *sub_part* is ``None``),
        then *default*.
        """

        if explicit:
            return explicit
        if sub_part is not None:
            cascaded = context.sub_part_style(sub_part)
        else:
            resolved = context.resolve_style(self)
            cascaded = resolved.to_style() if resolved is not None else None
        if cascaded is not None:
            return cascaded
        return default
