"""Stacking containers: children laid out along one axis with optional spacing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Union

from rich.style import Style

from termtree.element.element import Element
from termtree.element.styled import StyledElement
from termtree.layout import solver as layout_solver
from termtree.layout.constraint import Constraint, Direction, Fill, Fit, Flex, Length
from termtree.layout.rect import Margin, Rect

if TYPE_CHECKING:
    from termtree.element.context import RenderContext
    from termtree.terminal.frame import Frame

__all__ = ["Column", "Row", "StackContainer"]

logger = logging.getLogger(__name__)

_NO_MARGIN = Margin()


class StackContainer(StyledElement):
    """
    Ordered children stacked along :attr:`direction`.

    ``spacing`` is the number of empty cells between adjacent children.
    Negative values are clamped to zero. When left unset, the stylesheet
    ``spacing`` property applies, falling back to ``0``.

    ``margin`` shrinks the area before the children are laid out and ``flex``
    places cells the children leave unused. Both fall back to the stylesheet
    ``margin`` and ``flex`` properties, then to no margin and ``Flex.START``.
    """

    direction: Direction = Direction.VERTICAL

    def __init__(
        self,
        *children: Element,
        spacing: Optional[int] = None,
        margin: Union[int, Margin, None] = None,
        flex: Union[Flex, str, None] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._children: List[Element] = []
        self._spacing: Optional[int] = None
        self._margin: Optional[Margin] = None
        self._flex: Optional[Flex] = None
        self.extend(children)
        if spacing is not None:
            self.spacing(spacing)
        if margin is not None:
            self.margin(margin)
        if flex is not None:
            self.flex(flex)

    # Children

    def add(self, child: Element):
        if child is None:
            raise ValueError("Child element cannot be null")
        self._children.append(child)
        return self

    def extend(self, children: Iterable[Element]):
        for child in children:
            self.add(child)
        return self

    @property
    def children(self) -> List[Element]:
        return list(self._children)

    def clear(self):
        self._children.clear()
        return self

    # Spacing, margin and flex. Explicit values win over the cascade.

    def spacing(self, value: int):
        self._spacing = max(0, int(value))
        return self

    def margin(self, value: Union[int, Margin]):
        self._margin = value if isinstance(value, Margin) else Margin.uniform(max(0, int(value)))
        return self

    def flex(self, value: Union[Flex, str]):
        self._flex = Flex(value)
        return self

    @property
    def explicit_spacing(self) -> Optional[int]:
        return self._spacing

    def _effective_spacing(self, context: "RenderContext") -> int:
        if self._spacing is not None:
            return self._spacing
        resolved = context.resolve_style(self)
        gutter = resolved.spacing() if resolved is not None else None
        if gutter is None:
            return 0
        return gutter.vertical if self.direction is Direction.VERTICAL else gutter.horizontal

    def _effective_margin(self, context: "RenderContext") -> Margin:
        if self._margin is not None:
            return self._margin
        resolved = context.resolve_style(self)
        margin = resolved.margin() if resolved is not None else None
        return margin or _NO_MARGIN

    def _effective_flex(self, context: "RenderContext") -> Flex:
        if self._flex is not None:
            return self._flex
        resolved = context.resolve_style(self)
        flex = resolved.flex() if resolved is not None else None
        return flex or Flex.START

    # Layout

    def _axis_constraint(self, child: Element, context: "RenderContext") -> Optional[Constraint]:
        resolved = context.resolve_style(child)
        if resolved is None:
            return None
        if self.direction is Direction.VERTICAL:
            return resolved.height_constraint()
        return resolved.width_constraint()

    def _preferred_along_axis(self, child: Element, area: Rect, context: "RenderContext") -> int:
        if self.direction is Direction.VERTICAL:
            return child.preferred_height_for(area.width, context)
        return child.preferred_width_for(context)

    def build_constraints(
        self, area: Rect, context: "RenderContext", spacing: int
    ) -> List[Constraint]:
        """
        One constraint per child with a ``Length(spacing)`` between neighbours.

        ``Fit`` becomes the child's preferred size, or ``Fill`` when the child
        reports no size at all.
        """

        constraints: List[Constraint] = []
        for index, child in enumerate(self._children):
            if index > 0 and spacing > 0:
                constraints.append(Length(spacing))
            constraint = child.constraint() or self._axis_constraint(child, context) or Fill()
            if isinstance(constraint, Fit):
                preferred = self._preferred_along_axis(child, area, context)
                constraint = Length(preferred) if preferred > 0 else Fill()
            constraints.append(constraint)
        return constraints

    # Rendering

    def render(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        if area.is_empty or not self._children:
            return
        super().render(frame, area, context)

    def render_content(self, frame: "Frame", area: Rect, context: "RenderContext") -> None:
        inner = area.inner(self._effective_margin(context))
        if inner.is_empty:
            return

        background = context.current_style().bgcolor
        if background is not None:
            frame.buffer.fill(inner, " ", Style(bgcolor=background))

        spacing = self._effective_spacing(context)
        constraints = self.build_constraints(inner, context, spacing)
        slots = layout_solver.split(constraints, inner, self.direction, self._effective_flex(context))

        step = 2 if spacing > 0 else 1
        child_slots = slots[::step]
        for child, slot in zip(self._children, child_slots):
            context.render_child(child, frame, slot)
        if len(child_slots) < len(self._children):
            logger.debug(
                "%s received %d slots for %d children",
                type(self).__name__,
                len(child_slots),
                len(self._children),
            )

    # Sizing

    def _gaps(self, spacing: int) -> int:
        return spacing * max(0, len(self._children) - 1)

    @property
    def _explicit_margin(self) -> Margin:
        return self._margin or _NO_MARGIN


class Column(StackContainer):
    """Vertical stack."""

    direction = Direction.VERTICAL

    def preferred_width(self) -> int:
        widest = max((child.preferred_width() for child in self._children), default=0)
        return widest + self._explicit_margin.horizontal_total

    def preferred_width_for(self, context: "RenderContext") -> int:
        widest = max((child.preferred_width_for(context) for child in self._children), default=0)
        return widest + self._effective_margin(context).horizontal_total

    def preferred_height(self) -> int:
        heights = sum(child.preferred_height() for child in self._children)
        return heights + self._gaps(self._spacing or 0) + self._explicit_margin.vertical_total

    def preferred_height_for(self, available_width: int, context: "RenderContext") -> int:
        margin = self._effective_margin(context)
        inner_width = max(0, available_width - margin.horizontal_total)
        heights = sum(child.preferred_height_for(inner_width, context) for child in self._children)
        return heights + self._gaps(self._effective_spacing(context)) + margin.vertical_total


class Row(StackContainer):
    """Horizontal stack."""

    direction = Direction.HORIZONTAL

    def preferred_width(self) -> int:
        widths = sum(child.preferred_width() for child in self._children)
        return widths + self._gaps(self._spacing or 0) + self._explicit_margin.horizontal_total

    def preferred_width_for(self, context: "RenderContext") -> int:
        widths = sum(child.preferred_width_for(context) for child in self._children)
        spacing = self._effective_spacing(context)
        return widths + self._gaps(spacing) + self._effective_margin(context).horizontal_total

    def preferred_height(self) -> int:
        tallest = max((child.preferred_height() for child in self._children), default=0)
        return tallest + self._explicit_margin.vertical_total

    def child_widths(self, available_width: int, context: "RenderContext") -> List[int]:
        """
        Estimate the width each child gets out of *available_width*.

        ``Length`` and ``Fit`` children keep their own width; the rest share
        what is left equally. Every estimate is at least one cell.
        """

        spacing = self._effective_spacing(context)
        content = max(0, available_width - self._gaps(spacing))
        fixed: List[Optional[int]] = []
        for child in self._children:
            constraint = child.constraint() or self._axis_constraint(child, context)
            if isinstance(constraint, Length):
                fixed.append(constraint.value)
            elif isinstance(constraint, Fit):
                preferred = child.preferred_width_for(context)
                fixed.append(preferred if preferred > 0 else None)
            else:
                fixed.append(None)
        remaining = max(0, content - sum(width for width in fixed if width is not None))
        flexible = fixed.count(None)
        share = remaining // flexible if flexible else 0
        return [max(1, min(width, content)) if width is not None else max(1, share) for width in fixed]

    def preferred_height_for(self, available_width: int, context: "RenderContext") -> int:
        if not self._children:
            return 0
        margin = self._effective_margin(context)
        inner_width = max(0, available_width - margin.horizontal_total)
        widths = self.child_widths(inner_width, context)
        tallest = max(
            child.preferred_height_for(width, context)
            for child, width in zip(self._children, widths)
        )
        return tallest + margin.vertical_total
