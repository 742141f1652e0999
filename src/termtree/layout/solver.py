"""Default layout solver splitting a rectangle into constraint-sized slots."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

from .constraint import Constraint, Direction, Fill, Fit, Flex, Length, Max, Min, Percentage, Ratio
from .rect import Rect

__all__ = ["LayoutError", "split"]

logger = logging.getLogger(__name__)

_CONSTRAINT_TYPES = (Length, Percentage, Ratio, Min, Max, Fill, Fit)
_UNBOUNDED = sys.maxsize


class LayoutError(ValueError):
    """Raised when the solver is handed something it cannot lay out."""


def _base_size(constraint: Constraint, available: int) -> int:
    if isinstance(constraint, Length):
        return constraint.value
    if isinstance(constraint, Percentage):
        return available * constraint.value // 100
    if isinstance(constraint, Ratio):
        return available * constraint.numerator // constraint.denominator
    if isinstance(constraint, Min):
        return constraint.value
    return 0


def _growth_cap(constraint: Constraint) -> Optional[int]:
    """Return the largest size a slot may grow to, or ``None`` for fixed slots."""

    if isinstance(constraint, Max):
        return constraint.value
    if isinstance(constraint, (Fill, Fit, Min)):
        return _UNBOUNDED
    return None


def _weight(constraint: Constraint) -> int:
    if isinstance(constraint, Fill):
        return constraint.weight
    return 1


def _solve(constraints: Sequence[Constraint], available: int) -> List[int]:
    """
    Compute one size per constraint so that the sizes sum to at most ``available``.

    Fixed sizes are granted first in slot order and truncated once the space runs
    out. Leftover space is then shared among growable slots proportionally to their
    weights; rounding remainders go one cell at a time to the earliest slots.
    """

    sizes: List[int] = []
    remaining = available
    for constraint in constraints:
        granted = min(_base_size(constraint, available), remaining)
        sizes.append(granted)
        remaining -= granted
    if remaining == 0 and any(
        _base_size(constraint, available) > size for constraint, size in zip(constraints, sizes)
    ):
        logger.debug("Fixed constraints overflow %d cells; trailing slots truncated", available)

    caps = [_growth_cap(constraint) for constraint in constraints]
    weights = [_weight(constraint) for constraint in constraints]
    while remaining > 0:
        active = [
            index
            for index, cap in enumerate(caps)
            if cap is not None and sizes[index] < cap
        ]
        if not active:
            break
        total_weight = sum(weights[index] for index in active)
        granted_total = 0
        for index in active:
            cap = caps[index]
            assert cap is not None
            share = min(remaining * weights[index] // total_weight, cap - sizes[index])
            sizes[index] += share
            granted_total += share
        remaining -= granted_total
        if granted_total == 0:
            for index in active:
                if remaining == 0:
                    break
                sizes[index] += 1
                remaining -= 1
    return sizes


def _flex_gaps(count: int, leftover: int, flex: Flex) -> List[int]:
    """Empty cells before each slot, plus the trailing gap (``count + 1`` entries)."""

    gaps = [0] * (count + 1)
    if leftover <= 0 or count == 0:
        return gaps
    if flex is Flex.START:
        gaps[count] = leftover
    elif flex is Flex.END:
        gaps[0] = leftover
    elif flex is Flex.CENTER or (flex is Flex.SPACE_BETWEEN and count == 1):
        gaps[0] = leftover // 2
        gaps[count] = leftover - gaps[0]
    elif flex is Flex.SPACE_BETWEEN:
        size, extra = divmod(leftover, count - 1)
        for index in range(1, count):
            gaps[index] = size + (1 if index <= extra else 0)
    elif flex is Flex.SPACE_AROUND:
        unit, extra = divmod(leftover, count * 2)
        gaps[0] = unit + (1 if extra else 0)
        extra = max(0, extra - 1)
        for index in range(1, count):
            bonus = min(2, extra)
            gaps[index] = unit * 2 + bonus
            extra -= bonus
        gaps[count] = unit + extra
    else:
        size, extra = divmod(leftover, count + 1)
        for index in range(count + 1):
            gaps[index] = size + (1 if index < extra else 0)
    return gaps


def split(
    constraints: Sequence[Constraint],
    area: Rect,
    direction: Direction = Direction.VERTICAL,
    flex: Flex = Flex.START,
) -> List[Rect]:
    """
    Split *area* into one rectangle per constraint along *direction*.

    Parameters:
        constraints (Sequence[Constraint]): Sizing directives, one per slot.
        area (Rect): Rectangle to partition.
        direction (Direction): Axis along which slots are stacked.
        flex (Flex): Placement of cells no slot could absorb. Only matters
            when no slot can grow, e.g. all fixed lengths.

    Returns:
        List[Rect]: Rectangles in the same order as *constraints*. Slots never
        overlap and never extend past *area*; slots that received no space are
        empty rectangles placed at the end of the consumed span.

    Raises:
        LayoutError: If any entry is not a constraint.
    """

    items = list(constraints)
    for item in items:
        if not isinstance(item, _CONSTRAINT_TYPES):
            raise LayoutError(f"Not a layout constraint: {item!r}")
    if not items:
        return []

    vertical = direction is Direction.VERTICAL
    available = area.height if vertical else area.width
    sizes = _solve(items, available)
    gaps = _flex_gaps(len(sizes), available - sum(sizes), Flex(flex))

    rects: List[Rect] = []
    position = area.y if vertical else area.x
    for size, gap in zip(sizes, gaps):
        position += gap
        if vertical:
            rects.append(Rect(area.x, position, area.width, size))
        else:
            rects.append(Rect(position, area.y, size, area.height))
        position += size
    return rects
