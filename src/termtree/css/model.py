"""Stylesheet model: selectors, rules and the stylesheet container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple

__all__ = [
    "ComplexSelector",
    "CompoundSelector",
    "Specificity",
    "StyleRule",
    "StyleTarget",
    "Stylesheet",
]

Specificity = Tuple[int, int, int]


@dataclass(frozen=True)
class StyleTarget:
    """What the selector matcher sees of a node."""

    type_name: str
    id: Optional[str] = None
    classes: frozenset[str] = frozenset()
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    focused: bool = False


@dataclass(frozen=True)
class CompoundSelector:
    """
    Conditions that must all hold on a single node.

    ``type_name`` of ``None`` matches any type (the universal selector). An
    attribute condition with a ``None`` value only requires the attribute to
    be present.
    """

    type_name: Optional[str] = None
    id: Optional[str] = None
    classes: Tuple[str, ...] = ()
    attributes: Tuple[Tuple[str, Optional[str]], ...] = ()
    focus: bool = False

    @property
    def specificity(self) -> Specificity:
        ids = 1 if self.id is not None else 0
        middle = len(self.classes) + len(self.attributes) + (1 if self.focus else 0)
        types = 1 if self.type_name is not None else 0
        return (ids, middle, types)

    def matches(self, target: StyleTarget) -> bool:
        if self.type_name is not None and self.type_name != target.type_name:
            return False
        if self.id is not None and self.id != target.id:
            return False
        if any(name not in target.classes for name in self.classes):
            return False
        for name, expected in self.attributes:
            actual = target.attributes.get(name)
            if actual is None:
                return False
            if expected is not None and actual != expected:
                return False
        if self.focus and not target.focused:
            return False
        return True

    def __str__(self) -> str:
        parts = [self.type_name or ("*" if not self._has_conditions() else "")]
        if self.id is not None:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        for name, expected in self.attributes:
            parts.append(f"[{name}]" if expected is None else f"[{name}={expected}]")
        if self.focus:
            parts.append(":focus")
        return "".join(parts)

    def _has_conditions(self) -> bool:
        return bool(self.id is not None or self.classes or self.attributes or self.focus)


@dataclass(frozen=True)
class ComplexSelector:
    """Compound selectors joined by descendant combinators, outermost first."""

    parts: Tuple[CompoundSelector, ...]

    @property
    def specificity(self) -> Specificity:
        ids = sum(part.specificity[0] for part in self.parts)
        middle = sum(part.specificity[1] for part in self.parts)
        types = sum(part.specificity[2] for part in self.parts)
        return (ids, middle, types)

    def matches(self, target: StyleTarget, ancestors: Sequence[StyleTarget] = ()) -> bool:
        """Match *target* with *ancestors* ordered from the root down to its parent."""

        if not self.parts or not self.parts[-1].matches(target):
            return False
        index = len(ancestors) - 1
        for part in reversed(self.parts[:-1]):
            while index >= 0 and not part.matches(ancestors[index]):
                index -= 1
            if index < 0:
                return False
            index -= 1
        return True

    def __str__(self) -> str:
        return " ".join(str(part) for part in self.parts)


@dataclass(frozen=True)
class StyleRule:
    """One selector paired with its declarations; ``order`` is the source position."""

    selector: ComplexSelector
    properties: Dict[str, str]
    order: int

    @property
    def specificity(self) -> Specificity:
        return self.selector.specificity


@dataclass(frozen=True)
class Stylesheet:
    rules: Tuple[StyleRule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)
