"""Cascade engine: matches stylesheet rules against element targets."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence

from rich.style import Style

from termtree.layout.constraint import Constraint, Flex
from termtree.layout.rect import Margin
from termtree.style.properties import (
    ColorConverter,
    ConstraintConverter,
    FlexConverter,
    Gutter,
    GutterConverter,
    MarginConverter,
    TextStyleConverter,
)

from .model import StyleRule, StyleTarget, Stylesheet
from .parser import load_stylesheet, parse_stylesheet

__all__ = ["ResolvedStyle", "StyleEngine"]

_COLOR = ColorConverter()
_TEXT_STYLE = TextStyleConverter()
_GUTTER = GutterConverter()
_CONSTRAINT = ConstraintConverter()
_MARGIN = MarginConverter()
_FLEX = FlexConverter()


class ResolvedStyle:
    """Merged declarations of every rule that matched one node."""

    def __init__(self, properties: Mapping[str, str]) -> None:
        self._properties = MappingProxyType(dict(properties))

    @property
    def properties(self) -> Mapping[str, str]:
        return self._properties

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(name, default)

    def to_style(self) -> Style:
        """Build a rich style from ``color``, ``background`` and ``text-style``; bad values are ignored."""

        style = Style.null()
        color = _COLOR.convert(self._properties.get("color", ""))
        background = _COLOR.convert(self._properties.get("background", ""))
        if color is not None or background is not None:
            style += Style(color=color, bgcolor=background)
        text_style = _TEXT_STYLE.convert(self._properties.get("text-style", ""))
        if text_style is not None:
            style += text_style
        return style

    def spacing(self) -> Optional[Gutter]:
        return _GUTTER.convert(self._properties.get("spacing", ""))

    def margin(self) -> Optional[Margin]:
        return _MARGIN.convert(self._properties.get("margin", ""))

    def flex(self) -> Optional[Flex]:
        return _FLEX.convert(self._properties.get("flex", ""))

    def width_constraint(self) -> Optional[Constraint]:
        return _CONSTRAINT.convert(self._properties.get("width", ""))

    def height_constraint(self) -> Optional[Constraint]:
        return _CONSTRAINT.convert(self._properties.get("height", ""))

    def __repr__(self) -> str:
        return f"ResolvedStyle({dict(self._properties)!r})"


class StyleEngine:
    """Resolves the cascade of a :class:`Stylesheet` for element targets."""

    def __init__(self, stylesheet: Optional[Stylesheet] = None) -> None:
        self.stylesheet = stylesheet or Stylesheet()

    @classmethod
    def from_source(cls, source: str) -> "StyleEngine":
        return cls(parse_stylesheet(source))

    @classmethod
    def from_path(cls, path) -> "StyleEngine":
        return cls(load_stylesheet(path))

    def matching_rules(
        self, target: StyleTarget, ancestors: Sequence[StyleTarget] = ()
    ) -> list[StyleRule]:
        """Rules matching *target*, lowest precedence first."""

        matched = [rule for rule in self.stylesheet.rules if rule.selector.matches(target, ancestors)]
        matched.sort(key=lambda rule: (rule.specificity, rule.order))
        return matched

    def resolve(
        self, target: StyleTarget, ancestors: Sequence[StyleTarget] = ()
    ) -> Optional[ResolvedStyle]:
        """
        Merge the declarations of every matching rule.

        Parameters:
            target: Node being styled.
            ancestors: Render-time ancestors, ordered from the root down to the
                node's parent.

        Returns:
            The merged declarations, or ``None`` when no rule matches.
        """

        matched = self.matching_rules(target, ancestors)
        if not matched:
            return None
        merged: Dict[str, str] = {}
        for rule in matched:
            merged.update(rule.properties)
        return ResolvedStyle(merged)

    def resolve_style(
        self,
        type_name: str,
        id: Optional[str] = None,
        classes: Iterable[str] = (),
        sub_part: Optional[str] = None,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> Optional[Style]:
        """Look up a style by node metadata alone; a sub-part matches ``"{type_name}-{sub_part}"``."""

        matched_type = f"{type_name}-{sub_part}" if sub_part else type_name
        target = StyleTarget(
            type_name=matched_type,
            id=id,
            classes=frozenset(classes),
            attributes=dict(attributes or {}),
        )
        resolved = self.resolve(target)
        if resolved is None:
            return None
        return resolved.to_style()
