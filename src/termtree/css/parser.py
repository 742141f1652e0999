"""Hand-written parser for the CSS-like element stylesheet.

Syntax example:
    * { color: white; }
    Column.sidebar { spacing: 1; background: #202020; }
    #status Gauge-filled { color: green; text-style: bold; }
    Text[role=title]:focus { text-style: underline; }
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .model import ComplexSelector, CompoundSelector, StyleRule, Stylesheet

__all__ = ["StylesheetError", "load_stylesheet", "parse_stylesheet"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule: selector { properties }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^{}]*)         # property declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)

_PROPERTY_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*$")

# One component of a compound selector, matched at the current position.
_COMPONENT_RE = re.compile(
    r"""
    (?P<type>[A-Za-z_][A-Za-z0-9_-]*)
    | (?P<universal>\*)
    | \#(?P<id>[A-Za-z0-9_-]+)
    | \.(?P<cls>[A-Za-z0-9_-]+)
    | \[\s*(?P<attr>[A-Za-z_][A-Za-z0-9_-]*)\s*
        (?:=\s*(?P<quote>["']?)(?P<value>[^\]"']*)(?P=quote)\s*)?\]
    | :(?P<pseudo>[A-Za-z-]+)
    """,
    re.VERBOSE,
)

# Whitespace outside attribute brackets separates descendant compounds.
_DESCENDANT_SPLIT_RE = re.compile(r"\s+(?![^\[]*\])")

_SUPPORTED_PSEUDO_CLASSES = {"focus"}


class StylesheetError(ValueError):
    """Raised when a stylesheet cannot be read or contains an invalid selector."""


def _parse_compound(raw: str) -> CompoundSelector:
    type_name: Optional[str] = None
    element_id: Optional[str] = None
    classes: List[str] = []
    attributes: List[Tuple[str, Optional[str]]] = []
    focus = False
    position = 0
    while position < len(raw):
        match = _COMPONENT_RE.match(raw, position)
        if match is None:
            raise StylesheetError(f"Invalid selector: {raw!r}")
        if match.group("type") is not None or match.group("universal") is not None:
            if position != 0:
                raise StylesheetError(f"Type selector must come first: {raw!r}")
            type_name = match.group("type")
        elif match.group("id") is not None:
            if element_id is not None:
                raise StylesheetError(f"Selector names more than one id: {raw!r}")
            element_id = match.group("id")
        elif match.group("cls") is not None:
            classes.append(match.group("cls"))
        elif match.group("attr") is not None:
            value = match.group("value")
            attributes.append((match.group("attr"), value.strip() if value is not None else None))
        else:
            pseudo = match.group("pseudo").lower()
            if pseudo not in _SUPPORTED_PSEUDO_CLASSES:
                raise StylesheetError(f"Unsupported pseudo-class :{pseudo} in {raw!r}")
            focus = True
        position = match.end()
    return CompoundSelector(
        type_name=type_name,
        id=element_id,
        classes=tuple(classes),
        attributes=tuple(attributes),
        focus=focus,
    )


def parse_selector(raw: str) -> ComplexSelector:
    """Parse one selector (no commas) into a :class:`ComplexSelector`."""

    text = raw.strip()
    if not text:
        raise StylesheetError("Empty selector")
    parts = tuple(_parse_compound(chunk) for chunk in _DESCENDANT_SPLIT_RE.split(text))
    return ComplexSelector(parts=parts)


def _parse_properties(body: str) -> Dict[str, str]:
    """Parse the body of a rule block; the last declaration may omit its semicolon."""

    props: Dict[str, str] = {}
    for declaration in body.split(";"):
        declaration = declaration.strip()
        if not declaration:
            continue
        key, sep, value = declaration.partition(":")
        key = key.strip().lower()
        if not sep or not _PROPERTY_NAME_RE.match(key):
            raise StylesheetError(f"Invalid declaration: {declaration!r}")
        props[key] = value.strip()
    return props


def parse_stylesheet(source: str) -> Stylesheet:
    """
    Parse CSS-like *source* into a :class:`Stylesheet`.

    Comma-separated selector lists produce one rule per selector sharing the
    same declarations and source position. Rules without declarations are
    dropped.

    Raises:
        StylesheetError: On an invalid selector or declaration, or on text
            outside of any rule block.
    """

    text = _COMMENT_RE.sub(" ", source)
    leftover = _RULE_RE.sub(" ", text).strip()
    if leftover:
        raise StylesheetError(f"Unexpected content outside rule blocks: {leftover[:40]!r}")

    rules: List[StyleRule] = []
    for order, match in enumerate(_RULE_RE.finditer(text)):
        properties = _parse_properties(match.group("body"))
        selectors = [parse_selector(chunk) for chunk in match.group("selector").split(",")]
        if not properties:
            continue
        for selector in selectors:
            rules.append(StyleRule(selector=selector, properties=dict(properties), order=order))
    return Stylesheet(rules=tuple(rules))


def load_stylesheet(path: Path | str) -> Stylesheet:
    """Read a UTF-8 stylesheet from *path* and parse it."""

    stylesheet_path = Path(path)
    try:
        source = stylesheet_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise StylesheetError(f"Failed to read stylesheet {stylesheet_path}: {exc}") from exc
    stylesheet = parse_stylesheet(source)
    logger.debug("Loaded %d style rules from %s", len(stylesheet), stylesheet_path)
    return stylesheet
