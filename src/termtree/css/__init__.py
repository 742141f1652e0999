"""CSS-like stylesheets and the cascade engine."""

from .engine import ResolvedStyle, StyleEngine
from .model import ComplexSelector, CompoundSelector, StyleRule, StyleTarget, Stylesheet
from .parser import StylesheetError, load_stylesheet, parse_selector, parse_stylesheet

__all__ = [
    "ComplexSelector",
    "CompoundSelector",
    "ResolvedStyle",
    "StyleEngine",
    "StyleRule",
    "StyleTarget",
    "Stylesheet",
    "StylesheetError",
    "load_stylesheet",
    "parse_selector",
    "parse_stylesheet",
]
