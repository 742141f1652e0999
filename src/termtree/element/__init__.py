"""Element contract, render context, focus and event routing."""

from .context import DefaultRenderContext, RenderContext
from .element import Element, ElementStateError
from .registry import ElementRegistry, FocusManager
from .router import EventRouter
from .styled import StyledElement

__all__ = [
    "DefaultRenderContext",
    "Element",
    "ElementRegistry",
    "ElementStateError",
    "EventRouter",
    "FocusManager",
    "RenderContext",
    "StyledElement",
]
