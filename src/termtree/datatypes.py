"""Configuration dataclasses for the termtree command line."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LogLevel(str, Enum):
    """Root logger levels accepted in ``[logging].level``."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class RenderConfig:
    """Size and color options for the rendered frame."""

    width: int = 80
    height: int = 24
    no_color: bool = False


@dataclass
class StyleConfig:
    """Stylesheet applied to the element tree; a relative path resolves against the config file."""

    stylesheet: str = ""


@dataclass
class LoggingConfig:
    level: LogLevel = LogLevel.WARNING


@dataclass
class AppConfig:
    """Top-level configuration; ``source_path`` is set when loaded from a file."""

    render: RenderConfig = field(default_factory=RenderConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source_path: Optional[str] = None
