"""Read ``termtree.toml`` into :class:`~termtree.datatypes.AppConfig`."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from .datatypes import AppConfig, LoggingConfig, RenderConfig, StyleConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "default_config_path",
    "load_config",
    "resolve_stylesheet_path",
]

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TERMTREE_CONFIG"

_UTF8_BOM = b"\xef\xbb\xbf"

_SECTIONS: Mapping[str, type] = {
    "render": RenderConfig,
    "style": StyleConfig,
    "logging": LoggingConfig,
}

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class ConfigError(ValueError):
    """Raised for unreadable, malformed or out-of-range configuration."""


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return value == 1
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ConfigError(f"{key} must be a boolean (use true/false).")


def _as_int(value: Any, key: str) -> int:
    # bool is a subclass of int.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer")
    return value


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    return value


def _as_member(value: Any, key: str, members: type[Enum]) -> Enum:
    if isinstance(value, members):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in members:
            if str(member.value).lower() == wanted:
                return member
    choices = ", ".join(str(member.value) for member in members)
    raise ConfigError(f"{key} must be one of: {choices}")


_SCALAR_COERCERS: Dict[type, Callable[[Any, str], Any]] = {
    bool: _as_bool,
    int: _as_int,
    str: _as_str,
}


def _build_section(name: str, raw: Any, section_type: type) -> Any:
    """
    Build the dataclass for one ``[name]`` table.

    Values are coerced according to the annotated type of the matching field;
    fields missing from *raw* keep their defaults.

    Raises:
        ConfigError: If *raw* is not a table, names a key the section does not
            define, or holds a value of the wrong type.
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[{name}] must be a table")
    known = {item.name: item.type for item in fields(section_type)}
    unexpected = sorted(set(raw) - set(known))
    if unexpected:
        raise ConfigError(f"Invalid keys in [{name}]: {', '.join(unexpected)}")

    values: Dict[str, Any] = {}
    for key, value in raw.items():
        annotation = known[key]
        dotted = f"{name}.{key}"
        if isinstance(annotation, type) and issubclass(annotation, Enum):
            values[key] = _as_member(value, dotted, annotation)
        elif annotation in _SCALAR_COERCERS:
            values[key] = _SCALAR_COERCERS[annotation](value, dotted)
        else:
            values[key] = value
    return section_type(**values)


def _read_toml(path: str | os.PathLike[str]) -> Dict[str, Any]:
    try:
        payload = Path(path).read_bytes()
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration {path}: {exc}") from exc
    if payload.startswith(_UTF8_BOM):
        payload = payload[len(_UTF8_BOM):]
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError("Configuration file must be UTF-8 encoded") from exc
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML: {exc}") from exc


def _check_ranges(app: AppConfig) -> None:
    for key in ("width", "height"):
        if getattr(app.render, key) < 1:
            raise ConfigError(f"render.{key} must be >= 1")


def default_config_path() -> Optional[Path]:
    """Config path named by ``TERMTREE_CONFIG``, if set."""

    value = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(value) if value else None


def resolve_stylesheet_path(app: AppConfig) -> Optional[Path]:
    """Absolute stylesheet path from ``[style].stylesheet``, or ``None`` when unset."""

    raw = app.style.stylesheet.strip()
    if not raw:
        return None
    candidate = Path(raw).expanduser()
    if not candidate.is_absolute() and app.source_path:
        candidate = Path(app.source_path).parent / candidate
    return candidate


def load_config(path: str | os.PathLike[str]) -> AppConfig:
    """
    Parse the TOML file at *path* into an :class:`AppConfig`.

    A leading UTF-8 byte order mark is ignored. Sections and keys that are
    not part of the configuration schema are rejected rather than skipped.

    Returns:
        AppConfig: Validated configuration with ``source_path`` set to the
        resolved location of *path*.

    Raises:
        ConfigError: If the file is unreadable, not UTF-8, not valid TOML, or
            fails validation.
    """

    raw = _read_toml(path)
    unknown = sorted(set(raw) - set(_SECTIONS))
    if unknown:
        raise ConfigError(f"Unknown configuration sections: {', '.join(unknown)}")

    sections = {
        name: _build_section(name, raw.get(name, {}), section_type)
        for name, section_type in _SECTIONS.items()
    }
    app = AppConfig(**sections, source_path=str(Path(path).resolve()))
    _check_ranges(app)

    logger.debug("Loaded configuration from %s", app.source_path)
    return app
