from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from termtree.config_loader import CONFIG_ENV_VAR


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click runner configured for CLI smoke tests."""

    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``TERMTREE_CONFIG`` from leaking into tests."""

    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo the root handler swap performed by the CLI's logging setup."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper writing TOML text to ``tmp_path/termtree.toml``."""

    def _write(text: str, name: str = "termtree.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
