"""Click CLI wiring and entry points for termtree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from termtree.config_loader import (
    ConfigError,
    default_config_path,
    load_config,
    resolve_stylesheet_path,
)
from termtree.css import StyleEngine, StylesheetError, load_stylesheet, parse_stylesheet
from termtree.datatypes import AppConfig, LogLevel
from termtree.demo import DEFAULT_STYLESHEET, build_demo
from termtree.terminal import ConsoleBackend, Terminal

__all__ = ["CLIAppError", "main"]

logger = logging.getLogger(__name__)


class CLIAppError(RuntimeError):
    """Raised when the CLI cannot complete its work."""

    def __init__(self, message: str, *, code: int = 1, rich_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code
        self.rich_message = rich_message or message


def _configure_logging(level: LogLevel, *, verbose: bool, no_color: bool) -> None:
    resolved = logging.DEBUG if verbose else getattr(logging, level.value.upper())
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True, no_color=no_color),
                show_path=False,
                rich_tracebacks=verbose,
            )
        ],
        force=True,
    )


def _load_app_config(config_path: Optional[str]) -> AppConfig:
    path = Path(config_path) if config_path else default_config_path()
    if path is None:
        return AppConfig()
    if not path.exists():
        raise CLIAppError(
            f"Config file not found: {path}",
            code=2,
            rich_message=f"[red]Config file not found:[/red] {escape(str(path))}",
        )
    return load_config(path)


def _build_style_engine(app: AppConfig, stylesheet_override: Optional[str]) -> StyleEngine:
    if stylesheet_override:
        return StyleEngine(load_stylesheet(stylesheet_override))
    configured = resolve_stylesheet_path(app)
    if configured is not None:
        return StyleEngine(load_stylesheet(configured))
    return StyleEngine(parse_stylesheet(DEFAULT_STYLESHEET))


@click.group()
def main() -> None:
    """Compose and render terminal element trees."""


@main.command("render")
@click.option("--config", "config_path", default=None, help="Path to a termtree TOML config.")
@click.option("--stylesheet", "stylesheet_path", default=None, help="Override [style].stylesheet.")
@click.option("--width", type=click.IntRange(min=1), default=None, help="Override [render].width.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Override [render].height.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colour output.")
@click.option("--verbose", is_flag=True, help="Log render diagnostics at debug level.")
def render_command(
    config_path: Optional[str],
    stylesheet_path: Optional[str],
    width: Optional[int],
    height: Optional[int],
    no_color: bool,
    verbose: bool,
) -> None:
    """Render the built-in demo tree to the terminal."""

    try:
        app = _load_app_config(config_path)
        no_color = no_color or app.render.no_color
        _configure_logging(app.logging.level, verbose=verbose, no_color=no_color)
        engine = _build_style_engine(app, stylesheet_path)
    except CLIAppError as exc:
        print(exc.rich_message)
        raise click.exceptions.Exit(exc.code) from exc
    except (ConfigError, StylesheetError) as exc:
        print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}")
        raise click.exceptions.Exit(2) from exc

    render_width = width or app.render.width
    render_height = height or app.render.height
    console = Console(width=render_width, no_color=no_color, highlight=False)
    terminal = Terminal(ConsoleBackend(console), render_width, render_height, engine)
    terminal.draw(build_demo())
    logger.debug(
        "Rendered %dx%d demo with %d style rules", render_width, render_height, len(engine.stylesheet)
    )


@main.command("rules")
@click.argument("stylesheet", type=click.Path(dir_okay=False))
def rules_command(stylesheet: str) -> None:
    """List the rules of STYLESHEET in cascade order."""

    try:
        parsed = load_stylesheet(stylesheet)
    except StylesheetError as exc:
        print(f"[red]StylesheetError:[/red] {escape(str(exc))}")
        raise click.exceptions.Exit(2) from exc

    table = Table(title=str(stylesheet))
    table.add_column("#", justify="right")
    table.add_column("Selector")
    table.add_column("Specificity")
    table.add_column("Properties")
    for rule in sorted(parsed.rules, key=lambda item: (item.specificity, item.order)):
        properties = "; ".join(f"{key}: {value}" for key, value in rule.properties.items())
        table.add_row(str(rule.order), str(rule.selector), str(rule.specificity), properties)
    Console(highlight=False).print(table)


if __name__ == "__main__":
    main()
