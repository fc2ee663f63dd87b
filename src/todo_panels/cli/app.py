"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

import todo_panels
from todo_panels.config import ConfigError, load_config
from todo_panels.io.reader import StateFileError, load_state

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[Path], verbose: bool) -> None:
    """Send package logs to log_file. Without one, logs are discarded."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger("todo_panels")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _version_callback(value: bool) -> None:
    if value:
        print(f"todo-panels {todo_panels.__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="todo-panels",
        help="Keep a TODO and a DONE list side by side in the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    err_console = Console(stderr=True)

    def fail(message: str) -> NoReturn:
        err_console.print(f"[bold red]error:[/] {escape(message)}", soft_wrap=True)
        raise typer.Exit(1)

    @app.command()
    def run(
        path: Annotated[Path, typer.Argument(help="State file of 'TODO: ' and 'DONE: ' lines", dir_okay=False)],
        config: Annotated[Optional[Path], typer.Option("--config", "-c", help="YAML file with colors and cursor settings")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write a log to this file")] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every command")] = False,
        version: Annotated[Optional[bool], typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = None,
    ) -> None:
        """Browse and reorder the lists; [bold]q[/] saves and quits."""
        configure_logging(log_file, verbose)

        try:
            terminal_config = load_config(config)
            state = load_state(path)
        except (StateFileError, ConfigError) as e:
            fail(str(e))
        except OSError as e:
            fail(f"{e.filename or path}: {e.strerror or e}")

        from todo_panels.cli.studio.session import run_session

        try:
            run_session(path, state, terminal_config)
        except OSError as e:
            fail(f"{e.filename or path}: {e.strerror or e}")

    return app
