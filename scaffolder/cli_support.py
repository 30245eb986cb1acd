"""Shared output helpers for scaffolder CLI commands."""
from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from scaffolder.core.logger import get_logger
from scaffolder.models.request import ScaffoldRequest

logger = get_logger(__name__)


def exit_with_error(console: Console, error: Exception, exit_code: int = 1) -> NoReturn:
    """Report ``error`` and stop the command.

    The message goes to the console; the traceback only to the debug log,
    so ``--verbose`` shows where a config or write failure came from.
    """
    console.print(f"[red]Error:[/red] {error}")
    logger.debug("Command aborted", exc_info=error)
    raise typer.Exit(exit_code)


def print_success(console: Console, message: str, prefix: str = "✅") -> None:
    """Print a green status line for a finished command."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_error(console: Console, message: str, prefix: str = "❌") -> None:
    """Print a red status line for a failed command."""
    console.print(f"[red]{prefix}[/red] {message}")


def project_location(project_dir: Path, cwd: Optional[Path] = None) -> str:
    """Shell-ready path to ``project_dir``: relative when below ``cwd``, else absolute."""
    target = Path(project_dir).resolve()
    base = Path(cwd or Path.cwd()).resolve()
    try:
        location = os.fspath(target.relative_to(base))
    except ValueError:
        location = os.fspath(target)
    return shlex.quote(location)


def print_scaffold_summary(console: Console, request: ScaffoldRequest, cwd: Optional[Path] = None) -> None:
    """Print the success banner and the command that runs the new project."""
    console.print()
    print_success(console, f"Project '{request.project_name}' scaffolded successfully!")
    location = project_location(request.project_dir, cwd)
    console.print(f"[cyan]👉[/cyan] cd {location} && cargo run")
