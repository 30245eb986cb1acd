#!/usr/bin/env python3
"""Scaffolder CLI - Rust backend project generator."""
from typing import Optional

import typer
from rich.console import Console

from scaffolder import __version__
from scaffolder.cli_scaffold_commands import register_scaffold_commands
from scaffolder.core.config import ConfigError, get_config
from scaffolder.core.logger import configure_logging

app = typer.Typer(
    name="scaffolder",
    help="""Scaffolder - Rust backend projects in one command

Creates a cargo project with a web framework, starter main.rs,
module layout, .gitignore and an initial git commit.

Quick start:
  scaffolder list                          # Frameworks with starter templates
  scaffolder scaffold -n my-api -f axum    # Create a project
  scaffolder add serde --version 1.0       # Add a crate to the current project
""",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool):
    if value:
        console.print(f"scaffolder {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log every cargo/git command and its output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Load configuration and set up logging before any command runs."""
    from scaffolder.cli_support import exit_with_error

    try:
        config = get_config()
    except ConfigError as e:
        exit_with_error(console, e)

    try:
        configure_logging(verbose=verbose or config.verbose, log_file=log_file or config.log_file)
    except OSError as e:
        exit_with_error(console, e)


register_scaffold_commands(app, console)

if __name__ == "__main__":
    app()
