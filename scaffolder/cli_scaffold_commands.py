"""Scaffolding CLI commands - scaffold, list, add."""
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from scaffolder.core.config import get_config
from scaffolder.models.request import ScaffoldRequest
from scaffolder.scaffold.core import ScaffoldError, ScaffoldManager
from scaffolder.scaffold.templates import supported_frameworks
from scaffolder.services.cargo_manager import LATEST_VERSION, CargoManager

# Module-level console instance (will be set by register function)
console: Console = Console()


def scaffold(
    name: str = typer.Option(..., "--name", "-n", help="Name of the project"),
    framework: str = typer.Option(..., "--framework", "-f", help="Name of the framework (e.g. axum, actix-web)"),
    deps: Optional[List[str]] = typer.Option(
        None, "--deps", "-d", help="Additional dependency to add (repeatable, e.g. -d dotenvy)"
    ),
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Directory to create the project in (default: current directory)"
    ),
):
    """Scaffold a new framework project.

    Creates the crate with cargo, adds the framework and any extra
    dependencies, writes a starter main.rs, creates services/models/
    handlers/routes modules, a .gitignore and an initial git commit.

    Examples:
        scaffolder scaffold -n my-api -f axum
        scaffolder scaffold -n my-api -f actix-web -d dotenvy -d sqlx
    """
    from scaffolder.cli_support import exit_with_error, print_error, print_scaffold_summary

    config = get_config()

    request = ScaffoldRequest(
        project_name=name,
        framework_identifier=framework,
        additional_dependencies=deps or [],
        parent_dir=path or Path.cwd(),
    )

    manager = ScaffoldManager.from_config(config)
    try:
        succeeded = manager.scaffold(request)
    except ScaffoldError as e:
        exit_with_error(console, e)

    if not succeeded:
        print_error(console, f"Failed to scaffold project '{name}'")
        raise typer.Exit(1)

    print_scaffold_summary(console, request)


def list_frameworks():
    """List available frameworks."""
    console.print("[bold]Available frameworks:[/bold]")
    for framework in supported_frameworks():
        console.print(f"  - {framework}")


def add(
    name: str = typer.Argument(..., help="Name of the crate to add"),
    version: str = typer.Option(LATEST_VERSION, "--version", "-v", help="Version to use"),
):
    """Add a dependency to the project in the current directory.

    Examples:
        scaffolder add serde
        scaffolder add tokio --version 1.38
    """
    from scaffolder.cli_support import print_error, print_success

    config = get_config()

    cargo = CargoManager(cargo_bin=config.cargo_bin)
    if cargo.add_crate(name, version=version, cwd=Path.cwd()):
        print_success(console, f"Added {name} successfully!")
    else:
        print_error(console, f"Failed to add {name}")
        raise typer.Exit(1)


def register_scaffold_commands(app: typer.Typer, shared_console: Console):
    """Register scaffolding commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(scaffold)
    app.command("list")(list_frameworks)
    app.command()(add)
