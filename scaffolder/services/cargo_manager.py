"""Cargo project and dependency management."""
from pathlib import Path
from typing import Optional

from scaffolder.core.logger import get_logger
from scaffolder.services.command_runner import CommandRunner

logger = get_logger(__name__)

LATEST_VERSION = "latest"


class CargoManager:
    """Wraps the cargo subcommands used for scaffolding."""

    def __init__(self, runner: Optional[CommandRunner] = None, cargo_bin: str = "cargo"):
        self.runner = runner or CommandRunner()
        self.cargo_bin = cargo_bin

    def create_project(self, name: str, parent_dir: Path) -> bool:
        """Create a new binary crate with ``cargo new``.

        Args:
            name: Project (and directory) name
            parent_dir: Directory to create the project in

        Returns:
            True if successful, False if the directory exists or cargo failed
        """
        project_dir = Path(parent_dir) / name
        if project_dir.exists():
            logger.error(f"Failed to create project '{name}': {project_dir} already exists")
            return False

        logger.info(f"Creating new Cargo project: {name}")
        result = self.runner.run([self.cargo_bin, "new", name], cwd=Path(parent_dir))
        if not result.success:
            logger.error(f"Failed to create project '{name}'")
            if result.stderr:
                logger.error(f"Error output: {result.stderr}")
            return False
        return True

    def add_dependency(self, project_dir: Path, dep_name: str, features: Optional[str] = None) -> bool:
        """Add a dependency to the project at ``project_dir``.

        Args:
            project_dir: Directory containing Cargo.toml
            dep_name: Crate name, passed to cargo as given
            features: Feature list passed verbatim to ``--features``

        Returns:
            True if successful, False otherwise
        """
        cmd = [self.cargo_bin, "add", dep_name]
        if features:
            cmd.extend(["--features", features])

        label = f"{dep_name} (features: {features})" if features else dep_name
        logger.info(f"Adding {label} to {Path(project_dir).name}")

        result = self.runner.run(cmd, cwd=Path(project_dir))
        if not result.success:
            logger.error(f"Failed to add dependency '{dep_name}'")
            if result.stderr:
                logger.error(f"Error output: {result.stderr}")
            return False
        return True

    def add_crate(self, name: str, version: str = LATEST_VERSION, cwd: Optional[Path] = None) -> bool:
        """Add ``name`` to the project in ``cwd``, pinned unless version is "latest"."""
        requirement = name if version == LATEST_VERSION else f"{name}@{version}"

        result = self.runner.run([self.cargo_bin, "add", requirement], cwd=cwd)
        if not result.success:
            logger.error(f"Failed to add {requirement}")
            if result.stderr:
                logger.error(f"Error output: {result.stderr}")
            return False
        return True
