"""Core scaffolding workflow for Rust backend projects."""
from pathlib import Path
from typing import Optional

from scaffolder.core.config import ScaffolderConfig
from scaffolder.core.logger import get_logger
from scaffolder.models.request import ScaffoldRequest
from scaffolder.scaffold.files import ProjectFiles
from scaffolder.scaffold.templates import MODULE_DIRECTORIES, lookup
from scaffolder.services.cargo_manager import CargoManager
from scaffolder.services.command_runner import CommandRunner
from scaffolder.services.git_manager import GitManager

logger = get_logger(__name__)


class ScaffoldError(Exception):
    """Raised when a generated file cannot be written."""


class ScaffoldManager:
    """Runs the scaffold steps in order, stopping at the first failure.

    Nothing is rolled back: a failed run leaves whatever the completed
    steps produced on disk.
    """

    def __init__(
        self,
        cargo: Optional[CargoManager] = None,
        git: Optional[GitManager] = None,
        files: Optional[ProjectFiles] = None,
    ):
        self.cargo = cargo or CargoManager()
        self.git = git or GitManager()
        self.files = files or ProjectFiles()

    @classmethod
    def from_config(cls, config: ScaffolderConfig, runner: Optional[CommandRunner] = None) -> "ScaffoldManager":
        """Build a manager whose tools and commit identity come from ``config``."""
        runner = runner or CommandRunner()
        return cls(
            cargo=CargoManager(runner, cargo_bin=config.cargo_bin),
            git=GitManager(
                runner,
                git_bin=config.git_bin,
                author_name=config.author_name,
                author_email=config.author_email,
                commit_message=config.commit_message,
            ),
        )

    def scaffold(self, request: ScaffoldRequest) -> bool:
        """Scaffold a project.

        Args:
            request: Project name, framework, extra dependencies and parent dir

        Returns:
            True when every step, including the initial commit, succeeded

        Raises:
            ScaffoldError: If a generated file or directory cannot be written
        """
        name = request.project_name
        framework = request.framework_identifier
        project_dir = request.project_dir

        if not self.cargo.create_project(name, request.parent_dir):
            return False

        if not self.cargo.add_dependency(project_dir, framework):
            return False

        for dep in request.additional_dependencies:
            if not self.cargo.add_dependency(project_dir, dep):
                return False

        spec = lookup(framework)
        if spec.identifier != framework:
            logger.debug(f"No template for '{framework}', using default main.rs")
        self._write("src/main.rs", self.files.write_main_source, project_dir, spec.main_source_body)

        for dep in spec.extra_dependencies:
            if not self.cargo.add_dependency(project_dir, dep.name, dep.features):
                return False

        for module in MODULE_DIRECTORIES:
            self._write(f"src/{module}/mod.rs", self.files.create_module_dir, project_dir, module)

        self._write(".gitignore", self.files.write_gitignore, project_dir)

        # Last step: nothing left to skip, but a failed commit still fails the run
        if not self.git.init_repo(project_dir):
            return False

        logger.info(f"📁 Project '{name}' scaffolded at {project_dir}")
        return True

    def _write(self, label: str, write, project_dir: Path, *args) -> None:
        try:
            write(project_dir, *args)
        except OSError as e:
            raise ScaffoldError(f"Failed to write {label} in {project_dir}: {e}") from e
