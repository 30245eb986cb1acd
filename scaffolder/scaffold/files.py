"""Filesystem writes performed while scaffolding a project."""
from pathlib import Path

from scaffolder.core.logger import get_logger
from scaffolder.scaffold.templates import GITIGNORE_BODY, MAIN_SOURCE_PATH, MODULE_PLACEHOLDER

logger = get_logger(__name__)


class ProjectFiles:
    """Writes the generated source tree into a cargo project.

    All methods raise OSError on failure; callers decide whether that is fatal.
    """

    def write_main_source(self, project_dir: Path, body: str) -> Path:
        """Overwrite the cargo-generated src/main.rs with ``body``."""
        main_path = Path(project_dir) / MAIN_SOURCE_PATH
        main_path.write_text(body)
        logger.debug(f"Wrote {main_path}")
        return main_path

    def create_module_dir(self, project_dir: Path, module_name: str) -> Path:
        """Create src/<module_name>/ holding an empty mod.rs."""
        module_dir = Path(project_dir) / "src" / module_name
        module_dir.mkdir(parents=True, exist_ok=True)
        (module_dir / MODULE_PLACEHOLDER).write_text("")
        logger.debug(f"Created module directory {module_dir}")
        return module_dir

    def write_gitignore(self, project_dir: Path) -> Path:
        """Write the fixed .gitignore at the project root."""
        logger.info("Creating .gitignore file")
        gitignore_path = Path(project_dir) / ".gitignore"
        gitignore_path.write_text(GITIGNORE_BODY)
        return gitignore_path
