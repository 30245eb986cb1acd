"""Git repository initialization for scaffolded projects."""
from pathlib import Path
from typing import Dict, List, Optional

from scaffolder.core.logger import get_logger
from scaffolder.services.command_runner import CommandResult, CommandRunner

logger = get_logger(__name__)


class GitManager:
    """Creates a repository holding a single commit of the project tree."""

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        git_bin: str = "git",
        author_name: str = "Rust Backend Scaffolder",
        author_email: str = "scaffolder@example.com",
        commit_message: str = "Initial commit: Scaffolded project",
    ):
        self.runner = runner or CommandRunner()
        self.git_bin = git_bin
        self.author_name = author_name
        self.author_email = author_email
        self.commit_message = commit_message

    def _identity_env(self) -> Dict[str, str]:
        # Overrides user.name/user.email from any git config
        return {
            "GIT_AUTHOR_NAME": self.author_name,
            "GIT_AUTHOR_EMAIL": self.author_email,
            "GIT_COMMITTER_NAME": self.author_name,
            "GIT_COMMITTER_EMAIL": self.author_email,
        }

    def _git(self, args: List[str], cwd: Path) -> CommandResult:
        return self.runner.run([self.git_bin] + args, cwd=cwd, env=self._identity_env())

    def init_repo(self, project_dir: Path) -> bool:
        """Initialize a repository and commit every file in ``project_dir``.

        Runs init, stages all files, writes the index tree and commits it
        with no parents, then points HEAD at the new commit.

        Args:
            project_dir: Project root

        Returns:
            True if successful, False otherwise
        """
        project_dir = Path(project_dir)
        logger.info("Initializing git repository")

        steps = [
            ("initialize repository", ["init"]),
            ("stage files", ["add", "-A"]),
            ("write tree", ["write-tree"]),
        ]
        tree_id = None
        for description, args in steps:
            result = self._git(args, project_dir)
            if not result.success:
                return self._fail(description, result)
            tree_id = result.stdout

        # commit.gpgSign from the user's config must not apply
        commit_args = ["commit-tree", "--no-gpg-sign", tree_id, "-m", self.commit_message]
        result = self._git(commit_args, project_dir)
        if not result.success:
            return self._fail("create commit", result)
        commit_id = result.stdout

        result = self._git(["update-ref", "HEAD", commit_id], project_dir)
        if not result.success:
            return self._fail("update HEAD", result)

        logger.info(f"✓ Git repository initialized ({commit_id[:7]})")
        return True

    def _fail(self, description: str, result: CommandResult) -> bool:
        logger.error(f"Failed to initialize git repository: could not {description}")
        if result.stderr:
            logger.error(f"Error output: {result.stderr}")
        return False
