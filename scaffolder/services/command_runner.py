"""Synchronous external command execution."""
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from scaffolder.core.logger import get_logger

logger = get_logger(__name__)


@dataclass
class CommandResult:
    """Outcome of one external command."""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0


class CommandRunner:
    """Runs external tools and reports their exit status.

    Every process the scaffolder spawns goes through ``run`` so tests can
    swap in a recording double.
    """

    def run(
        self,
        args: List[str],
        cwd: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> CommandResult:
        """Run ``args`` to completion.

        Args:
            args: Command and arguments
            cwd: Working directory (defaults to the process cwd)
            env: Extra environment variables layered over os.environ

        Returns:
            CommandResult; ``success`` is False on nonzero exit or a missing binary
        """
        full_env = None
        if env:
            full_env = dict(os.environ)
            full_env.update(env)

        logger.debug(f"Running: {' '.join(args)} (cwd={cwd or '.'})")

        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                env=full_env,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else str(e)
            return CommandResult(
                success=False,
                stdout=e.stdout.strip() if e.stdout else "",
                stderr=stderr,
                returncode=e.returncode,
            )
        except FileNotFoundError:
            return CommandResult(
                success=False,
                stderr=f"{args[0]} not found. Please install it first.",
                returncode=127,
            )

        stdout = result.stdout.strip() if result.stdout else ""
        if stdout:
            logger.debug(f"Output: {stdout}")
        return CommandResult(
            success=True,
            stdout=stdout,
            stderr=result.stderr.strip() if result.stderr else "",
            returncode=result.returncode,
        )
