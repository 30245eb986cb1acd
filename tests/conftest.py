"""Shared test fixtures for scaffolder tests."""
from pathlib import Path
from typing import Dict, List, Optional

import logging

import pytest

from scaffolder.core import config as config_module
from scaffolder.core import logger as logger_module
from scaffolder.services.command_runner import CommandResult


class RecordingRunner:
    """CommandRunner double that records commands instead of spawning them.

    ``cargo new <name>`` creates the directory layout cargo would, so the
    workflow's file writes land somewhere real. Commands listed in
    ``failures`` (matched on their argument prefix) report failure.
    """

    def __init__(self, failures: Optional[List[List[str]]] = None, outputs: Optional[Dict[str, str]] = None):
        self.calls = []
        self.failures = failures or []
        self.outputs = outputs or {"write-tree": "4b825dc6", "commit-tree": "a1b2c3d4e5f6"}

    def run(self, args, cwd=None, env=None):
        self.calls.append((list(args), cwd, env))

        for prefix in self.failures:
            if list(args[:len(prefix)]) == prefix:
                return CommandResult(success=False, stderr="boom", returncode=1)

        if len(args) > 2 and args[1] == "new":
            project_dir = Path(cwd) / args[2]
            (project_dir / "src").mkdir(parents=True)
            (project_dir / "Cargo.toml").write_text(f'[package]\nname = "{args[2]}"\n')
            (project_dir / "src" / "main.rs").write_text('fn main() {}\n')

        stdout = self.outputs.get(args[1], "") if len(args) > 1 else ""
        return CommandResult(success=True, stdout=stdout)

    @property
    def commands(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def runner():
    """Recording command runner."""
    return RecordingRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and SCAFFOLDER_* variables out of tests."""
    for name in (
        "SCAFFOLDER_CONFIG",
        "SCAFFOLDER_CARGO_BIN",
        "SCAFFOLDER_GIT_BIN",
        "SCAFFOLDER_AUTHOR_NAME",
        "SCAFFOLDER_AUTHOR_EMAIL",
        "SCAFFOLDER_COMMIT_MESSAGE",
        "SCAFFOLDER_LOG_FILE",
        "SCAFFOLDER_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_FILE", tmp_path / "no-such-config.yml")
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo --verbose and --log-file between CLI invocations."""
    yield
    logger_module.detach_log_file()
    logging.getLogger(logger_module.ROOT_LOGGER).setLevel(logging.INFO)
