"""Adapters around the external tools the scaffolder drives."""
from scaffolder.services.cargo_manager import CargoManager
from scaffolder.services.command_runner import CommandResult, CommandRunner
from scaffolder.services.git_manager import GitManager

__all__ = [
    "CargoManager",
    "CommandResult",
    "CommandRunner",
    "GitManager",
]
