"""Rust backend project scaffolding."""

from .core import ScaffoldError, ScaffoldManager
from .files import ProjectFiles
from .templates import Framework, FrameworkSpec, lookup, supported_frameworks

__all__ = [
    "Framework",
    "FrameworkSpec",
    "ProjectFiles",
    "ScaffoldError",
    "ScaffoldManager",
    "lookup",
    "supported_frameworks",
]
