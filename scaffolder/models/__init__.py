"""Data models for scaffold requests and user settings."""
from scaffolder.models.request import ScaffoldRequest
from scaffolder.models.settings import SettingsFile

__all__ = [
    "ScaffoldRequest",
    "SettingsFile",
]
