"""Scaffolder - generate Rust backend service projects."""

__version__ = "0.1.0"
