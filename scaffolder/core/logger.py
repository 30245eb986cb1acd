"""Console and file logging for scaffolding runs.

Every module logs through ``get_logger(__name__)``. Records propagate to the
``scaffolder`` logger, which owns the single Rich console handler and, when
requested, one log file.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "scaffolder"
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
FALLBACK_LOG_FILE = Path("/tmp/scaffolder.log")

# stderr, so cargo/git progress never mixes with command output
console = Console(stderr=True)

_file_handler: Optional[logging.FileHandler] = None


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger below ``scaffolder`` that reports through its console handler."""
    _root()
    return logging.getLogger(name)


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> Optional[Path]:
    """Apply the run's logging options.

    Args:
        verbose: Log cargo/git invocations and their output (DEBUG)
        log_file: Also append records to this file

    Returns:
        Path of the log file in use, or None when logging to the console only
    """
    level = logging.DEBUG if verbose else logging.INFO
    root = _root()
    root.setLevel(level)

    if _file_handler is not None:
        _file_handler.setLevel(level)
        return Path(_file_handler.baseFilename)
    if not log_file:
        return None
    return _attach_log_file(Path(log_file).expanduser(), level)


def _open(path: Path) -> logging.FileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path)


def _attach_log_file(path: Path, level: int) -> Path:
    global _file_handler
    root = _root()

    try:
        handler = _open(path)
    except OSError as e:
        # A failure here propagates; the CLI reports it as a normal error
        root.warning(f"Cannot write log file {path} ({e}), using {FALLBACK_LOG_FILE}")
        path = FALLBACK_LOG_FILE
        handler = _open(path)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    _file_handler = handler

    root.info(f"Logging to {path}")
    return path


def detach_log_file() -> None:
    """Close the log file opened by configure_logging, if any."""
    global _file_handler
    if _file_handler is None:
        return
    logging.getLogger(ROOT_LOGGER).removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None
