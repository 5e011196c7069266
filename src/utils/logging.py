"""Logging utilities for the project."""

import logging
import sys
from pathlib import Path
from typing import Optional

from utils.path_utils import ensure_dir


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_file: str) -> tuple[Optional[logging.Handler], Optional[OSError]]:
    """Open ``log_file``, creating its directory first."""
    try:
        ensure_dir(Path(log_file).parent)
        return logging.FileHandler(log_file), None
    except OSError as e:
        return None, e


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """Setup logging configuration for the project.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file; missing directories are
            created, and stdout alone is used if the file can't be opened
        format_string: Custom format string for log messages
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    file_handler, file_error = _file_handler(log_file) if log_file else (None, None)
    if file_handler is not None:
        handlers.append(file_handler)

    # Streamlit reruns the script; force=True keeps a single set of handlers
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string,
        handlers=handlers,
        force=True,
    )
    # urllib3 is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if file_error is not None:
        logging.getLogger(__name__).warning(
            f"Cannot write log file {log_file}: {file_error}; logging to stdout only"
        )


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)
