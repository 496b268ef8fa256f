"""
Unified output system using Loguru.
User-facing messages go to stdout and the log file; diagnostics go to the log file only.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import get_data_dir


def get_log_file_path() -> Path:
    """Get the default path to the log file."""
    return get_data_dir() / "scroll-window.log"


def setup_loguru(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    console_output: bool = False,
) -> Path:
    """
    Configure loguru for file logging, optionally mirrored to stderr.

    Args:
        log_file: Path to log file (default: ~/.local/share/scroll-window/scroll-window.log)
        level: Minimum level for logging (TRACE, DEBUG, INFO, WARNING, ERROR)
        console_output: Whether to also write log records to stderr

    Returns:
        The log file path in use
    """
    log_file = log_file if log_file else get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,  # Synchronous writes
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")
    return log_file


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints for the CLI user.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    if level in ("warning", "error"):
        print(message, file=sys.stderr)
    else:
        print(message)
