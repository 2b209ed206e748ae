"""Logging configuration for netconfig.

Diagnostics go to stderr so they never mix with command output on stdout.

Environment Variables:
    NETCONFIG_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    NETCONFIG_LOG_FILE: Optional path to a rotating log file
    NETCONFIG_LOG_MAX_SIZE: Max log file size in MB (default: 1)
    NETCONFIG_LOG_BACKUPS: Number of backup files to keep (default: 3)

Usage:
    from netconfig.utils.logging_config import setup_logging, timed

    setup_logging()  # Call once at startup

    @timed("set_property")
    async def set_property(self, ...):
        ...
"""
import functools
import logging
import os
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional

# Timing of remote calls - separate from main logger for easy filtering
perf_logger = logging.getLogger("netconfig.perf")

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(name)-25s | %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_level() -> int:
    """Get log level from environment."""
    level_str = os.environ.get("NETCONFIG_LOG_LEVEL", "WARNING").upper()
    return getattr(logging, level_str, logging.WARNING)


def get_log_file() -> Optional[Path]:
    """Get log file path from environment, if any."""
    path_str = os.environ.get("NETCONFIG_LOG_FILE")
    return Path(path_str) if path_str else None


def setup_logging(level: Optional[int] = None) -> None:
    """Configure the netconfig logger.

    Sets up:
    - Console handler on stderr (respects NETCONFIG_LOG_LEVEL)
    - File handler with rotation when NETCONFIG_LOG_FILE is set

    Args:
        level: Explicit console level, overrides the environment
    """
    log_level = level if level is not None else get_log_level()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger("netconfig")
    root_logger.setLevel(logging.DEBUG)  # Capture all, handlers filter
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = get_log_file()
    if log_file:
        max_size_mb = int(os.environ.get("NETCONFIG_LOG_MAX_SIZE", "1"))
        backup_count = int(os.environ.get("NETCONFIG_LOG_BACKUPS", "3"))
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug(
        f"Logging initialized: level={logging.getLevelName(log_level)}, file={log_file}"
    )


def timed(operation: str):
    """Decorator to log execution time of coroutine functions.

    Args:
        operation: Name of the operation (e.g., "connect", "call")
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
                elapsed = (time.perf_counter() - start) * 1000  # ms
                perf_logger.debug(f"{operation:20s} | {elapsed:8.2f}ms | OK")
                return result
            except Exception as e:
                elapsed = (time.perf_counter() - start) * 1000
                perf_logger.debug(f"{operation:20s} | {elapsed:8.2f}ms | FAIL: {e}")
                raise

        return wrapper

    return decorator
