"""
Logging setup for calculation runs.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import LOG_DIR

CONSOLE_FORMAT = "h2explorer %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(lineno)d - %(message)s"
PACKAGE_LOGGER = "h2explorer"


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(log_dir_path: Union[str, Path],
                  log_file_name_prefix: str,
                  add_timestamp: bool = False,
                  console_level: int = logging.ERROR) -> logging.Logger:
    """
    Configure a named logger writing everything to a log file and only
    errors (by default) to the console.

    Args:
        log_dir_path: Directory for the log file; created if missing
        log_file_name_prefix: Logger name and log file stem (e.g. "tea_green_Almaty")
        add_timestamp: Append _YYYYmmdd_HHMMSS to the file name
        console_level: Minimum level echoed to the console

    Returns:
        The configured logger
    """
    log_dir_path = Path(log_dir_path)
    os.makedirs(log_dir_path, exist_ok=True)

    stem = log_file_name_prefix
    if add_timestamp:
        stem = f"{stem}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    log_file_path = log_dir_path / f"{stem}.log"

    logger = logging.getLogger(log_file_name_prefix)
    logger.setLevel(logging.DEBUG)

    # Re-running a region replaces its handlers
    _close_handlers(logger)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

    logger.info(f"Logging configured. Log file: {log_file_path}")
    return logger


def setup_tea_module_logger(region: str,
                            pathway: str = "green",
                            log_dir: Optional[Path] = None,
                            add_timestamp: bool = False) -> logging.Logger:
    """
    Logger for a single pathway run, writing to output/logs/tea by default.

    The package loggers (h2explorer.*) are routed to this run's log file
    until close_tea_module_logger is called.
    """
    tea_log_dir = Path(log_dir) if log_dir else LOG_DIR / "tea"
    safe_region = "".join(c if c.isalnum() or c in "-_" else "_" for c in region) or "region"
    run_logger = setup_logging(tea_log_dir, f"tea_{pathway}_{safe_region}", add_timestamp)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    # File handler of a previous run that was never closed
    _close_handlers(package_logger)
    package_logger.setLevel(logging.DEBUG)
    for handler in run_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            package_logger.addHandler(handler)
    package_logger.propagate = False
    return run_logger


def close_tea_module_logger(run_logger: logging.Logger) -> None:
    """Close a run's log file and hand the package loggers back to the root logger."""
    _close_handlers(run_logger)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _close_handlers(package_logger)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
