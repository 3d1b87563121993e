"""
structmeta Logging Configuration

Configures logging based on environment variables:
- STRUCTMETA_DEBUG: Enable debug logging (default: false)
- STRUCTMETA_LOG_FILE: Optional log file path (default: none, stderr only)

stdout is never used for logs; it may carry the output document.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for structmeta.

    Args:
        debug: Enable debug level. Defaults to STRUCTMETA_DEBUG env var.
        log_file: Log file path. Defaults to STRUCTMETA_LOG_FILE env var.
                  When unset, only stderr receives log output.

    Returns:
        Root logger for structmeta
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("STRUCTMETA_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("STRUCTMETA_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("structmeta")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    # stderr only shows warnings when a log file takes the full stream
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "extractor", "types", "cli")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"structmeta.{component}")
