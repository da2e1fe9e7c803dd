"""
UIKB Logging

All loggers live under the "uikb" namespace. Environment:
- UIKB_DEBUG: true/1/yes for DEBUG level (default INFO)
- UIKB_LOG_FILE: also write to this file; stderr then only shows warnings
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("true", "1", "yes")


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Install handlers on the "uikb" logger, replacing any from earlier calls.

    Args:
        debug: DEBUG level when true. Defaults to UIKB_DEBUG.
        log_file: Extra file destination. Defaults to UIKB_LOG_FILE.

    Returns:
        The "uikb" logger
    """
    if debug is None:
        debug = _env_flag("UIKB_DEBUG")
    if log_file is None:
        log_file = os.environ.get("UIKB_LOG_FILE") or None

    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger("uikb")
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    console.setLevel(logging.WARNING if log_file else level)
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root.addHandler(file_handler)
        root.debug(f"Logging to file: {log_file}")

    return root


def get_logger(component: str) -> logging.Logger:
    """Logger for a component, e.g. get_logger("ingest.engine") -> "uikb.ingest.engine"."""
    return logging.getLogger(f"uikb.{component}")
