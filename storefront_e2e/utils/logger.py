"""
Harness logging.

Everything logs under the ``storefront_e2e`` logger, which writes to stdout
through a single handler. LOG_LEVEL picks the threshold.
"""
import logging
import os
import sys
import warnings
from typing import Optional

ROOT_LOGGER_NAME = "storefront_e2e"
DEFAULT_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(name: Optional[str]) -> int:
    """
    Map a level name such as ``"debug"`` to its numeric value.

    Unknown names fall back to INFO with a RuntimeWarning, so a typo in
    LOG_LEVEL cannot stop the package from importing.
    """
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    warnings.warn(f"Unknown LOG_LEVEL {name!r}; using INFO", RuntimeWarning, stacklevel=2)
    return DEFAULT_LEVEL


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Set the harness log level (default: $LOG_LEVEL) and attach the stdout handler once."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(resolve_level(level if level is not None else os.getenv("LOG_LEVEL")))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    # Scenario output stays out of the root logger
    root.propagate = False
    return root


logger = configure_logging()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Harness logger, or its ``storefront_e2e.<name>`` child."""
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logger
