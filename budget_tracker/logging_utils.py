"""Mini README: Logging helpers shared by the budget tracker.

Structure:
    * configure_root_logger - sets the root level and installs our handler.
    * get_logger - returns a named logger, installing the handler if missing.

Usage:
    Modules call ``get_logger(__name__)`` at import time; that never touches
    the root level, so a level chosen by the CLI survives modules imported
    later (uvicorn imports the dashboard after the CLI has run). The handler
    is recognised by name, so repeated configuration never stacks handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

HANDLER_NAME = "budget_tracker"
_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def _install_handler(root_logger: logging.Logger) -> bool:
    """Attach the stream handler unless it is already present."""

    if any(handler.get_name() == HANDLER_NAME for handler in root_logger.handlers):
        return False
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)
    return True


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Set the root level, e.g. ``"DEBUG"``, and make sure output is formatted."""

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    _install_handler(root_logger)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger; the first call also defaults the root to INFO."""

    root_logger = logging.getLogger()
    if _install_handler(root_logger) and root_logger.level == logging.WARNING:
        root_logger.setLevel(logging.INFO)
    return logging.getLogger(name)
