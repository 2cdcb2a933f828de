"""Mini README: Application-wide logging helpers for Budget Desk.

Structure:
    * configure_root_logger - installs a single stream handler on the root logger.
    * get_logger - module-level logger factory used across the package.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)``. The CLI calls
    ``configure_root_logger`` with the level from settings before the web
    server starts; later calls only adjust the level so reloading modules in
    development never stacks duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the Budget Desk handler once and apply ``level`` to the root logger."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    if _HANDLER is not None:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    _HANDLER = handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
