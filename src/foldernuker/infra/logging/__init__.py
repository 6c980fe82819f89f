from __future__ import annotations

from .config import LoggingConfig, level_for_cli
from .core import (
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "level_for_cli",
    "shutdown_logging",
]
