from __future__ import annotations

from .core import (
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "shutdown_logging",
]
