"""Core module - configuration, logging, exceptions, locking."""

from netinfluence.core.config import Settings, get_settings
from netinfluence.core.exceptions import (
    NetInfluenceError,
    GraphError,
    LoaderError,
    ScoreError,
    NodeNotFoundError,
    WrongModeError,
    EmptyGraphError,
)
from netinfluence.core.locking import ReadWriteLock
from netinfluence.core.logging import setup_logging, get_logger, LogContext

__all__ = [
    "Settings",
    "get_settings",
    "NetInfluenceError",
    "GraphError",
    "LoaderError",
    "ScoreError",
    "NodeNotFoundError",
    "WrongModeError",
    "EmptyGraphError",
    "ReadWriteLock",
    "setup_logging",
    "get_logger",
    "LogContext",
]
