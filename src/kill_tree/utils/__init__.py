"""Shared utility functions for kill_tree."""

from .error_handling import log_and_ignore
from .rich_logging import KillTreeLogFormatter, setup_logging

__all__ = [
    # Error handling
    "log_and_ignore",
    # Logging
    "KillTreeLogFormatter",
    "setup_logging",
]
