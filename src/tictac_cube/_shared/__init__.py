# Area: Shared
"""
Shared utilities - logging configuration.
"""

from .logging_config import (
    setup_logging,
    log_rejection,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "log_rejection",
    "TerminalFormatter",
    "JSONFormatter",
]
