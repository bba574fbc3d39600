"""Infrastructure - logging."""

from .logging import (
    configure_logger,
    diagnostics_enabled,
    get_logger,
    reset_logging,
    setup_logging,
)

__all__ = [
    "configure_logger",
    "diagnostics_enabled",
    "get_logger",
    "reset_logging",
    "setup_logging",
]
