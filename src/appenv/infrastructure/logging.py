"""Loguru setup for the appenv diagnostic channel.

appenv logs every resolution and merge decision at DEBUG level. The
``appenv`` namespace is disabled until ``setup_logging`` or
``configure_logger(diagnostics=True)`` turns it on, so host applications
only see these lines when they ask for them.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

PACKAGE_NAME: t.Final = "appenv"

_LOG_FORMAT: t.Final = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

_handler_id: int | None = None


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    diagnostics: bool = False,
) -> None:
    """Switch the diagnostic channel on or off.

    With diagnostics on, appenv records at ``level`` and above go to a
    stderr sink of our own. Sinks added by the host are left alone.

    Args:
        level: Minimum level written to stderr
        diagnostics: Enable log records emitted from the appenv package
    """
    global _handler_id

    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None

    if not diagnostics:
        logger.disable(PACKAGE_NAME)
        return

    _handler_id = logger.add(
        sys.stderr,
        level=str(level),
        format=_LOG_FORMAT,
        filter=PACKAGE_NAME,
    )
    logger.enable(PACKAGE_NAME)


def setup_logging(settings: Settings) -> None:
    """Configure logging from Settings."""
    configure_logger(level=settings.log_level, diagnostics=settings.diagnostics)


def get_logger(name: str) -> "loguru.Logger":
    """Return the shared loguru logger bound to a module name."""
    return logger.bind(logger_name=name)


def reset_logging() -> None:
    """Drop our sink and silence the appenv namespace again."""
    global _handler_id

    if _handler_id is not None:
        logger.remove(_handler_id)
        _handler_id = None
    logger.disable(PACKAGE_NAME)


def diagnostics_enabled() -> bool:
    """Whether our diagnostic sink is installed."""
    return _handler_id is not None
