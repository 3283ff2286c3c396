"""femtologging setup and message helpers for fixwatch.

The command line picks a level from ``--log-level`` or
``FIXWATCH_LOG_LEVEL``; library modules only emit through the helpers
below, which interpolate percent-style templates before handing the text
to femtologging.

Example:
>>> from fixwatch.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Checking %s", "/products/widget")

"""

from __future__ import annotations

import enum
import os
import typing as typ

from femtologging import basicConfig, get_logger

LOG_LEVEL_ENV = "FIXWATCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


class LogLevel(enum.StrEnum):
    """Levels accepted on the command line and in the environment."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def resolve_log_level(requested: str | None) -> str | None:
    """Return the explicit level, else the ``FIXWATCH_LOG_LEVEL`` value."""
    return requested or os.environ.get(LOG_LEVEL_ENV)


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Normalize a log level and report whether it was rejected.

    Parameters
    ----------
    level : str | None
        Raw level, case-insensitive and possibly padded.

    Returns
    -------
    tuple[str, bool]
        The level to use and ``True`` when ``level`` was given but is not a
        :class:`LogLevel`. An absent level silently selects the default.

    """
    if level is None:
        return (DEFAULT_LOG_LEVEL, False)
    normalized = level.strip().upper()
    if normalized in LogLevel.__members__:
        return (normalized, False)
    return (DEFAULT_LOG_LEVEL, True)


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Install the femtologging root configuration.

    Returns the applied level and whether the requested one was invalid, so
    the caller can warn once logging is live.
    """
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


class _SupportsLog(typ.Protocol):
    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(
    logger: _SupportsLog,
    level: LogLevel,
    message: str,
    exc_info: object | None = None,
) -> None:
    logger.log(level.value, message, exc_info=exc_info, stack_info=False)


def log_info(logger: _SupportsLog, template: str, *args: object) -> None:
    """Log progress at INFO after percent-style interpolation."""
    _emit(logger, LogLevel.INFO, template % args)


def log_warning(logger: _SupportsLog, template: str, *args: object) -> None:
    """Log a recoverable problem at WARNING after interpolation."""
    _emit(logger, LogLevel.WARNING, template % args)


def log_exception(logger: _SupportsLog, message: str, exc: BaseException) -> None:
    """Log a fatal failure at ERROR with ``exc`` attached as exc_info."""
    _emit(logger, LogLevel.ERROR, message, exc_info=exc)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "LogLevel",
    "configure_logging",
    "get_logger",
    "log_exception",
    "log_info",
    "log_warning",
    "normalize_log_level",
    "resolve_log_level",
]
