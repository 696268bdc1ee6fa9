"""Logging configuration using loguru.

Intercepts stdlib logging so that sqlalchemy and friends all flow through
loguru with a unified format.  Also provides the logging capability that is
passed into ``list_workspaces``.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class WorkspaceLog(Protocol):
    """Fire-and-forget logging sink used while collecting workspaces."""

    def log_exception(self, source: str, message: str, error: BaseException) -> None:
        """Report a recoverable failure together with the exception that caused it."""
        ...

    def log_info(self, source: str, message: str) -> None: ...


class LoguruWorkspaceLog:
    """``WorkspaceLog`` backed by loguru; *source* is bound as ``extra["source"]``."""

    def log_exception(self, source: str, message: str, error: BaseException) -> None:
        logger.bind(source=source).opt(exception=error).error(message)

    def log_info(self, source: str, message: str) -> None:
        logger.bind(source=source).info(message)


class _InterceptHandler(logging.Handler):
    """Bridge stdlib logging records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Map stdlib level name -> loguru level
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk the call stack so loguru reports the real call-site
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru as the sole logging sink.

    Call this once at process startup (the CLI does it before reading storage).
    """
    level = level.upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]}</cyan> - "
            "<level>{message}</level>"
        ),
    )
    logger.configure(extra={"source": "recent_workspaces"})

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    # SQLAlchemy is chatty at INFO when echo is enabled anywhere
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    logger.debug("Logging initialised (level={})", level)
