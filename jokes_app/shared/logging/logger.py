"""Loguru setup for the jokes app.

Every record carries ``extra["correlation_id"]``, filled from a ContextVar
that the request middleware sets per request (``-`` outside a request).
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")

# Libraries whose INFO chatter drowns the request log
_QUIET_LOGGERS = {"sqlalchemy.engine": logging.WARNING, "werkzeug": logging.INFO}


def _attach_correlation_id(record) -> None:
    record["extra"]["correlation_id"] = _CORRELATION_ID.get()


logger.configure(patcher=_attach_correlation_id)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def _log_file_path() -> Path:
    configured = os.getenv("LOG_FILE")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parents[3] / "instance" / "app.log"


class _InterceptHandler(logging.Handler):
    """Route stdlib ``logging`` records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    if level is None:
        level = "DEBUG" if debug_mode else os.getenv("LOG_LEVEL", "INFO")
    level = level.upper()
    log_file = _log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level=level, format=_FMT, colorize=True, diagnose=False)
    logger.add(
        log_file,
        level=level,
        format=_FMT,
        colorize=False,
        diagnose=False,
        enqueue=True,
        encoding="utf-8",
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, lib_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(lib_level)


__all__ = ["clear_correlation_id", "logger", "set_correlation_id", "setup_logging"]
