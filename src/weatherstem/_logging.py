"""Logging for the weatherstem client and CLI."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "weatherstem"

_LOG_FILE = os.environ.get("WEATHERSTEM_LOG_FILE")
_LOG_LEVEL = os.environ.get("WEATHERSTEM_LOG_LEVEL", "WARNING")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _resolve_level(name: str) -> int:
    """Map a level name to its number, WARNING for names logging does not know."""
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


def get_logger() -> logging.Logger:
    """Return the package logger, attaching its handler on first use.

    Messages go to stderr, or to WEATHERSTEM_LOG_FILE when it is set.
    """
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        _logger = logging.getLogger(LOGGER_NAME)
        _logger.setLevel(_resolve_level(_LOG_LEVEL))

        if not _logger.handlers:
            handler: logging.Handler
            if _LOG_FILE:
                handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            else:
                handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            _logger.addHandler(handler)

    return _logger


def log_api_call(fn: F) -> F:
    """Decorator that logs station requests, how many stations came back and failures."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger()
        # Skip the client instance
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.info("REQUEST: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            stations = len(result) if isinstance(result, list) else 1
            logger.info(
                "OK: %s(%s) -> %d stations (%.3fs)",
                fn.__qualname__, arg_str, stations, elapsed,
            )
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
