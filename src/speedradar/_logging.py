"""Logging helpers for the radar: file output and call tracing."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "speedradar"

_LOG_DIR = os.path.join(os.path.dirname(__file__), "..", "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "radar.log")

_file_handler: logging.FileHandler | None = None
_handler_lock = threading.Lock()


def configure_file_logging(log_file: str | None = None) -> logging.FileHandler:
    """Attach a file handler to the package logger, creating it on first use."""
    global _file_handler
    if _file_handler is not None:
        return _file_handler

    with _handler_lock:
        if _file_handler is not None:
            return _file_handler

        path = log_file or _LOG_FILE
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
        )
        logger.addHandler(handler)
        _file_handler = handler

    return _file_handler


def log_call(fn: F) -> F:
    """Decorator that traces method calls on the package logger."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = logging.getLogger(f"{LOGGER_NAME}.calls")
        # Build a readable argument summary (skip 'self')
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.debug("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.debug("OK: %s -> %.3fs", fn.__qualname__, elapsed)
            return result
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, elapsed,
            )
            raise

    return wrapper  # type: ignore[return-value]
