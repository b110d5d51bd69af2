"""Centralized logging for steambot."""

from __future__ import annotations

import logging
import sys
import threading

_lock = threading.Lock()
_setup_done = False


class _Formatter(logging.Formatter):
    """Format log records as ``[tag] message``, stripping the ``steambot.`` prefix."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("steambot."):
            name = name[len("steambot.") :]
        return f"[{name}] {super().format(record)}"


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``steambot`` root logger (idempotent).

    Attaches a single ``StreamHandler(sys.stderr)`` with level WARNING
    (or DEBUG when *verbose* is True). A later call with ``verbose=True``
    still lowers the level even though the handler is already attached.
    """
    global _setup_done
    with _lock:
        logger = logging.getLogger("steambot")
        if verbose:
            logger.setLevel(logging.DEBUG)
        if _setup_done:
            return
        if not verbose:
            logger.setLevel(logging.WARNING)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
        _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(f"steambot.{name}")``.

    Lazily calls :func:`setup_logging` on first use so that log output
    is routed to stderr even when callers skip explicit setup.
    """
    setup_logging()
    return logging.getLogger(f"steambot.{name}")
