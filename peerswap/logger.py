"""Process-wide logging with a replaceable backend."""

from __future__ import annotations

import sys
import threading
import time
from typing import Any, Optional, TextIO


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError):
        return fmt + " " + " ".join(repr(arg) for arg in args)


class PeerswapLogger:
    """Writes timestamped ``[INFO]`` and ``[DEBUG]`` lines to a stream.

    When no stream is given, the current ``sys.stderr`` is used at write time.
    """

    def __init__(self, stream: Optional[TextIO] = None, debug_enabled: bool = True) -> None:
        self.stream = stream
        self.debug_enabled = debug_enabled
        self._lock = threading.Lock()

    def _write(self, level: str, fmt: str, args: tuple[Any, ...]) -> None:
        line = time.strftime("%Y/%m/%d %H:%M:%S ") + f"[{level}] " + _render(fmt, args)
        if not line.endswith("\n"):
            line += "\n"
        stream = self.stream if self.stream is not None else sys.stderr
        with self._lock:
            stream.write(line)
            stream.flush()

    def info(self, fmt: str, *args: Any) -> None:
        """Log an informational message."""
        self._write("INFO", fmt, args)

    def debug(self, fmt: str, *args: Any) -> None:
        """Log a debug message if debug output is enabled."""
        if self.debug_enabled:
            self._write("DEBUG", fmt, args)


_default_logger = PeerswapLogger()
_logger: Optional[Any] = None


def set_logger(logger: Optional[Any]) -> None:
    """Install a logger with ``info`` and ``debug`` methods; ``None`` restores the default."""
    global _logger
    _logger = logger


def info(fmt: str, *args: Any) -> None:
    """Log an informational message through the installed logger."""
    (_logger or _default_logger).info(fmt, *args)


def debug(fmt: str, *args: Any) -> None:
    """Log a debug message through the installed logger."""
    (_logger or _default_logger).debug(fmt, *args)