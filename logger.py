"""Simple logger abstraction."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from config.models import LoggingConfig


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class Logger:
    """Minimal level-filtered logger for diagnostics.

    Diagnostics default to stderr so they never interleave with prompts,
    which are written to stdout by the console.
    """

    def __init__(self, level: str = "WARN", stream: TextIO | None = None) -> None:
        self._level = _LEVELS.get(level.upper(), _LEVELS["WARN"])
        self._stream = stream

    @property
    def level(self) -> int:
        return self._level

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def set_level(self, level: str) -> None:
        self._level = _LEVELS.get(level.upper(), _LEVELS["WARN"])

    def _write(self, tag: str, message: str) -> None:
        stream = self._stream or sys.stderr
        print(f"[{tag}] {message}", file=stream)

    def debug(self, message: str) -> None:
        if self._level <= _LEVELS["DEBUG"]:
            self._write("debug", message)

    def info(self, message: str) -> None:
        if self._level <= _LEVELS["INFO"]:
            self._write("info", message)

    def warn(self, message: str) -> None:
        if self._level <= _LEVELS["WARN"]:
            self._write("warn", message)

    def error(self, message: str) -> None:
        if self._level <= _LEVELS["ERROR"]:
            self._write("error", message)


_LOGGER = Logger()


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _LOGGER


def configure_logging(cfg: "LoggingConfig") -> Logger:
    """Apply a logging config section to the shared logger."""
    _LOGGER.set_level(cfg.level)
    _LOGGER.set_stream(sys.stdout if cfg.stream == "stdout" else None)
    return _LOGGER
