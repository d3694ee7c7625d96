"""Error types raised by prompt resolution and config loading."""

from __future__ import annotations


class PromptError(Exception):
    """Base for all lineprompt errors."""


class PromptIOError(PromptError):
    """Raised when the console fails to write a prompt or read a line.

    This is the only fatal outcome of a resolution. Parse failures and
    rejected values are retried and never raised.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        if isinstance(cause, EOFError):
            msg = "Input stream closed"
        else:
            msg = f"Console I/O failed: {type(cause).__name__}: {cause}"
        super().__init__(msg)


class ConfigError(PromptError):
    """Raised when a config file cannot be read or is not a JSON object."""

    def __init__(self, path: str, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        if cause is not None:
            msg = f"Failed to load config '{path}': {type(cause).__name__}: {cause}"
        else:
            msg = f"Config must be a JSON object: {path}"
        super().__init__(msg)
