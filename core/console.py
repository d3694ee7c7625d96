"""Console adapters used by the resolver to show prompts and read lines."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Console(Protocol):
    """Line source and message sink for one resolution."""

    def read_line(self, prompt: str | None) -> str:
        """Write ``prompt`` if non-empty, then block for one line of input.

        Raises:
            OSError: If writing or reading fails.
            EOFError: If the input stream is closed.
        """

    def write_line(self, message: str) -> None:
        """Write ``message`` as a full line."""


class StdioConsole:
    """Console bound to the process's standard streams.

    Streams are looked up on every call unless given explicitly, so a
    redirected ``sys.stdin``/``sys.stdout`` is honoured.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def read_line(self, prompt: str | None) -> str:
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def write_line(self, message: str) -> None:
        print(message, file=self.stdout)
