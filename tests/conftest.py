from __future__ import annotations

from typing import Iterable, List

import pytest

from config import Config, set_config
from logger import get_logger


class ScriptedConsole:
    """Console that replays fixed lines and records everything shown."""

    def __init__(self, lines: Iterable[str], fail_with: BaseException | None = None) -> None:
        self.lines: List[str] = list(lines)
        self.fail_with = fail_with
        self.prompts: List[str | None] = []
        self.messages: List[str] = []
        self.events: List[tuple[str, str | None]] = []

    def read_line(self, prompt: str | None) -> str:
        self.prompts.append(prompt)
        self.events.append(("prompt", prompt))
        if not self.lines:
            raise self.fail_with or EOFError("script exhausted")
        return self.lines.pop(0) + "\n"

    def write_line(self, message: str) -> None:
        self.messages.append(message)
        self.events.append(("message", message))


@pytest.fixture
def scripted():
    return ScriptedConsole


@pytest.fixture(autouse=True)
def default_config():
    set_config(Config())
    log = get_logger()
    log.set_level("WARN")
    log.set_stream(None)
    yield
    set_config(None)
