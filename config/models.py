"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class MessagesConfig:
    """User-facing message settings."""

    type_error: str = "Error: invalid input"


@dataclass
class ConfirmConfig:
    """Yes/no prompt settings."""

    suffix: str = " [y/N] "
    default: str = "n"
    yes_words: List[str] = field(default_factory=lambda: ["y", "yes"])
    no_words: List[str] = field(default_factory=lambda: ["n", "no"])


@dataclass
class LoggingConfig:
    """Diagnostic logging settings."""

    level: str = "WARN"
    stream: str = "stderr"


@dataclass
class GameConfig:
    """Number-guessing game settings."""

    max_number: int = 255
    step: int = 2


@dataclass
class Config:
    """Top-level configuration container."""

    messages: MessagesConfig = field(default_factory=MessagesConfig)
    confirm: ConfirmConfig = field(default_factory=ConfirmConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    game: GameConfig = field(default_factory=GameConfig)
