"""Shortcut constructors and yes/no prompts."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from config import get_config
from core.console import Console
from core.parsers import parse_str
from core.prompt_spec import PromptSpec

T = TypeVar("T")


def input_spec(parser: Callable[[str], T] = parse_str) -> PromptSpec[T]:  # type: ignore[assignment]
    """Return a new empty spec with no prompt text."""
    return PromptSpec(parser=parser)


def prompt(text: object, parser: Callable[[str], T] = parse_str) -> PromptSpec[T]:  # type: ignore[assignment]
    """Return a spec that shows ``text`` before reading.

    >>> years = prompt("How many years have you been coding: ", int).with_default(0)
    """
    return input_spec(parser).with_prompt(text)


def confirm_spec(text: object, message: str | None = None) -> PromptSpec[str]:
    """Build the yes/no spec used by the confirm helpers.

    Accepts the configured yes and no words in any case; empty input
    resolves to the configured default answer.
    """
    cfg = get_config().confirm
    accepted = set(cfg.yes_words) | set(cfg.no_words)
    spec: PromptSpec[str] = (
        prompt(text)
        .with_suffix(cfg.suffix)
        .with_default(cfg.default)
        .matches(lambda s: s.strip().lower() in accepted)
    )
    if message is not None:
        spec = spec.with_validator_error_message(message)
    return spec


def is_yes(answer: Any) -> bool:
    """Return true if ``answer`` is one of the configured yes words."""
    return str(answer).strip().lower() in get_config().confirm.yes_words


def try_confirm(text: object, message: str | None = None, console: Console | None = None) -> bool:
    """Ask a yes/no question; raises ``PromptIOError`` if input fails."""
    return confirm_spec(text, message).try_map(is_yes, console)


def confirm(text: object, console: Console | None = None) -> bool:
    """Ask a yes/no question, silently re-asking on other answers.

    >>> if not confirm("Are you sure you want to continue?"):
    ...     raise SystemExit("Aborted!")
    """
    return confirm_spec(text).map(is_yes, console)


def confirm_with_message(text: object, message: str, console: Console | None = None) -> bool:
    """Ask a yes/no question, printing ``message`` on other answers."""
    return confirm_spec(text, message).map(is_yes, console)
