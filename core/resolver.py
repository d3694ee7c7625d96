"""The read-parse-validate loop behind every prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from config import get_config
from core.console import Console
from core.exceptions import PromptIOError
from logger import get_logger

if TYPE_CHECKING:
    from core.prompt_spec import PromptSpec

T = TypeVar("T")

log = get_logger()


def _write(console: Console, message: str) -> None:
    try:
        console.write_line(message)
    except OSError as exc:
        raise PromptIOError(exc) from exc


def resolve(spec: "PromptSpec[T]", console: Console) -> T:
    """Ask for input until ``spec`` yields a value.

    The prompt is rendered once and shown before every read. Empty input
    returns the default when one is set and otherwise re-prompts silently.
    Text that fails to parse prints the type-error message; a value rejected
    by the predicate prints the validator-error message, if any. Neither is
    counted or limited.

    Args:
        spec: Prompt configuration.
        console: Line source and message sink.

    Returns:
        The first accepted value, or the default.

    Raises:
        PromptIOError: If the console fails to write or read.
    """
    prompt = spec.render_prompt()
    type_error = spec.type_error_message
    if type_error is None:
        type_error = get_config().messages.type_error

    attempt = 0
    while True:
        attempt += 1
        try:
            raw = console.read_line(prompt)
        except (OSError, EOFError) as exc:
            log.debug(f"prompt {prompt!r}: read failed on attempt {attempt}: {exc!r}")
            raise PromptIOError(exc) from exc

        text = raw.strip()
        if not text:
            if spec.has_default:
                log.debug(f"prompt {prompt!r}: empty input, using default {spec.default!r}")
                return spec.default
            continue

        try:
            value = spec.parser(text)
        except ValueError as exc:
            log.debug(f"prompt {prompt!r}: cannot parse {text!r}: {exc}")
            _write(console, type_error)
            continue

        if spec.predicate is not None and not spec.predicate(value):
            log.debug(f"prompt {prompt!r}: rejected {value!r}")
            if spec.validator_error_message is not None:
                _write(console, spec.validator_error_message)
            continue

        log.debug(f"prompt {prompt!r}: accepted {value!r} after {attempt} attempt(s)")
        return value
