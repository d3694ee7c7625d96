"""Interactive line prompts: ask, parse, validate, repeat.

Typical use::

    from lineprompt import confirm, prompt

    age = prompt("Please enter your age: ", int).matches(lambda x: x < 120).get()
    if confirm("Are you sure you want to continue?"):
        ...
"""

from core.confirm import (
    confirm,
    confirm_spec,
    confirm_with_message,
    input_spec,
    is_yes,
    prompt,
    try_confirm,
)
from core.console import Console, StdioConsole
from core.exceptions import ConfigError, PromptError, PromptIOError
from core.parsers import (
    get_parser,
    parse_bool,
    parse_decimal,
    parse_float,
    parse_int,
    parse_path,
    parse_str,
)
from core.prompt_spec import MISSING, PromptSpec
from core.resolver import resolve

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "ConfigError",
    "Console",
    "PromptError",
    "PromptIOError",
    "PromptSpec",
    "StdioConsole",
    "confirm",
    "confirm_spec",
    "confirm_with_message",
    "get_parser",
    "input_spec",
    "is_yes",
    "parse_bool",
    "parse_decimal",
    "parse_float",
    "parse_int",
    "parse_path",
    "parse_str",
    "prompt",
    "resolve",
    "try_confirm",
]
