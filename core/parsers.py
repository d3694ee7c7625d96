"""Text-to-value conversions for prompt specs.

Every parser takes the trimmed input line and either returns the converted
value or raises ``ValueError``. Any callable with that contract works as a
parser; the builtins ``int`` and ``float`` already qualify.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable, Dict

_TRUE_WORDS = {"true", "t", "yes", "y", "on", "1"}
_FALSE_WORDS = {"false", "f", "no", "n", "off", "0"}


def parse_str(text: str) -> str:
    return text


def parse_int(text: str) -> int:
    return int(text)


def parse_float(text: str) -> float:
    return float(text)


def parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal literal: {text!r}") from exc


def parse_bool(text: str) -> bool:
    """Parse common truthy/falsy words, case-insensitively."""
    value = text.strip().lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def parse_path(text: str) -> Path:
    """Parse a filesystem path, expanding ``~``. The path need not exist."""
    return Path(text).expanduser()


PARSERS: Dict[str, Callable[[str], Any]] = {
    "str": parse_str,
    "int": parse_int,
    "float": parse_float,
    "decimal": parse_decimal,
    "bool": parse_bool,
    "path": parse_path,
}


def get_parser(name: str) -> Callable[[str], Any]:
    """Look up a parser by type name.

    Raises:
        ValueError: If no parser is registered under ``name``.
    """
    try:
        return PARSERS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(PARSERS))
        raise ValueError(f"Unknown type '{name}' (expected one of: {known})") from None
