"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a config.json file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        help="Override the configured diagnostic log level",
    )


@dataclass
class AskOptions:
    """Parsed CLI options for the ask command."""

    prompt: str | None
    type_name: str
    default: str | None
    minimum: str | None
    maximum: str | None
    choices: list[str] = field(default_factory=list)
    type_error: str | None = None
    validator_error: str | None = None
    config_path: Path | None = None
    log_level: str | None = None


@dataclass
class ConfirmOptions:
    """Parsed CLI options for the confirm command."""

    text: str
    error: str | None
    config_path: Path | None = None
    log_level: str | None = None


@dataclass
class GuessOptions:
    """Parsed CLI options for the guess command."""

    max_number: int | None
    seed: int | None
    config_path: Path | None = None
    log_level: str | None = None


def _resolve_config_path(raw: str | None) -> Path | None:
    if raw:
        return Path(raw).expanduser().resolve()
    return None


def _parse_ask_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lineprompt ask",
        description="Prompt for a single value and print it on stdout.",
    )
    _add_common_args(parser)
    parser.add_argument("--prompt", help="Prompt text shown before reading")
    parser.add_argument(
        "--type",
        dest="type_name",
        default="str",
        help="Target type: str, int, float, decimal, bool or path (default: str)",
    )
    parser.add_argument("--default", help="Value used when the input is empty")
    parser.add_argument("--min", dest="minimum", help="Smallest accepted value (numeric types)")
    parser.add_argument("--max", dest="maximum", help="Largest accepted value (numeric types)")
    parser.add_argument(
        "--choice",
        action="append",
        dest="choices",
        help="Accepted value; repeat to allow several",
    )
    parser.add_argument("--type-error", help="Message printed when the input cannot be parsed")
    parser.add_argument("--validator-error", help="Message printed when the value is rejected")
    return parser.parse_args(argv)


def _parse_confirm_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lineprompt confirm",
        description="Ask a yes/no question; exit 0 for yes and 1 for no.",
    )
    _add_common_args(parser)
    parser.add_argument("text", help="Question to ask")
    parser.add_argument("--error", help="Message printed on answers other than yes/no")
    return parser.parse_args(argv)


def _parse_guess_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lineprompt guess",
        description="Play the number-guessing game.",
    )
    _add_common_args(parser)
    parser.add_argument("--max", dest="max_number", type=int, help="Largest secret number")
    parser.add_argument("--seed", type=int, help="Random seed, for reproducible games")
    return parser.parse_args(argv)


def get_ask_options(argv: list[str] | None = None) -> AskOptions:
    """Build an AskOptions instance from CLI arguments."""
    args = _parse_ask_args(argv)
    return AskOptions(
        prompt=args.prompt,
        type_name=args.type_name,
        default=args.default,
        minimum=args.minimum,
        maximum=args.maximum,
        choices=list(args.choices or []),
        type_error=args.type_error,
        validator_error=args.validator_error,
        config_path=_resolve_config_path(args.config),
        log_level=args.log_level,
    )


def get_confirm_options(argv: list[str] | None = None) -> ConfirmOptions:
    """Build a ConfirmOptions instance from CLI arguments."""
    args = _parse_confirm_args(argv)
    return ConfirmOptions(
        text=args.text,
        error=args.error,
        config_path=_resolve_config_path(args.config),
        log_level=args.log_level,
    )


def get_guess_options(argv: list[str] | None = None) -> GuessOptions:
    """Build a GuessOptions instance from CLI arguments."""
    args = _parse_guess_args(argv)
    return GuessOptions(
        max_number=args.max_number,
        seed=args.seed,
        config_path=_resolve_config_path(args.config),
        log_level=args.log_level,
    )


def parse_cli(
    argv: list[str] | None = None,
) -> tuple[str, AskOptions | ConfirmOptions | GuessOptions]:
    """Parse command-line arguments and return the command name and options.

    Without a recognised command name the arguments are parsed as ``ask``.
    """
    if argv is None:
        import sys

        args = sys.argv[1:]
    else:
        args = argv
    if args and args[0] == "confirm":
        return "confirm", get_confirm_options(args[1:])
    if args and args[0] == "guess":
        return "guess", get_guess_options(args[1:])
    if args and args[0] == "ask":
        return "ask", get_ask_options(args[1:])
    return "ask", get_ask_options(args)
