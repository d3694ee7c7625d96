#!/usr/bin/env python3
"""CLI entrypoint for lineprompt."""

from __future__ import annotations

import random
import sys
from dataclasses import replace
from typing import Any, Callable, List

from cli import AskOptions, ConfirmOptions, GuessOptions, parse_cli
from config import Config, get_config, load_config, set_config
from core.confirm import input_spec, try_confirm
from core.console import StdioConsole
from core.exceptions import ConfigError, PromptIOError
from core.guessing_game import play
from core.parsers import get_parser
from core.prompt_spec import PromptSpec
from logger import configure_logging, get_logger

log = get_logger()

_ORDERED_TYPES = ("int", "float", "decimal")


class UsageError(ValueError):
    """Raised when CLI options cannot be turned into a prompt spec."""


def _parse_option(parser: Callable[[str], Any], raw: str, option: str) -> Any:
    try:
        return parser(raw.strip())
    except ValueError as exc:
        raise UsageError(f"Invalid value for {option}: {raw!r}") from exc


def build_ask_spec(options: AskOptions) -> PromptSpec[Any]:
    """Translate ask options into a prompt spec.

    Raises:
        UsageError: If the type is unknown or an option value does not parse.
    """
    try:
        parser = get_parser(options.type_name)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc

    spec: PromptSpec[Any] = input_spec(parser)
    if options.prompt is not None:
        spec = spec.with_prompt(options.prompt)
    if options.default is not None:
        spec = spec.with_default(_parse_option(parser, options.default, "--default"))
    if options.type_error is not None:
        spec = spec.with_type_error_message(options.type_error)

    checks: List[Callable[[Any], bool]] = []
    problems: List[str] = []
    if options.minimum is not None or options.maximum is not None:
        if options.type_name.lower() not in _ORDERED_TYPES:
            raise UsageError(f"--min/--max need a numeric --type, not '{options.type_name}'")
    if options.minimum is not None:
        low = _parse_option(parser, options.minimum, "--min")
        checks.append(lambda v: v >= low)
        problems.append(f"at least {low}")
    if options.maximum is not None:
        high = _parse_option(parser, options.maximum, "--max")
        checks.append(lambda v: v <= high)
        problems.append(f"at most {high}")
    if options.choices:
        allowed = [_parse_option(parser, c, "--choice") for c in options.choices]
        checks.append(lambda v: v in allowed)
        problems.append("one of " + ", ".join(str(a) for a in allowed))

    if checks:
        spec = spec.matches(lambda v: all(check(v) for check in checks))
        message = options.validator_error
        if message is None:
            message = "Error: expected " + " and ".join(problems)
        spec = spec.with_validator_error_message(message)
    elif options.validator_error is not None:
        spec = spec.with_validator_error_message(options.validator_error)
    return spec


def _load(options: AskOptions | ConfirmOptions | GuessOptions) -> Config:
    if options.config_path is not None:
        cfg = load_config(options.config_path)
    else:
        set_config(None)
        cfg = get_config()
    if options.log_level:
        cfg.logging.level = options.log_level
    set_config(cfg)
    configure_logging(cfg.logging)
    return cfg


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code.
    """
    command, options = parse_cli(argv)

    if options.config_path is not None:
        if not options.config_path.exists():
            print(f"Config path not found: {options.config_path}", file=sys.stderr)
            return 2
        if options.config_path.is_dir():
            print(f"Config path must be a file: {options.config_path}", file=sys.stderr)
            return 2
    try:
        cfg = _load(options)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    # Prompts go to stderr so stdout carries only the answer.
    console = StdioConsole(stdout=sys.stderr)
    try:
        if isinstance(options, ConfirmOptions):
            return 0 if try_confirm(options.text, options.error, console) else 1
        if isinstance(options, GuessOptions):
            game_cfg = cfg.game
            if options.max_number is not None:
                if options.max_number <= 0:
                    print("--max must be positive", file=sys.stderr)
                    return 2
                game_cfg = replace(game_cfg, max_number=options.max_number)
            play(game_cfg, StdioConsole(), random.Random(options.seed))
            return 0
        try:
            spec = build_ask_spec(options)
        except UsageError as exc:
            print(str(exc), file=sys.stderr)
            return 2
        print(spec.try_get(console))
        return 0
    except PromptIOError as exc:
        log.error(f"{command}: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
