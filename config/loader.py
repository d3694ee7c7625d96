"""Configuration loading and normalization."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List

from config.merge import merge_sections
from config.models import Config, ConfirmConfig, GameConfig, LoggingConfig, MessagesConfig
from core.exceptions import ConfigError
from logger import get_logger


DEFAULTS_PATH = Path(__file__).resolve().parent / "defaults.json"
CONFIG_ENV = "LINEPROMPT_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")
_LOG_STREAMS = ("stderr", "stdout")

log = get_logger()


def _as_list(value: Any, default: List[str]) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_choice(value: Any, choices: tuple[str, ...], default: str) -> str:
    if not isinstance(value, str):
        return default
    for choice in choices:
        if value.lower() == choice.lower():
            return choice
    return default


def _load_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(str(path), exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(str(path))
    return data


def config_from_dict(raw: Dict[str, Any]) -> Config:
    """Build a Config instance from a raw dictionary."""
    messages_raw = raw.get("messages", {}) or {}
    confirm_raw = raw.get("confirm", {}) or {}
    logging_raw = raw.get("logging", {}) or {}
    game_raw = raw.get("game", {}) or {}

    defaults = Config()
    messages = MessagesConfig(
        type_error=_as_str(messages_raw.get("type_error"), defaults.messages.type_error),
    )
    confirm = ConfirmConfig(
        suffix=_as_str(confirm_raw.get("suffix"), defaults.confirm.suffix),
        default=_as_str(confirm_raw.get("default"), defaults.confirm.default),
        yes_words=[w.lower() for w in _as_list(confirm_raw.get("yes_words"), defaults.confirm.yes_words)],
        no_words=[w.lower() for w in _as_list(confirm_raw.get("no_words"), defaults.confirm.no_words)],
    )
    logging = LoggingConfig(
        level=_as_choice(logging_raw.get("level"), _LOG_LEVELS, defaults.logging.level),
        stream=_as_choice(logging_raw.get("stream"), _LOG_STREAMS, defaults.logging.stream),
    )

    max_number = _as_int(game_raw.get("max_number"), defaults.game.max_number)
    step = _as_int(game_raw.get("step"), defaults.game.step)
    game = GameConfig(
        max_number=max_number if max_number > 0 else defaults.game.max_number,
        step=step if step > 0 else defaults.game.step,
    )
    return Config(messages=messages, confirm=confirm, logging=logging, game=game)


def load_config(path: Path | None = None, use_env: bool = True) -> Config:
    """Load packaged defaults, merged with an optional user config file.

    Args:
        path: Optional user config path. When omitted, the path named by the
            ``LINEPROMPT_CONFIG`` environment variable is used, if set.
        use_env: Whether to consult ``LINEPROMPT_CONFIG`` at all.

    Returns:
        Normalized Config instance.

    Raises:
        ConfigError: If a config file cannot be read or is not a JSON object.
    """
    raw = _load_json(DEFAULTS_PATH) if DEFAULTS_PATH.exists() else {}
    if path is None and use_env:
        env_path = os.environ.get(CONFIG_ENV, "").strip()
        if env_path:
            path = Path(env_path).expanduser()
    if path is not None:
        raw = merge_sections(raw, _load_json(path))
    return config_from_dict(raw)


_CONFIG: Config | None = None


def get_config() -> Config:
    """Return the shared config, loading it on first use.

    An unreadable ``LINEPROMPT_CONFIG`` file is reported and replaced by the
    packaged defaults, so prompts keep working.
    """
    global _CONFIG
    if _CONFIG is None:
        try:
            _CONFIG = load_config()
        except ConfigError as exc:
            log.warn(f"{exc}; using packaged defaults")
            _CONFIG = load_config(use_env=False)
    return _CONFIG


def set_config(cfg: Config | None) -> None:
    """Replace the shared config; ``None`` forces a reload on next use."""
    global _CONFIG
    _CONFIG = cfg
