"""Config package facade."""

from config.loader import CONFIG_ENV, config_from_dict, get_config, load_config, set_config
from config.models import (
    Config,
    ConfirmConfig,
    GameConfig,
    LoggingConfig,
    MessagesConfig,
)

__all__ = [
    "CONFIG_ENV",
    "Config",
    "ConfirmConfig",
    "GameConfig",
    "LoggingConfig",
    "MessagesConfig",
    "config_from_dict",
    "get_config",
    "load_config",
    "set_config",
]
