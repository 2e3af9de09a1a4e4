"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .storage import (
    CONFIG_FILENAME,
    CONTACTS_FILENAME,
    STORE_ENV_VAR,
    StoreConfig,
    config_file_path,
    get_store_config,
    load_config_file,
)

__all__ = [
    "CONFIG_FILENAME",
    "CONTACTS_FILENAME",
    "STORE_ENV_VAR",
    "ConfigurationError",
    "StoreConfig",
    "config_file_path",
    "configure_logging",
    "get_store_config",
    "load_config_file",
    "optional_env_var",
]
