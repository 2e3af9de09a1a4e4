"""Contact store location.

The store directory is resolved from, in order: an explicit path (the
``--store`` option), the ``TACTFUL_STORE`` environment variable, the
``store_path`` key of ``tactful.toml`` in the user's config directory, and
finally ``~/.contact-store``.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

APP_NAME: Final[str] = "tactful"
CONFIG_FILENAME: Final[str] = "tactful.toml"
CONTACTS_FILENAME: Final[str] = "contacts.json"
DEFAULT_STORE_DIRNAME: Final[str] = ".contact-store"
STORE_ENV_VAR: Final[str] = "TACTFUL_STORE"

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoreConfig:
    store_path: Path

    def resolve_store_path(self) -> Path:
        return self.store_path.expanduser()

    def contacts_path(self) -> Path:
        return self.resolve_store_path() / CONTACTS_FILENAME


def config_dir() -> Path:
    base = os.getenv("XDG_CONFIG_HOME")
    return Path(base) if base else (Path.home() / ".config")


def config_file_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def load_config_file(path: Path | None = None) -> dict[str, object]:
    """Parse the TOML config file; a missing file yields an empty mapping."""

    config_path = path or config_file_path()
    try:
        with config_path.open("rb") as config_file:
            document = tomllib.load(config_file)
    except FileNotFoundError:
        log.debug("No config file at %s", config_path)
        return {}
    except OSError as exc:
        raise ConfigurationError(
            f"Failed to open config file {config_path}", source=config_path
        ) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(
            f"Failed to parse config file {config_path}", source=config_path
        ) from exc
    return document


def _store_path_from_config(document: dict[str, object], source: Path) -> Path | None:
    value = document.get("store_path")
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError(
            f"'store_path' in {source} must be a non-empty string", source=source
        )
    return Path(value)


def get_store_config(
    store_path: Path | str | None = None,
    *,
    config_path: Path | None = None,
) -> StoreConfig:
    if store_path is not None:
        return StoreConfig(store_path=Path(store_path))

    env_path = optional_env_var(STORE_ENV_VAR)
    if env_path is not None:
        return StoreConfig(store_path=Path(env_path))

    config_path = config_path or config_file_path()
    configured = _store_path_from_config(load_config_file(config_path), config_path)
    if configured is not None:
        return StoreConfig(store_path=configured)

    return StoreConfig(store_path=Path.home() / DEFAULT_STORE_DIRNAME)
