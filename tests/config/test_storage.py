from __future__ import annotations

from pathlib import Path

import pytest

from tactful.config import (
    STORE_ENV_VAR,
    ConfigurationError,
    get_store_config,
    load_config_file,
    optional_env_var,
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv(STORE_ENV_VAR, raising=False)
    return config_home


def _write_config(config_home: Path, text: str) -> None:
    (config_home / "tactful.toml").write_text(text, encoding="utf-8")


def test_explicit_path_wins(monkeypatch: pytest.MonkeyPatch, isolated_config: Path) -> None:
    monkeypatch.setenv(STORE_ENV_VAR, "/from/env")
    _write_config(isolated_config, 'store_path = "/from/config"\n')

    config = get_store_config("/explicit")

    assert config.store_path == Path("/explicit")


def test_environment_beats_config_file(
    monkeypatch: pytest.MonkeyPatch, isolated_config: Path
) -> None:
    monkeypatch.setenv(STORE_ENV_VAR, "/from/env")
    _write_config(isolated_config, 'store_path = "/from/config"\n')

    assert get_store_config().store_path == Path("/from/env")


def test_config_file_is_read_from_xdg_config_home(isolated_config: Path) -> None:
    _write_config(isolated_config, 'store_path = "~/contacts"\n')

    config = get_store_config()

    assert config.store_path == Path("~/contacts")
    assert config.resolve_store_path() == Path.home() / "contacts"
    assert config.contacts_path() == Path.home() / "contacts" / "contacts.json"


def test_default_store_is_in_home(tmp_path: Path) -> None:
    assert get_store_config().store_path == tmp_path / "home" / ".contact-store"


def test_blank_environment_value_is_ignored(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv(STORE_ENV_VAR, "   ")

    assert optional_env_var(STORE_ENV_VAR) is None
    assert get_store_config().store_path == tmp_path / "home" / ".contact-store"


def test_missing_config_file_yields_empty_mapping(tmp_path: Path) -> None:
    assert load_config_file(tmp_path / "absent.toml") == {}


def test_malformed_config_file_is_reported(isolated_config: Path) -> None:
    _write_config(isolated_config, "store_path = \n")

    with pytest.raises(ConfigurationError, match="Failed to parse") as excinfo:
        get_store_config()

    assert excinfo.value.source == isolated_config / "tactful.toml"


@pytest.mark.parametrize("value", ["42", '""', "[\"a\"]"])
def test_invalid_store_path_value_is_rejected(isolated_config: Path, value: str) -> None:
    _write_config(isolated_config, f"store_path = {value}\n")

    with pytest.raises(ConfigurationError, match="store_path"):
        get_store_config()


def test_explicit_config_path(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.toml"
    config_path.write_text('store_path = "/custom"\n', encoding="utf-8")

    assert get_store_config(config_path=config_path).store_path == Path("/custom")
