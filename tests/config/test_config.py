"""Test configuration management."""

import logging
from pathlib import Path

import pytest

from drivepath.config.config import Config
from drivepath.config.paths import default_config_path


def _write_config(repo_root: Path, content: str) -> Path:
    config_file = repo_root / "config" / "drivepath.toml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    _ = config_file.write_text(content, encoding="utf-8")
    return config_file


def test_default_config(config_runtime_env: Path) -> None:
    """A missing file yields defaults and nothing is written."""
    loaded = Config.load()

    assert loaded.case_insensitive_equality is True
    assert loaded.parent_overflow == "clamp"
    assert not default_config_path().exists()
    assert not (config_runtime_env / "config").exists()


def test_load_toml(config_runtime_env: Path) -> None:
    """Values in the repository config file override the defaults."""
    _ = _write_config(
        config_runtime_env,
        'case_insensitive_equality = false\nparent_overflow = "raise"\n',
    )

    loaded = Config.load()

    assert loaded.case_insensitive_equality is False
    assert loaded.parent_overflow == "raise"
    assert Config._loaded_from == default_config_path()  # pyright: ignore[reportPrivateUsage]


def test_env_override_selects_config_file(
    config_runtime_env: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``DRIVEPATH_CONFIG`` points the loader at another file."""
    _ = config_runtime_env
    custom = tmp_path / "elsewhere.toml"
    _ = custom.write_text('parent_overflow = "raise"\n', encoding="utf-8")
    monkeypatch.setenv("DRIVEPATH_CONFIG", str(custom))

    loaded = Config.load()

    assert loaded.parent_overflow == "raise"
    assert loaded.case_insensitive_equality is True


def test_unknown_keys_are_ignored(
    config_runtime_env: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Unknown keys produce a warning instead of a failure."""
    _ = _write_config(config_runtime_env, 'colour = "blue"\nparent_overflow = "clamp"\n')

    with caplog.at_level(logging.WARNING, logger="drivepath"):
        loaded = Config.load()

    assert loaded.parent_overflow == "clamp"
    assert any("colour" in record.getMessage() for record in caplog.records)


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    """Syntax errors in the file propagate to the caller."""
    import tomllib

    _ = _write_config(config_runtime_env, "parent_overflow = \n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_singleton_behavior(config_runtime_env: Path) -> None:
    """Repeated loads return the same object."""
    _ = config_runtime_env
    config1 = Config.load()
    config2 = Config.load()

    assert config2 is config1
