# tests/test_config_logging.py

from __future__ import annotations

import logging

import pytest

from family_tree import config
from family_tree.logging import get_logger, list_active_loggers


@pytest.fixture
def fresh_config():
    config.reset_config()
    yield
    config.reset_config()


def test_default_config_values(fresh_config) -> None:
    cfg = config.get_config()
    assert cfg.no_grandparent_label == "No Grandparent"
    assert cfg.logging.get("level") == "INFO"
    assert cfg.debug is False


def test_config_is_cached(fresh_config) -> None:
    assert config.get_config() is config.get_config()


def test_config_env_override(fresh_config, tmp_path, monkeypatch) -> None:
    path = tmp_path / "alt.yml"
    path.write_text("render:\n  no_grandparent_label: none\n", encoding="utf-8")
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))

    assert config.get_config().no_grandparent_label == "none"


def test_missing_config_raises(fresh_config, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))
    with pytest.raises(FileNotFoundError):
        config.get_config()


def test_get_logger_nests_under_base() -> None:
    log = get_logger("loader")
    assert log.name == "family_tree.loader"
    assert log.propagate is True
    assert "family_tree.loader" in list_active_loggers()

    base = logging.getLogger("family_tree")
    assert base.handlers
    assert base.propagate is False


def test_get_logger_does_not_duplicate_module_handlers() -> None:
    first = get_logger("family_tree.sample")
    count = len(first.handlers)
    second = get_logger("family_tree.sample")
    assert second is first
    assert len(second.handlers) == count


def test_missing_project_config_uses_defaults(fresh_config, tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "absent.yml")

    cfg = config.get_config()
    assert cfg.no_grandparent_label == "No Grandparent"
    assert cfg.logging["console_level"] == "WARNING"
    assert cfg.paths["logs_dir"] == "logs"
    assert cfg.debug is False


def test_defaults_are_not_shared_between_loads(fresh_config, tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "absent.yml")

    config.get_config().render["no_grandparent_label"] = "changed"
    config.reset_config()
    assert config.get_config().no_grandparent_label == "No Grandparent"


def test_logging_package_exports() -> None:
    import family_tree.logging as ft_logging

    assert ft_logging.__all__ == ["get_logger", "list_active_loggers"]
