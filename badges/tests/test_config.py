"""Tests for BadgeSettings."""

import logging

import pytest

from badges.config import BadgeSettings
from badges.constants import Category
from badges.errors import InvalidCategoryError
from badges.log import configure_logging


class TestBadgeSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = BadgeSettings()
        assert config.extra_statuses == {}
        assert config.log_level == "INFO"
        assert config.server_port == 7860
        assert config.share is False

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("STATUS_BADGE_EXTRA_STATUSES", '{"churned": "danger", "Trialing": "info"}')
        monkeypatch.setenv("STATUS_BADGE_SERVER_PORT", "8080")
        monkeypatch.setenv("STATUS_BADGE_SHARE", "true")
        monkeypatch.setenv("STATUS_BADGE_LOG_LEVEL", "debug")

        config = BadgeSettings()
        assert config.server_port == 8080
        assert config.share is True
        assert config.log_level == "debug"
        assert config.get_overrides() == {
            "churned": Category.DANGER,
            "Trialing": Category.INFO,
        }

    def test_from_env_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("STATUS_BADGE_SERVER_NAME=127.0.0.1\n")
        assert BadgeSettings().server_name == "127.0.0.1"

    def test_invalid_override_category(self):
        config = BadgeSettings(extra_statuses={"churned": "crimson"})
        with pytest.raises(InvalidCategoryError):
            config.get_overrides()


class TestConfigureLogging:
    def test_noop_when_handlers_exist(self, monkeypatch):
        root = logging.getLogger()
        sentinel = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [sentinel])
        configure_logging("DEBUG")
        assert root.handlers == [sentinel]

    def test_configures_console_handler(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", logging.WARNING)
        configure_logging("debug")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
