"""Unit tests for settings module."""

import os

import pytest

from embedui.settings import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all EMBEDUI_ env vars for clean tests."""
    for key in list(os.environ.keys()):
        if key.startswith("EMBEDUI_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestStringSettings:
    """Test string environment variable parsing."""

    def test_route_prefix_default(self, clean_env) -> None:
        assert Settings.route_prefix() == "custom/ui"

    def test_route_prefix_custom(self, clean_env) -> None:
        clean_env.setenv("EMBEDUI_ROUTE_PREFIX", "  admin/ui  ")
        assert Settings.route_prefix() == "admin/ui"

    def test_blank_value_uses_default(self, clean_env) -> None:
        clean_env.setenv("EMBEDUI_ENTRY_DOCUMENT", "   ")
        assert Settings.entry_document() == "index.html"

    def test_bundle_location_defaults(self, clean_env) -> None:
        assert Settings.resource_package() == "embedui"
        assert Settings.resource_root() == "static_ui"

    def test_on_missing_lowercased(self, clean_env) -> None:
        clean_env.setenv("EMBEDUI_ON_MISSING", "Delegate")
        assert Settings.on_missing() == "delegate"

    def test_static_dir_default_empty(self, clean_env) -> None:
        assert Settings.static_dir() == ""

    def test_static_dir_absolute(self, clean_env) -> None:
        clean_env.setenv("EMBEDUI_STATIC_DIR", "public")
        assert os.path.isabs(Settings.static_dir())
        assert Settings.static_dir().endswith("public")

    def test_log_settings(self, clean_env) -> None:
        assert Settings.log_level() == "INFO"
        assert Settings.log_format() == "console"
        clean_env.setenv("EMBEDUI_LOG_LEVEL", "debug")
        clean_env.setenv("EMBEDUI_LOG_FORMAT", "JSON")
        assert Settings.log_level() == "DEBUG"
        assert Settings.log_format() == "json"


class TestIntSettings:
    """Test integer environment variable parsing."""

    def test_port_default(self, clean_env) -> None:
        assert Settings.port() == 8790

    def test_port_custom(self, clean_env) -> None:
        clean_env.setenv("EMBEDUI_PORT", "9000")
        assert Settings.port() == 9000

    def test_port_invalid_returns_default(self, clean_env) -> None:
        clean_env.setenv("EMBEDUI_PORT", "not_a_number")
        assert Settings.port() == 8790


class TestBoolSettings:
    """Test boolean environment variable parsing."""

    def test_reload_default_false(self, clean_env) -> None:
        assert Settings.reload() is False

    def test_reload_true_values(self, clean_env) -> None:
        for value in ["1", "true", "TRUE", "yes", "YES"]:
            clean_env.setenv("EMBEDUI_RELOAD", value)
            assert Settings.reload() is True

    def test_reload_false_values(self, clean_env) -> None:
        for value in ["0", "false", "no", "random"]:
            clean_env.setenv("EMBEDUI_RELOAD", value)
            assert Settings.reload() is False
