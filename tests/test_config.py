"""Tests for headless_captions/config.py."""

import os
from unittest.mock import patch

import pytest

from headless_captions.config import Config


class TestConfigParsing:
    """Test the Config class helper methods and init logic."""

    def _make_config(self, env_overrides=None):
        """Create a Config instance with mocked environment."""
        with patch.dict(os.environ, env_overrides or {}, clear=False):
            return Config()

    def test_default_values(self):
        with patch.dict(os.environ, {}, clear=True):
            c = Config()
        assert c.browser_executable_path is None
        assert c.headless is True
        assert (c.viewport_width, c.viewport_height) == (1920, 1080)
        assert c.navigation_timeout_ms == 60000
        assert c.content_timeout_ms == 30000
        assert c.navigation_wait_until == "load"
        assert c.navigation_attempts == 2
        assert c.load_poll_interval_ms == 1000
        assert c.load_max_wait_ms == 5000
        assert c.comments_load_max_wait_ms == 3000
        assert c.log_level == "INFO"

    def test_env_overrides(self):
        c = self._make_config(
            {"HEADLESS": "false", "VIEWPORT_WIDTH": "1280", "LOG_LEVEL": "debug"}
        )
        assert c.headless is False
        assert c.viewport_width == 1280
        assert c.log_level == "DEBUG"

    def test_empty_executable_path_is_none(self):
        c = self._make_config({"BROWSER_EXECUTABLE_PATH": ""})
        assert c.browser_executable_path is None

    def test_parse_bool_variants(self):
        c = self._make_config()
        assert c._parse_bool("true") is True
        assert c._parse_bool("1") is True
        assert c._parse_bool("yes") is True
        assert c._parse_bool("on") is True
        assert c._parse_bool("false") is False
        assert c._parse_bool("0") is False
        assert c._parse_bool("no") is False


class TestConfigValidate:
    def _valid(self):
        with patch.dict(os.environ, {}, clear=True):
            return Config()

    def test_defaults_are_valid(self):
        self._valid().validate()

    def test_unknown_wait_until(self):
        c = self._valid()
        c.navigation_wait_until = "networkidle2"
        with pytest.raises(ValueError, match="NAVIGATION_WAIT_UNTIL"):
            c.validate()

    def test_attempts_must_be_positive(self):
        c = self._valid()
        c.navigation_attempts = 0
        with pytest.raises(ValueError, match="NAVIGATION_ATTEMPTS"):
            c.validate()

    def test_negative_timeout(self):
        c = self._valid()
        c.selector_timeout_ms = -1
        with pytest.raises(ValueError, match="SELECTOR_TIMEOUT_MS"):
            c.validate()

    def test_viewport_must_be_positive(self):
        c = self._valid()
        c.viewport_height = 0
        with pytest.raises(ValueError, match="VIEWPORT"):
            c.validate()

    def test_missing_executable(self, tmp_path):
        c = self._valid()
        c.browser_executable_path = str(tmp_path / "no-such-chrome")
        with pytest.raises(ValueError, match="BROWSER_EXECUTABLE_PATH"):
            c.validate()

    def test_existing_executable(self, tmp_path):
        chrome = tmp_path / "chrome"
        chrome.write_text("")
        c = self._valid()
        c.browser_executable_path = str(chrome)
        c.validate()
