"""Tests for Settings configuration model."""

import pytest
from pydantic import ValidationError

from groupbot.config import Settings


class TestDefaults:
    def test_default_platform(self):
        assert Settings().robot_platform == "default"

    def test_default_token_empty(self):
        assert Settings().robot_token == ""

    def test_default_timeout(self):
        assert Settings().robot_timeout == 10.0

    def test_default_log_level(self):
        assert Settings().log_level == "INFO"


class TestOverrides:
    def test_explicit_values(self):
        s = Settings(robot_platform="dingtalk", robot_token="abc", robot_timeout=2.5)
        assert (s.robot_platform, s.robot_token, s.robot_timeout) == ("dingtalk", "abc", 2.5)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(robot_timeout=0)

    def test_env_ignored_under_pytest(self, monkeypatch):
        monkeypatch.setenv("ROBOT_PLATFORM", "wechatwork")
        assert Settings().robot_platform == "default"
