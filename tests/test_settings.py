"""Tests for environment-driven settings."""

from __future__ import annotations

from release_radar.utils.settings import RadarSettings


class TestRadarSettings:
    def test_defaults(self):
        settings = RadarSettings.from_env({})
        assert settings.github_token is None
        assert settings.window_days == 7
        assert settings.request_delay == 0.5
        assert settings.http_timeout == 30.0
        assert settings.api_base == "https://api.github.com"

    def test_token_is_trimmed(self):
        assert RadarSettings.from_env({"GITHUB_TOKEN": "  ghp_abc \n"}).github_token == "ghp_abc"

    def test_blank_token_is_absent(self):
        assert RadarSettings.from_env({"GITHUB_TOKEN": "   "}).github_token is None

    def test_numeric_overrides(self):
        settings = RadarSettings.from_env(
            {"RADAR_WINDOW_DAYS": "14", "RADAR_REQUEST_DELAY": "0", "RADAR_HTTP_TIMEOUT": "5.5"}
        )
        assert settings.window_days == 14
        assert settings.request_delay == 0.0
        assert settings.http_timeout == 5.5

    def test_invalid_numbers_fall_back(self):
        settings = RadarSettings.from_env({"RADAR_WINDOW_DAYS": "a week", "RADAR_REQUEST_DELAY": "soon"})
        assert settings.window_days == 7
        assert settings.request_delay == 0.5
