"""Tests for environment-derived settings."""

import pytest

from quickchart_mcp.config import ENDPOINTS, TOOL_KEYS, Settings, get_settings


class TestEndpointResolution:
    """Per-endpoint override, then global base, then hosted default."""

    def test_hosted_defaults(self):
        settings = Settings.from_env({})
        assert settings.endpoint_url("chart") == "https://quickchart.io/chart"
        assert settings.endpoint_url("qrcode") == "https://quickchart.io/qr"
        assert settings.endpoint_url("textchart") == "https://quickchart.io/natural"

    def test_table_uses_api_host_by_default(self):
        settings = Settings.from_env({})
        assert settings.endpoint_url("table") == "https://api.quickchart.io/v1/table"

    def test_global_base_url_applies_to_every_endpoint(self):
        settings = Settings.from_env({"QUICKCHART_BASE_URL": "http://localhost:3400/"})
        assert settings.endpoint_url("chart") == "http://localhost:3400/chart"
        assert settings.endpoint_url("table") == "http://localhost:3400/v1/table"
        assert settings.site_url == "http://localhost:3400"

    def test_host_alias(self):
        settings = Settings.from_env({"QUICKCHART_HOST": "https://charts.internal"})
        assert settings.endpoint_url("barcode") == "https://charts.internal/barcode"

    def test_per_endpoint_override_wins(self):
        settings = Settings.from_env(
            {
                "QUICKCHART_BASE_URL": "http://localhost:3400",
                "QUICKCHART_QRCODE_URL": "https://qr.example.com/render/",
            }
        )
        assert settings.endpoint_url("qrcode") == "https://qr.example.com/render"
        assert settings.endpoint_url("chart") == "http://localhost:3400/chart"

    def test_blank_values_are_ignored(self):
        settings = Settings.from_env({"QUICKCHART_BASE_URL": "  ", "QUICKCHART_CHART_URL": ""})
        assert settings.endpoint_url("chart") == "https://quickchart.io/chart"

    @pytest.mark.parametrize("endpoint", sorted(ENDPOINTS))
    def test_always_resolves_to_non_empty_url(self, endpoint):
        assert Settings.from_env({}).endpoint_url(endpoint).startswith("https://")


class TestEnablement:
    def test_everything_enabled_by_default(self):
        settings = Settings.from_env({})
        assert all(settings.is_enabled(key) for key in TOOL_KEYS)

    @pytest.mark.parametrize("raw", ["0", "false", "FALSE", "no", "Off", " off "])
    def test_false_values_disable(self, raw):
        settings = Settings.from_env({"QUICKCHART_ENABLE_WORDCLOUD": raw})
        assert not settings.is_enabled("wordcloud")
        assert settings.is_enabled("chart")

    @pytest.mark.parametrize("raw", ["1", "true", "yes", "on"])
    def test_true_values_keep_enabled(self, raw):
        assert Settings.from_env({"QUICKCHART_ENABLE_HELP": raw}).is_enabled("help")


class TestMiscSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.timeout == 30.0
        assert settings.api_key == ""
        assert settings.log_level == "WARNING"
        assert settings.output_dir is None

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "QUICKCHART_TIMEOUT_SECONDS": "5",
                "QUICKCHART_API_KEY": " secret ",
                "MCP_LOG_LEVEL": "debug",
                "QUICKCHART_DEFAULT_OUTPUT_DIR": "/srv/charts",
            }
        )
        assert settings.timeout == 5.0
        assert settings.api_key == "secret"
        assert settings.log_level == "DEBUG"
        assert settings.output_dir == "/srv/charts"

    def test_get_settings_is_memoized(self):
        assert get_settings() is get_settings()
