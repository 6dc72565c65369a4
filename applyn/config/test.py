"""Tests for environment-backed settings."""

import pytest

from .lib import (
    EditorLimits,
    EnvConfig,
    EnvVar,
    get_default_currency,
    get_editor_limits,
    get_environment,
    get_environment_info,
    get_image_proxy_url,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Resolution order and type conversion."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """An unset variable resolves to its declared default."""
        monkeypatch.delenv("APPLYN_MAX_NODES", raising=False)
        assert get_environment(EnvVar.APPLYN_MAX_NODES) == 5000

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """An explicit override beats the environment."""
        monkeypatch.setenv("APPLYN_MAX_NODES", "9999")
        assert get_environment(EnvVar.APPLYN_MAX_NODES, override=10) == 10

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """A set variable is parsed to int."""
        monkeypatch.setenv("APPLYN_MAX_DEPTH", "12")
        result = get_environment(EnvVar.APPLYN_MAX_DEPTH)
        assert result == 12
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Unparseable integers fall back to the default."""
        monkeypatch.setenv("APPLYN_MAX_SCREENS", "lots")
        assert get_environment(EnvVar.APPLYN_MAX_SCREENS) == 50

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["0", "-5", "", "   "])
    def test_limits_below_minimum_use_default(self, monkeypatch, raw):
        """Zero, negative and blank limits fall back to the default."""
        monkeypatch.setenv("APPLYN_MAX_DEPTH", raw)
        assert get_environment(EnvVar.APPLYN_MAX_DEPTH) == 30

    @pytest.mark.unit
    def test_int_whitespace_is_trimmed(self, monkeypatch):
        monkeypatch.setenv("APPLYN_MAX_SCREENS", " 8 ")
        assert get_environment(EnvVar.APPLYN_MAX_SCREENS) == 8

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String settings are returned unchanged."""
        monkeypatch.setenv("APPLYN_IMAGE_PROXY_URL", "https://img.example.com/p")
        assert get_environment(EnvVar.APPLYN_IMAGE_PROXY_URL) == "https://img.example.com/p"


class TestGetEnvironmentInfo:
    """Setting declarations."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Declarations carry limits metadata."""
        info = get_environment_info(EnvVar.APPLYN_MAX_DEPTH)
        assert isinstance(info, EnvConfig)
        assert info.name == "APPLYN_MAX_DEPTH"
        assert info.default == 30
        assert info.var_type is int
        assert info.category == "limits"
        assert info.min_value == 1


class TestListEnvironmentVariables:
    """Category listing."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """No category lists every setting."""
        assert len(list_environment_variables()) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """A category keeps only its own settings."""
        limits = list_environment_variables("limits")
        assert EnvVar.APPLYN_MAX_NODES in limits
        assert EnvVar.APPLYN_LOG_LEVEL not in limits


class TestConvenienceFunctions:
    """Tests for the typed convenience accessors."""

    @pytest.mark.unit
    def test_editor_limits_defaults(self, monkeypatch):
        """Defaults match the documented payload caps."""
        for name in ("APPLYN_MAX_SCREENS", "APPLYN_MAX_NODES", "APPLYN_MAX_DEPTH"):
            monkeypatch.delenv(name, raising=False)
        assert get_editor_limits() == EditorLimits(50, 5000, 30)

    @pytest.mark.unit
    def test_editor_limits_arguments_win(self, monkeypatch):
        """Explicit arguments override the environment per field."""
        monkeypatch.setenv("APPLYN_MAX_NODES", "100")
        limits = get_editor_limits(max_depth=3)
        assert limits.max_nodes == 100
        assert limits.max_depth == 3

    @pytest.mark.unit
    def test_image_proxy_strips_trailing_slash(self, monkeypatch):
        """Trailing slashes are removed from the proxy URL."""
        monkeypatch.setenv("APPLYN_IMAGE_PROXY_URL", "https://img.example.com/p/")
        assert get_image_proxy_url() == "https://img.example.com/p"

    @pytest.mark.unit
    def test_default_currency_is_upper_cased(self, monkeypatch):
        """Currency codes are normalized to upper case."""
        monkeypatch.setenv("APPLYN_DEFAULT_CURRENCY", "eur")
        assert get_default_currency() == "EUR"

    @pytest.mark.unit
    def test_log_level(self, monkeypatch):
        """Log level is returned upper-cased."""
        monkeypatch.setenv("APPLYN_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
