"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("GRIDLAYOUT_SNAP_THRESHOLD", raising=False)
        result = get_environment(EnvVar.SNAP_THRESHOLD)
        assert result == 10

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("GRIDLAYOUT_SNAP_THRESHOLD", "25")
        result = get_environment(EnvVar.SNAP_THRESHOLD, override=5)
        assert result == 5

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("GRIDLAYOUT_CELL_WIDTH", "64")
        result = get_environment(EnvVar.CELL_WIDTH)
        assert result == 64
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("GRIDLAYOUT_SNAP_ENABLED", value)
            assert get_environment(EnvVar.SNAP_ENABLED) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("GRIDLAYOUT_SNAP_ENABLED", value)
            assert get_environment(EnvVar.SNAP_ENABLED) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unparseable booleans fall back to the default."""
        monkeypatch.setenv("GRIDLAYOUT_SNAP_ENABLED", "maybe")
        assert get_environment(EnvVar.SNAP_ENABLED) is True

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("GRIDLAYOUT_CELL_HEIGHT", "not-a-number")
        assert get_environment(EnvVar.CELL_HEIGHT) == 50

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("GRIDLAYOUT_LOG_LEVEL", "debug")
        assert get_environment(EnvVar.LOG_LEVEL) == "debug"


class TestGetLogLevel:
    """Tests for log level resolution."""

    @pytest.mark.unit
    def test_default_is_info(self, monkeypatch):
        monkeypatch.delenv("GRIDLAYOUT_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    @pytest.mark.unit
    def test_upper_cases_environment_value(self, monkeypatch):
        monkeypatch.setenv("GRIDLAYOUT_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_override(self, monkeypatch):
        monkeypatch.setenv("GRIDLAYOUT_LOG_LEVEL", "debug")
        assert get_log_level("error") == "ERROR"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.SNAP_THRESHOLD)
        assert isinstance(info, EnvConfig)
        assert info.name == "GRIDLAYOUT_SNAP_THRESHOLD"
        assert info.default == 10
        assert info.var_type is int
        assert info.category == "snap"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.LOG_LEVEL)
        assert "level" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        snap_vars = list_environment_variables("snap")
        assert EnvVar.SNAP_THRESHOLD in snap_vars
        assert EnvVar.CELL_WIDTH in snap_vars
        assert EnvVar.LOG_LEVEL not in snap_vars

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        assert list_environment_variables("docker") == []
