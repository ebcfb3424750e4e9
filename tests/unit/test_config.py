"""Tests for dungen_geometry.config module."""

import pytest

from dungen_geometry.config import ConfigError, Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that default values are set correctly."""
        for name in (
            "LOG_LEVEL",
            "LOG_FORMAT",
            "SAMPLING_SEED",
            "RENDER_DISJOINT_CHAR",
            "RENDER_INTERSECTS_CHAR",
            "RENDER_CONTAINS_CHAR",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "console"
        assert settings.SAMPLING_SEED is None
        assert settings.RENDER_DISJOINT_CHAR == " "
        assert settings.RENDER_INTERSECTS_CHAR == "#"
        assert settings.RENDER_CONTAINS_CHAR == "."

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SAMPLING_SEED", "1234")
        monkeypatch.setenv("RENDER_CONTAINS_CHAR", "o")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.SAMPLING_SEED == 1234
        assert settings.RENDER_CONTAINS_CHAR == "o"

    def test_env_vars_are_case_sensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SAMPLING_SEED", raising=False)
        monkeypatch.setenv("sampling_seed", "99")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.SAMPLING_SEED is None


class TestRequireSamplingSeed:
    """Tests for Settings.require_sampling_seed."""

    def test_returns_configured_seed(self, test_settings: Settings) -> None:
        assert test_settings.require_sampling_seed() == 1234

    def test_missing_seed_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SAMPLING_SEED", raising=False)
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        with pytest.raises(ConfigError, match="SAMPLING_SEED") as exc_info:
            settings.require_sampling_seed()

        assert exc_info.value.key_name == "Sampling seed"
        assert exc_info.value.env_var == "SAMPLING_SEED"
