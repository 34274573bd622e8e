"""Unit tests for infrastructure configuration."""

import logging

from infrastructure.config import (
    get_form_defaults,
    get_log_level,
    load_environment,
)


class TestFormDefaults:
    """Test environment-driven form defaults."""

    def test_defaults_without_environment(self, monkeypatch):
        """Test built-in defaults."""
        for name in (
            "NUTRITION_DEFAULT_CUT_DELTA",
            "NUTRITION_DEFAULT_BULK_DELTA",
            "NUTRITION_DEFAULT_RECOMP_DELTA",
            "NUTRITION_DEFAULT_BULK_PROTEIN_G_PER_LB",
        ):
            monkeypatch.delenv(name, raising=False)

        defaults = get_form_defaults()

        assert defaults.cut_delta == -500.0
        assert defaults.bulk_delta == 500.0
        assert defaults.recomp_delta == -200.0
        assert defaults.bulk_protein_g_per_lb == 1.0

    def test_environment_overrides(self, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("NUTRITION_DEFAULT_CUT_DELTA", "-750")
        monkeypatch.setenv("NUTRITION_DEFAULT_BULK_PROTEIN_G_PER_LB", "0.85")

        defaults = get_form_defaults()

        assert defaults.cut_delta == -750.0
        assert defaults.bulk_protein_g_per_lb == 0.85

    def test_invalid_value_falls_back(self, monkeypatch, caplog):
        """Test invalid numbers fall back to defaults with a warning."""
        monkeypatch.setenv("NUTRITION_DEFAULT_BULK_DELTA", "lots")

        with caplog.at_level(logging.WARNING, logger="infrastructure.config"):
            defaults = get_form_defaults()

        assert defaults.bulk_delta == 500.0
        assert "NUTRITION_DEFAULT_BULK_DELTA" in caplog.text


class TestLogLevel:
    """Test LOG_LEVEL parsing."""

    def test_known_level(self, monkeypatch):
        """Test named level."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch):
        """Test fallback to INFO."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert get_log_level() == logging.INFO


class TestLoadEnvironment:
    """Test .env loading."""

    def test_missing_file(self, tmp_path):
        """Test nothing is loaded when the file is absent."""
        assert load_environment(tmp_path / ".env") is False

    def test_loads_file_without_overriding(self, tmp_path, monkeypatch):
        """Test values from .env are loaded, exported values win."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "NUTRITION_DEFAULT_RECOMP_DELTA=-150\nLOG_LEVEL=WARNING\n"
        )
        monkeypatch.delenv("NUTRITION_DEFAULT_RECOMP_DELTA", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert load_environment(env_file) is True

        assert get_form_defaults().recomp_delta == -150.0
        assert get_log_level() == logging.ERROR
