"""Tests for settings loading and logger setup."""

from pathlib import Path

from loguru import logger

from catalogo.config import Settings, get_logger, settings, setup_loguru_logger


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CONSOLE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOGGING__CONSOLE_LEVEL", raising=False)

        config = Settings(_env_file=None)

        assert config.logging.console_level == "INFO"
        assert config.logging.file_level == "DEBUG"
        assert config.logging.log_file is None

    def test_nested_env_vars(self, monkeypatch):
        monkeypatch.setenv("LOGGING__CONSOLE_LEVEL", "WARNING")

        config = Settings(_env_file=None)

        assert config.logging.console_level == "WARNING"

    def test_flat_env_vars_are_mapped(self, monkeypatch):
        monkeypatch.setenv("CONSOLE_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("LOG_FILE", "logs/catalogo.log")

        config = Settings(_env_file=None)

        assert config.logging.console_level == "ERROR"
        assert config.logging.log_file == Path("logs/catalogo.log")


class TestLogging:
    """Test Loguru wiring."""

    def test_get_logger_binds_context(self):
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        try:
            get_logger("catalogo.tests").info("hello")
        finally:
            logger.remove(handler_id)

        assert records[0]["extra"]["module"] == "catalogo.tests"
        assert records[0]["extra"]["service"] == "catalogo"

    def test_file_sink_written_when_configured(self, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "catalogo.log"
        monkeypatch.setattr(settings.logging, "log_file", log_file)

        setup_loguru_logger(verbose=True)
        get_logger(__name__).info("file sink check")
        logger.remove()

        assert log_file.exists()
        assert "file sink check" in log_file.read_text()
