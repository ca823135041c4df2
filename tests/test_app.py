"""
Configuration and Composition Tests

This module contains unit tests for Settings, logging setup and the
composition root that builds ExchangeRateService.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- banguat.config (Settings for testing)
- banguat.app (build_exchange_rate_service, configure_logging)
- banguat.shared.logging_conf (setup_logging for testing)
- pytest (testing framework)
"""
import logging  # Inspect configured handlers
from datetime import date  # Clock return type
from logging.handlers import RotatingFileHandler  # Expected file handler type

import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError  # Raised on invalid settings

from banguat.adapters.providers.banguat import BanguatProvider
from banguat.app import build_exchange_rate_service, configure_logging
from banguat.application.rates_service import ExchangeRateService
from banguat.config import Settings
from banguat.shared.logging_conf import setup_logging


@pytest.fixture
def reset_logging():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


class TestSettings:
    def test_defaults(self):
        cfg = Settings(_env_file=None)
        assert cfg.endpoint == "https://www.banguat.gob.gt/variables/ws/TipoCambio.asmx"
        assert cfg.namespace == "http://www.banguat.gob.gt/variables/ws/"
        assert cfg.http_timeout_seconds == 10
        assert cfg.verify_ssl is True
        assert cfg.timezone == "America/Guatemala"
        assert cfg.log_file is None
        assert cfg.log_stdout is True

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "30")
        monkeypatch.setenv("BANGUAT_VERIFY_SSL", "false")
        monkeypatch.setenv("BANGUAT_TIMEZONE", "UTC")

        cfg = Settings(_env_file=None)

        assert cfg.http_timeout_seconds == 30
        assert cfg.verify_ssl is False
        assert cfg.timezone == "UTC"

    def test_invalid_timezone(self):
        with pytest.raises(ValidationError, match="Unknown time zone"):
            Settings(_env_file=None, BANGUAT_TIMEZONE="Mars/Olympus_Mons")

    def test_invalid_endpoint(self):
        with pytest.raises(ValidationError, match="Invalid URL"):
            Settings(_env_file=None, BANGUAT_ENDPOINT="not-a-url")

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, HTTP_TIMEOUT_SECONDS=0)


class TestBuildExchangeRateService:
    def test_wires_settings_into_transport(self):
        cfg = Settings(
            _env_file=None,
            BANGUAT_ENDPOINT="https://example.test/ws/TipoCambio.asmx",
            HTTP_TIMEOUT_SECONDS=7,
            BANGUAT_VERIFY_SSL=False,
        )

        service = build_exchange_rate_service(cfg)

        assert isinstance(service, ExchangeRateService)
        assert isinstance(service.provider, BanguatProvider)
        transport = service.provider.transport
        assert transport.endpoint == "https://example.test/ws/TipoCambio.asmx"
        assert transport.timeout == 7
        assert transport.verify_ssl is False
        assert isinstance(service.today(), date)

    def test_uses_global_settings_by_default(self):
        service = build_exchange_rate_service()
        assert "TipoCambio.asmx" in service.provider.transport.endpoint


class TestLogging:
    def test_setup_logging_stdout(self, reset_logging):
        assert setup_logging(level=logging.DEBUG) is None
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)

    def test_setup_logging_log_dir(self, tmp_path, reset_logging):
        path = setup_logging(log_dir=tmp_path / "logs", log_stdout=False)

        assert path == tmp_path / "logs" / "banguat.log"
        assert path.exists()
        assert any(isinstance(h, RotatingFileHandler) for h in logging.getLogger().handlers)

    def test_setup_logging_falls_back_to_stdout(self, reset_logging):
        setup_logging(log_stdout=False)
        assert len(logging.getLogger().handlers) == 1

    def test_configure_logging_from_settings(self, tmp_path, reset_logging):
        log_file = tmp_path / "client.log"
        cfg = Settings(_env_file=None, LOG_FILE=str(log_file), BANGUAT_LOG_STDOUT=False)

        assert configure_logging(cfg) == log_file
        logging.getLogger("banguat.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "banguat.test :: hello" in log_file.read_text(encoding="utf-8")
