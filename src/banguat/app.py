"""
Application Entry Point - Client Composition

This module serves as the composition root for the Banguat client.
It wires settings, transport, provider and clock into an ExchangeRateService.

Files that USE this module:
- banguat (package exports build_exchange_rate_service)
- tests.test_app (unit tests)

Files that this module USES:
- banguat.config (settings for configuration management)
- banguat.shared.logging_conf (setup_logging for logging configuration)
- banguat.shared.dates (local_clock for the Guatemala-local "today")
- banguat.adapters.providers (SoapTransport, BanguatProvider)
- banguat.application.rates_service (ExchangeRateService)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from banguat.config import Settings, settings as default_settings
from banguat.shared.logging_conf import setup_logging
from banguat.shared.dates import local_clock
from banguat.adapters.providers.soap import SoapTransport
from banguat.adapters.providers.banguat import BanguatProvider
from banguat.application.rates_service import ExchangeRateService

log = logging.getLogger(__name__)


def configure_logging(cfg: Optional[Settings] = None, level=logging.INFO) -> Optional[Path]:
    """Configure process logging from the LOG_* settings."""
    cfg = cfg or default_settings
    return setup_logging(
        level=level,
        log_file=cfg.log_file,
        log_dir=cfg.log_dir,
        log_stdout=cfg.log_stdout,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
    )


def build_exchange_rate_service(cfg: Optional[Settings] = None) -> ExchangeRateService:
    """
    Build a ready-to-use ExchangeRateService.

    Args:
        cfg: Settings to use (defaults to the global settings instance)

    Returns:
        ExchangeRateService talking to the configured Banguat endpoint
    """
    cfg = cfg or default_settings
    transport = SoapTransport(
        endpoint=cfg.endpoint,
        namespace=cfg.namespace,
        timeout=cfg.http_timeout_seconds,
        verify_ssl=cfg.verify_ssl,
    )
    log.debug("Banguat client configured: endpoint=%s, tz=%s", cfg.endpoint, cfg.timezone)
    return ExchangeRateService(BanguatProvider(transport), clock=local_clock(cfg.timezone))
