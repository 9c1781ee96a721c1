"""Logging setup for translate_client entrypoints."""

from translate_client.infra.logging.config import (
    configure_logging,
    reset_logging_state,
    setup_logging,
)
from translate_client.infra.logging.formatters import JSONFormatter

__all__ = ["JSONFormatter", "configure_logging", "reset_logging_state", "setup_logging"]
