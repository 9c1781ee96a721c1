"""Logging configuration setup.

The library itself only creates module loggers; configuring handlers is left
to the application. The CLI calls ``setup_logging()`` once at startup, which
applies a dictConfig with a single stderr handler on the root logger, either
human readable or JSON Lines.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from translate_client.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from translate_client.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    capture_warnings: bool = True,
    service_name: str = "translate-client",
    include_function_name: bool = False,
) -> None:
    """Configure the root logger with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Emit JSON Lines instead of plain text.
        capture_warnings: Forward Python warnings to logging.
        service_name: Static ``service`` field on JSON records.
        include_function_name: Include the function name in each record.

    Example:
        from translate_client.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())
    """
    if capture_warnings:
        logging.captureWarnings(True)

    formatter_name = "json" if json_logs else "text"
    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(json_logs, service_name, include_function_name),
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": formatter_name,
                "level": log_level.upper(),
            },
        },
        "root": {
            "level": log_level.upper(),
            "handlers": ["console"],
        },
        "loggers": {
            # httpx logs every request at INFO
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(logging_config)
    logger.debug(
        "Logging configured",
        extra={"log_level": log_level.upper(), "json_logs": json_logs},
    )


def _build_formatters_config(
    json_logs: bool,
    service_name: str,
    include_function_name: bool,
) -> dict[str, Any]:
    formatters: dict[str, Any] = {}

    if json_logs:
        fmt_keys = {
            "level": "levelname",
            "logger": "name",
            "message": "message",
        }
        if include_function_name:
            fmt_keys["function"] = "funcName"

        formatters["json"] = {
            "()": "translate_client.infra.logging.formatters.JSONFormatter",
            "fmt_keys": fmt_keys,
            "static": {"service": service_name},
        }
    else:
        format_parts = ["%(asctime)s", "%(levelname)s", "%(name)s"]
        if include_function_name:
            format_parts.append("%(funcName)s")
        format_parts.append("%(message)s")

        formatters["text"] = {
            "format": " - ".join(format_parts),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }

    return formatters


def reset_logging_state() -> None:
    """Allow setup_logging() to run again (tests)."""
    global _LOGGING_INITIALIZED
    _LOGGING_INITIALIZED = False


__all__ = ["configure_logging", "reset_logging_state", "setup_logging"]
