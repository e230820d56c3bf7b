from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable

from calcdi.infrastructure.settings import get_settings

_CONTEXT_KEYS = ("step", "component", "role", "qualifier", "config_path")

_configured = False


class ContextualFormatter(logging.Formatter):
    """Appends `key=value` for each known `extra` field set on the record."""

    def __init__(self, fmt: str | None = None, context_keys: Iterable[str] | None = None) -> None:
        super().__init__(fmt=fmt)
        self._context_keys = tuple(context_keys or _CONTEXT_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in self._context_keys
            if getattr(record, key, None) is not None
        )
        return f"{message} | {context}" if context else message


def configure_logging(level: str | None = None) -> None:
    """Send logs to stderr so stdout only carries results.

    Without an explicit level the first call wins; an explicit level
    always reconfigures.
    """
    global _configured
    if _configured and level is None:
        return

    log_level = level or get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "calcdi.infrastructure.logging_config.ContextualFormatter",
                    "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["stderr"], "level": log_level},
        }
    )

    _configured = True
