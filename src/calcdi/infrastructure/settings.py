from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_CONFIG_PATH_ENV = "CALCDI_CONFIG_PATH"
_PROVIDER_QUALIFIER_ENV = "CALCDI_PROVIDER_QUALIFIER"
_LOG_LEVEL_ENV = "CALCDI_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    config_path: str
    provider_qualifier: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip().upper()
    if candidate not in LOG_LEVELS:
        return default
    return candidate


@lru_cache
def get_settings() -> Settings:
    return Settings(
        config_path=_read_str_env(_CONFIG_PATH_ENV, "config.txt"),
        provider_qualifier=_read_str_env(_PROVIDER_QUALIFIER_ENV, "dao"),
        log_level=_read_log_level("WARNING"),
    )
