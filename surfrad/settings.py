from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_LOG_LEVEL_ENV = "LOG_LEVEL"
_DEBUG_ENV = "SURFRAD_DEBUG"
_MAX_LINE_TOKENS_ENV = "SURFRAD_MAX_LINE_TOKENS"
_ENCODING_ENV = "SURFRAD_ENCODING"

# A complete record is 48 tokens including the trailing pressure QC flag.
MIN_LINE_TOKEN_LIMIT = 48
DEFAULT_MAX_LINE_TOKENS = 64

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    debug: bool
    max_line_tokens: int
    encoding: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip().lower()
    if not candidate:
        return default
    return candidate in _TRUTHY


def _read_max_line_tokens(default: int) -> int:
    value = os.getenv(_MAX_LINE_TOKENS_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= MIN_LINE_TOKEN_LIMIT else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level("INFO"),
        debug=_read_flag(_DEBUG_ENV, False),
        max_line_tokens=_read_max_line_tokens(DEFAULT_MAX_LINE_TOKENS),
        encoding=_read_str_env(_ENCODING_ENV, "utf-8"),
    )
