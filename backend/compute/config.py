"""
Runtime settings read from the environment.
A .env file in the working directory is loaded first; real environment variables win.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_DELAY_MS = 1000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    delay_ms: int = DEFAULT_DELAY_MS
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_delay(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_DELAY_MS
    try:
        delay = int(raw.strip())
    except ValueError:
        raise ValueError(f"SQUARE_DELAY_MS must be an integer, got {raw!r}") from None
    if delay < 0:
        raise ValueError(f"SQUARE_DELAY_MS must be >= 0, got {delay}")
    return delay


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL is not a logging level: {raw!r}")
    return level


def load_settings() -> Settings:
    """
    Build Settings from SQUARE_DELAY_MS and LOG_LEVEL.

    Raises:
        ValueError: if a variable is set to something unusable.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        delay_ms=_parse_delay(os.getenv("SQUARE_DELAY_MS")),
        log_level=_parse_log_level(os.getenv("LOG_LEVEL")),
    )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the process-wide Settings."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
