"""Environment driven settings for the JokeAPI client."""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env as early as possible so env vars are available everywhere
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://v2.jokeapi.dev"
DEFAULT_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"

BASE_URL = os.getenv("JOKEAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def _read_timeout() -> float:
    raw = os.getenv("JOKEAPI_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid JOKEAPI_TIMEOUT=%r; using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT


def _read_log_level() -> str:
    raw = os.getenv("JOKEAPI_LOG_LEVEL")
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.upper()
    # getLevelName maps known names to their int value
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring invalid JOKEAPI_LOG_LEVEL=%r; using %s", raw, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


TIMEOUT = _read_timeout()
LOG_LEVEL = _read_log_level()
