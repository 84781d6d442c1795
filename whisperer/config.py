"""
Environment-driven settings.

Values are read on each call so tests (and gunicorn reloads) pick up changes
to os.environ without re-importing the module.
"""

import os
from typing import List, Optional

import httpx

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_PORT = 8787
DEFAULT_ALLOWED_ORIGINS = "http://localhost:5173"
DEFAULT_MAX_IMAGE_BYTES = 2 * 1024 * 1024

SYSTEM_MESSAGE = "You write concise, PM-friendly arguments for product proposals."


def get_api_key() -> Optional[str]:
    key = (os.environ.get("OPENAI_API_KEY") or "").strip()
    return key or None


def get_model() -> str:
    return os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)


def get_temperature() -> float:
    try:
        return float(os.environ.get("OPENAI_TEMPERATURE", str(DEFAULT_TEMPERATURE)))
    except ValueError:
        return DEFAULT_TEMPERATURE


def get_timeout() -> Optional[httpx.Timeout]:
    """Explicit request timeout, or None to inherit the SDK default."""
    raw = (os.environ.get("OPENAI_TIMEOUT_SECONDS") or "").strip()
    if not raw:
        return None
    try:
        seconds = float(raw)
    except ValueError:
        return None
    if seconds <= 0:
        return None
    return httpx.Timeout(seconds)


def get_port() -> int:
    return int(os.environ.get("PORT", DEFAULT_PORT))


def get_allowed_origins() -> List[str]:
    raw = os.environ.get("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_max_image_bytes() -> int:
    return int(os.environ.get("MAX_IMAGE_BYTES", DEFAULT_MAX_IMAGE_BYTES))
