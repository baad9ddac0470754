"""Runtime settings read from the environment; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load .env only when present (e.g. local dev); does not override existing env
load_dotenv()

DEFAULT_MAX_UNITS = 5000


def get_log_level() -> str:
    return os.getenv("BOX_PACKER_LOG_LEVEL", "INFO").upper()


def get_cors_origins() -> list[str]:
    raw = os.getenv("BOX_PACKER_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_proxy_secret() -> Optional[str]:
    """Shared secret expected in X-RapidAPI-Proxy-Secret. None disables the check."""
    return os.getenv("RAPIDAPI_PROXY_SECRET") or None


def get_max_units() -> int:
    raw = os.getenv("BOX_PACKER_MAX_UNITS")
    if not raw:
        return DEFAULT_MAX_UNITS
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"BOX_PACKER_MAX_UNITS must be an integer, got '{raw}'")
    if value <= 0:
        raise ValueError(f"BOX_PACKER_MAX_UNITS must be positive, got {value}")
    return value


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
