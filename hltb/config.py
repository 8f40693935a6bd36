"""
Runtime settings, read from the environment (and a local .env file if present).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://howlongtobeat.com/"
# Desktop UA keeps the site from serving its mobile layout.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT_MS = 30000
# Parsers only read markup; these requests are aborted when blocking is on.
DEFAULT_BLOCKED_TYPES: Tuple[str, ...] = ("image", "media", "font")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


def _env_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %d", name, value, default)
        return default
    if parsed <= 0:
        logger.warning("Ignoring non-positive %s=%r, using %d", name, value, default)
        return default
    return parsed


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    parsed = [item.strip().lower() for item in value.replace("|", ",").split(",") if item.strip()]
    return tuple(parsed)


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    sandboxed: bool = True
    block_resources: bool = True
    blocked_types: Tuple[str, ...] = DEFAULT_BLOCKED_TYPES


def load_settings() -> Settings:
    load_dotenv()

    base_url = os.getenv("HLTB_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
    if not base_url.endswith("/"):
        base_url += "/"

    return Settings(
        base_url=base_url,
        user_agent=os.getenv("HLTB_USER_AGENT", DEFAULT_USER_AGENT).strip() or DEFAULT_USER_AGENT,
        timeout_ms=_env_positive_int("HLTB_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        sandboxed=_env_flag("HLTB_SANDBOXED", True),
        block_resources=_env_flag("HLTB_BLOCK_RESOURCES", True),
        blocked_types=_env_list("HLTB_BLOCKED_TYPES", DEFAULT_BLOCKED_TYPES),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_BASE_URL", "DEFAULT_BLOCKED_TYPES", "DEFAULT_USER_AGENT"]
