"""
Runtime settings for wayback-spam-check.
Loads from .env file by default, falling back to config/settings.py constants.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from config.settings import (
    DEFAULT_MAX_SNAPSHOTS,
    DOMAIN_DELAY,
    REQUEST_TIMEOUT,
    SNAPSHOT_DELAY,
    USER_AGENT,
)

# Load .env file from project root
load_dotenv()

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RuntimeSettings:
    request_timeout: float = REQUEST_TIMEOUT
    snapshot_delay: float = SNAPSHOT_DELAY
    domain_delay: float = DOMAIN_DELAY
    max_snapshots: int = DEFAULT_MAX_SNAPSHOTS
    user_agent: str = USER_AGENT


def _non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _env(name: str, cast: Callable[[str], T], default: T, valid: Optional[Callable[[T], bool]] = None) -> T:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %r", name, raw, default)
        return default
    if valid is not None and not valid(value):
        logger.warning("Ignoring out of range %s=%r, using %r", name, raw, default)
        return default
    return value


def get_runtime_settings() -> RuntimeSettings:
    """
    Get runtime settings. Priority:
    1. Environment variables / .env file
    2. config/settings.py defaults
    """
    return RuntimeSettings(
        request_timeout=_env("WAYBACK_REQUEST_TIMEOUT", float, REQUEST_TIMEOUT, _positive),
        snapshot_delay=_env("WAYBACK_SNAPSHOT_DELAY", float, SNAPSHOT_DELAY, _non_negative),
        domain_delay=_env("WAYBACK_DOMAIN_DELAY", float, DOMAIN_DELAY, _non_negative),
        max_snapshots=_env("WAYBACK_MAX_SNAPSHOTS", int, DEFAULT_MAX_SNAPSHOTS, lambda n: n >= 1),
        user_agent=os.getenv("WAYBACK_USER_AGENT", "").strip() or USER_AGENT,
    )
