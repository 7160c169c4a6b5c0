"""Configuration loader."""

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class DebugConfig:
    """Debug configuration."""

    enabled: bool = False

    @classmethod
    def from_env(cls) -> "DebugConfig":
        """Load debug config from environment variable."""
        debug_env = os.environ.get("GITROOT_DEBUG", "").lower()
        enabled = debug_env in ("1", "true", "yes")
        return cls(enabled=enabled)


def _parse_timeout(value: str) -> Optional[float]:
    """
    Parse GITROOT_TIMEOUT value.

    An invalid value is logged and ignored so it never breaks a lookup.

    Args:
        value: Raw environment value (seconds)

    Returns:
        Timeout in seconds, or None for an unset, empty or invalid value
    """
    value = value.strip()
    if not value:
        return None

    try:
        timeout = float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid GITROOT_TIMEOUT: {value!r}")
        return None

    if not math.isfinite(timeout) or timeout <= 0:
        logger.warning(f"GITROOT_TIMEOUT must be a positive number, ignoring: {value!r}")
        return None

    return timeout


@dataclass
class Config:
    """gitroot configuration."""

    timeout: Optional[float] = None
    debug: DebugConfig = field(default_factory=DebugConfig.from_env)


def get_config() -> Config:
    """
    Build configuration from the environment.

    Environment variables:
        GITROOT_DEBUG: "1", "true" or "yes" enables debug logging
        GITROOT_TIMEOUT: seconds to wait for git (unset waits forever)

    Returns:
        Config object
    """
    timeout = _parse_timeout(os.environ.get("GITROOT_TIMEOUT", ""))
    config = Config(timeout=timeout)
    logger.debug(f"Config: timeout={config.timeout}, debug={config.debug.enabled}")
    return config
