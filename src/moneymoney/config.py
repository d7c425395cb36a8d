"""Configuration management for the MoneyMoney client."""

import os
from dataclasses import dataclass

DEFAULT_OSASCRIPT_PATH = "/usr/bin/osascript"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """Settings for the default executor and the client facade.

    ``experimental`` unlocks the SEPA transfer and direct debit operations.
    ``timeout_seconds`` bounds a single osascript call; None waits forever.
    """

    osascript_path: str = DEFAULT_OSASCRIPT_PATH
    timeout_seconds: float | None = 60.0
    check_running: bool = True
    experimental: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables."""
        timeout = os.getenv("MONEYMONEY_TIMEOUT")

        return cls(
            osascript_path=os.getenv("MONEYMONEY_OSASCRIPT", DEFAULT_OSASCRIPT_PATH),
            timeout_seconds=float(timeout) if timeout else 60.0,
            check_running=_env_flag("MONEYMONEY_CHECK_RUNNING", True),
            experimental=_env_flag("MONEYMONEY_EXPERIMENTAL", False),
            log_level=os.getenv("MONEYMONEY_LOG_LEVEL", "WARNING"),
        )
