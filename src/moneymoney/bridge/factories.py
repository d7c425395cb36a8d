"""Executor factory functions."""

from typing import Optional

from moneymoney.bridge.osascript import OsascriptExecutor
from moneymoney.config import ClientConfig


def create_osascript_executor(config: Optional[ClientConfig] = None) -> OsascriptExecutor:
    """Create the default osascript executor.

    Args:
        config: Client configuration. If None, it is read from the
            MONEYMONEY_* environment variables.

    Returns:
        OsascriptExecutor configured from ``config``
    """
    if config is None:
        config = ClientConfig.from_env()

    return OsascriptExecutor(
        osascript_path=config.osascript_path,
        timeout=config.timeout_seconds,
        check_running=config.check_running,
    )
