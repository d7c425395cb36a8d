"""osascript implementation of the Executor interface."""

import logging
import subprocess
from typing import Optional

from moneymoney.bridge.base import Executor
from moneymoney.bridge.commands import APPLICATION_NAME, quote
from moneymoney.config import DEFAULT_OSASCRIPT_PATH
from moneymoney.domain.errors import ApplicationNotRunningError, TransportError

logger = logging.getLogger(__name__)

# AppleEvent error -600: the target process is not running
_NOT_RUNNING_MARKERS = ("(-600)", "isn't running", "is not running")


class OsascriptExecutor(Executor):
    """Runs commands through macOS ``osascript``."""

    def __init__(
        self,
        osascript_path: str = DEFAULT_OSASCRIPT_PATH,
        timeout: Optional[float] = 60.0,
        check_running: bool = True,
    ):
        """Initialize executor.

        Args:
            osascript_path: Path to the osascript binary
            timeout: Seconds to wait for one command, or None to wait forever
            check_running: Check that MoneyMoney is running before each command
        """
        self.osascript_path = osascript_path
        self.timeout = timeout
        self.check_running = check_running

    def execute(self, command: str) -> Optional[str]:
        if self.check_running and not self.is_application_running():
            raise ApplicationNotRunningError(f"{APPLICATION_NAME} is not running")

        output = self._run(command)
        return output or None

    def is_application_running(self) -> bool:
        """Check whether MoneyMoney is running, without launching it."""
        output = self._run(f"application {quote(APPLICATION_NAME)} is running")
        return output == "true"

    def _run(self, script: str) -> str:
        args = [self.osascript_path]
        for line in script.split("\n"):
            args.extend(["-e", line])

        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning("osascript timed out after %s seconds", self.timeout)
            raise TransportError(f"osascript timed out after {e.timeout} seconds") from e
        except OSError as e:
            logger.warning("Could not start osascript: %s", e)
            raise TransportError(f"Could not start {self.osascript_path}: {e}") from e

        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            logger.warning("osascript exited with %d: %s", completed.returncode, stderr)
            error_class = TransportError
            if any(marker in stderr for marker in _NOT_RUNNING_MARKERS):
                error_class = ApplicationNotRunningError
            raise error_class(
                stderr or f"osascript exited with status {completed.returncode}",
                returncode=completed.returncode,
                stderr=completed.stderr,
            )

        return completed.stdout.rstrip("\n")
