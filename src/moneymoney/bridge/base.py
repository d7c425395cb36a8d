"""Abstract executor interface."""

from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Optional, Union


class Executor(ABC):
    """Delivers one AppleScript command to MoneyMoney and returns its output."""

    @abstractmethod
    def execute(self, command: str) -> Optional[str]:
        """Run a command synchronously.

        Args:
            command: AppleScript source

        Returns:
            The script's raw output, or None if it produced none

        Raises:
            TransportError: If the command could not be delivered or run
        """
        pass


class RecordingExecutor(Executor):
    """Executor double that records commands and replays canned results.

    Each queued result is returned (or raised, if it is an exception) by one
    call to ``execute``, in order.
    """

    def __init__(self, results: Iterable[Union[str, None, Exception]] = ()):
        self.commands: list[str] = []
        self._results = deque(results)

    def queue(self, result: Union[str, None, Exception]) -> None:
        """Append a result for a later call."""
        self._results.append(result)

    def execute(self, command: str) -> Optional[str]:
        self.commands.append(command)
        if not self._results:
            raise AssertionError(f"Unexpected command: {command}")
        result = self._results.popleft()
        if isinstance(result, Exception):
            raise result
        return result
