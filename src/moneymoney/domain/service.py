"""Round-trip plumbing shared by the domain services."""

import logging
from typing import Any, Callable, TypeVar

from moneymoney.bridge.base import Executor
from moneymoney.bridge.commands import Operation, build_command
from moneymoney.bridge.nodes import Node
from moneymoney.bridge.plist import decode_plist
from moneymoney.domain.errors import EmptyResponseError, MoneyMoneyError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Service:
    """Base class for services that talk to MoneyMoney through an executor.

    A call builds one command, runs it once, and decodes the answer. Nothing
    is retried: MoneyMoney's write commands are not idempotent, so retry
    policy is left to the caller.
    """

    def __init__(self, executor: Executor):
        """Initialize service.

        Args:
            executor: Executor used to reach MoneyMoney
        """
        self.executor = executor

    def _round_trip(self, operation: Operation, params: Any = None) -> Node:
        """Build, execute and decode one command.

        Raises:
            TransportError: If the executor fails
            DecodeError: If the output is empty or not a valid plist
        """
        command = build_command(operation, params)
        logger.debug("Submitting %s (%d characters)", operation.value, len(command))
        try:
            raw = self.executor.execute(command)
            return decode_plist(raw)
        except EmptyResponseError:
            raise
        except MoneyMoneyError as e:
            logger.warning("%s failed: %s: %s", operation.value, type(e).__name__, e)
            raise

    def _export(self, operation: Operation, params: Any, mapper: Callable[[Node], T], empty: T) -> T:
        """Run a read operation, treating an empty answer as an empty result."""
        try:
            node = self._round_trip(operation, params)
        except EmptyResponseError:
            logger.debug("%s returned no data", operation.value)
            return empty
        return mapper(node)
