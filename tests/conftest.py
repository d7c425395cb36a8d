"""Shared pytest fixtures for moneymoney tests."""

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from moneymoney.bridge.base import RecordingExecutor
from moneymoney.bridge.commands import ACKNOWLEDGMENT_PLIST
from moneymoney.bridge.mappers import accounts_to_domain
from moneymoney.bridge.plist import PLIST_HEADER, decode_plist
from moneymoney.client import MoneyMoney
from moneymoney.config import ClientConfig
from moneymoney.domain.currency import Currency
from moneymoney.domain.entities import Transaction


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers the CLI attached to the package logger."""
    yield
    logger = logging.getLogger("moneymoney")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir):
    """Return a function that reads a fixture plist by name."""

    def _load(name: str) -> str:
        return (fixtures_dir / f"{name}.plist").read_text(encoding="utf-8")

    return _load


@pytest.fixture
def plist():
    """Return a function that wraps a plist body in a complete document."""

    def _wrap(body: str) -> str:
        return f'{PLIST_HEADER}<plist version="1.0">{body}</plist>'

    return _wrap


@pytest.fixture
def ack():
    """The output of a write command that succeeded without echoing an id."""
    return ACKNOWLEDGMENT_PLIST


@pytest.fixture
def executor():
    """Create an executor double with no queued results."""
    return RecordingExecutor()


@pytest.fixture
def client(executor):
    """Create a client with experimental operations disabled."""
    return MoneyMoney(executor=executor, config=ClientConfig())


@pytest.fixture
def experimental_client(executor):
    """Create a client with experimental operations enabled."""
    return MoneyMoney(executor=executor, config=ClientConfig(experimental=True))


@pytest.fixture
def sample_accounts(load_fixture):
    """Accounts decoded from the accounts fixture (one group, two accounts)."""
    return accounts_to_domain(decode_plist(load_fixture("accounts")))


@pytest.fixture
def new_transaction():
    """A transaction ready to be added to the cash account."""
    return Transaction(
        id=None,
        account="Bargeld",
        booking_date=date(2024, 1, 15),
        value_date=date(2024, 1, 15),
        amount=Decimal("-3.50"),
        currency=Currency.EUR,
        name="Bäckerei",
        purpose="Brötchen",
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
