"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

from typing import Iterable

import click

from moneymoney.domain.account import AccountService
from moneymoney.domain.entities import Account
from moneymoney.domain.errors import account_not_found


def resolve_account_or_exit(
    ctx: click.Context, accounts: Iterable[Account], reference: str
) -> Account:
    """Resolve account UUID, name or IBAN, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    account = AccountService.find_account(accounts, reference)
    if account is None:
        click.echo(f"Error: {account_not_found(reference)}", err=True)
        ctx.exit(1)
    return account
