"""Main CLI entry point."""

import click

from moneymoney.client import MoneyMoney
from moneymoney.config import ClientConfig
from moneymoney.logging import setup_logging

# Import and register all commands at module level
from moneymoney.cli.commands import (
    accounts,
    categories,
    transactions,
    portfolio,
    add,
    set_cmd,
    payments,
)


@click.group()
@click.option(
    "--experimental",
    is_flag=True,
    default=False,
    help="Enable experimental operations (SEPA transfers and direct debits)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides MONEYMONEY_LOG_LEVEL environment variable)",
)
@click.option(
    "--log-format",
    type=click.Choice(["standard", "json"]),
    default="standard",
    show_default=True,
    help="Log output format",
)
@click.pass_context
def cli(ctx, experimental: bool, log_level: str | None, log_format: str):
    """MoneyMoney - command line access to the MoneyMoney banking app.

    Reads accounts, categories, transactions and securities from a running
    MoneyMoney instance and writes transactions and SEPA payments to it.
    Settings are read from MONEYMONEY_* environment variables.
    """
    ctx.ensure_object(dict)

    config = ClientConfig.from_env()
    if experimental:
        config.experimental = True
    if log_level:
        config.log_level = log_level
    setup_logging(config.log_level, log_format)

    if "client" in ctx.obj:
        # A client passed in through obj was built without this invocation's flags
        if experimental:
            ctx.obj["client"].payments.experimental = True
    elif ctx.invoked_subcommand is not None:
        # Only reach for osascript when actually running a command
        # (not when showing help)
        ctx.obj["client"] = MoneyMoney(config=config)


# Register all commands
accounts.register_commands(cli)
categories.register_commands(cli)
transactions.register_commands(cli)
portfolio.register_commands(cli)
add.register_commands(cli)
set_cmd.register_commands(cli)
payments.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
