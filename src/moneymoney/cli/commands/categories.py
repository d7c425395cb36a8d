"""Category tree command."""

import click

from moneymoney.cli.error_handling import handle_domain_error
from moneymoney.domain.entities import CategoryNode
from moneymoney.domain.errors import MoneyMoneyError


def _display_node(node: CategoryNode, depth: int) -> None:
    category = node.category
    line = "  " * depth + category.name
    budget = category.budget
    if budget is not None:
        line += (
            f"  (budget {budget.amount:,.2f} {budget.currency}, "
            f"available {budget.available:,.2f}, {budget.period})"
        )
    click.echo(line)
    for child in node.children:
        _display_node(child, depth + 1)


@click.command("categories")
@click.pass_context
def list_categories(ctx):
    """Show the category tree with budgets.

    Examples:
        moneymoney categories
    """
    client = ctx.obj["client"]

    try:
        tree = client.category_tree()
    except MoneyMoneyError as e:
        handle_domain_error(ctx, e)

    if not tree:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 60)
    for root in tree:
        _display_node(root, 0)


def register_commands(cli: click.Group) -> None:
    """Register category commands with main CLI."""
    cli.add_command(list_categories)
