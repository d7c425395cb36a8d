"""Tests for the command line interface."""

from moneymoney.cli.main import cli
from moneymoney.domain.errors import TransportError


def _invoke(cli_runner, client, args):
    return cli_runner.invoke(cli, args, obj={"client": client})


def test_help_does_not_need_moneymoney(cli_runner):
    """Test help output works without reaching the application."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "transactions" in result.output
    assert "direct-debit" in result.output


def test_accounts_hides_groups(cli_runner, client, executor, load_fixture):
    """Test account listing leaves out groups by default."""
    executor.queue(load_fixture("accounts"))

    result = _invoke(cli_runner, client, ["accounts"])

    assert result.exit_code == 0
    assert "Girokonto" in result.output
    assert "1,000.10 EUR" in result.output
    assert "Banken" not in result.output


def test_accounts_all(cli_runner, client, executor, load_fixture):
    """Test --all includes account groups."""
    executor.queue(load_fixture("accounts"))

    result = _invoke(cli_runner, client, ["accounts", "--all"])

    assert result.exit_code == 0
    assert "Banken" in result.output


def test_accounts_transport_error(cli_runner, client, executor):
    """Test executor failures are rendered as errors."""
    executor.queue(TransportError("MoneyMoney got an error: Locked database."))

    result = _invoke(cli_runner, client, ["accounts"])

    assert result.exit_code == 1
    assert "Error: MoneyMoney got an error: Locked database." in result.output


def test_categories_tree(cli_runner, client, executor, load_fixture):
    """Test categories are shown indented with budgets."""
    executor.queue(load_fixture("categories"))

    result = _invoke(cli_runner, client, ["categories"])

    assert result.exit_code == 0
    assert "Lebenshaltung" in result.output
    assert "  Lebensmittel  (budget 400.00 EUR, available 123.45, monthly)" in result.output


def test_transactions_with_filters(cli_runner, client, executor, load_fixture):
    """Test filters are passed to MoneyMoney and results listed."""
    executor.queue(load_fixture("transactions"))

    result = _invoke(
        cli_runner,
        client,
        ["transactions", "--start-date", "01.03.2024", "--end-date", "2024-03-31", "--account", "Girokonto"],
    )

    assert result.exit_code == 0
    assert executor.commands == [
        'tell application "MoneyMoney" to export transactions from account "Girokonto" '
        'from date "2024-03-01" to date "2024-03-31" as "plist"'
    ]
    assert "Found 3 transaction(s)" in result.output
    assert "REWE Markt" in result.output
    assert "Expenses: 52.49 | Income: 2,500.00 | Count: 3" in result.output


def test_transactions_verbose(cli_runner, client, executor, load_fixture):
    """Test verbose output shows comments and pending state."""
    executor.queue(load_fixture("transactions"))

    result = _invoke(cli_runner, client, ["transactions", "-v"])

    assert result.exit_code == 0
    assert "Comment: Wocheneinkauf" in result.output
    assert "Pending" in result.output


def test_transactions_period_flag(cli_runner, client, executor):
    """Test a period flag becomes a date range."""
    executor.queue(None)

    result = _invoke(cli_runner, client, ["transactions", "--last-month"])

    assert result.exit_code == 0
    assert "No transactions found." in result.output
    assert "from date" in executor.commands[0]
    assert "to date" in executor.commands[0]


def test_transactions_conflicting_periods(cli_runner, client, executor):
    """Test only one period flag is allowed."""
    result = _invoke(cli_runner, client, ["transactions", "--this-month", "--last-year"])

    assert result.exit_code == 1
    assert "Only one period option" in result.output
    assert executor.commands == []


def test_transactions_inverted_range(cli_runner, client, executor):
    """Test an inverted range is rejected before export."""
    result = _invoke(
        cli_runner, client, ["transactions", "--start-date", "2024-02-01", "--end-date", "2024-01-01"]
    )

    assert result.exit_code == 1
    assert "Error: Start date 2024-02-01 is after end date 2024-01-01" in result.output
    assert executor.commands == []


def test_portfolio(cli_runner, client, executor, load_fixture):
    """Test portfolio positions and totals are shown."""
    executor.queue(load_fixture("portfolio"))

    result = _invoke(cli_runner, client, ["portfolio", "--account", "Depot"])

    assert result.exit_code == 0
    assert 'from account "Depot"' in executor.commands[0]
    assert "iShares Core MSCI World" in result.output
    assert "2,041.95 EUR" in result.output


def test_add_transaction(cli_runner, client, executor, load_fixture, ack):
    """Test adding a transaction with a German decimal comma."""
    executor.queue(load_fixture("accounts"))
    executor.queue(ack)

    result = _invoke(
        cli_runner,
        client,
        ["add", "--purpose", "Brötchen", "Bargeld", "15.01.2024", "Bäckerei", "--", "-3,50"],
    )

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert executor.commands[1].splitlines()[0] == (
        'tell application "MoneyMoney" to add transaction to account "Bargeld" '
        'on date "2024-01-15" to "Bäckerei" amount -3.50 purpose "Brötchen"'
    )


def test_add_transaction_echoed_id(cli_runner, client, executor, load_fixture, plist):
    """Test an echoed id is shown."""
    executor.queue(load_fixture("accounts"))
    executor.queue(plist("<integer>4711</integer>"))

    result = _invoke(cli_runner, client, ["add", "Girokonto", "today", "ACME", "100"])

    assert result.exit_code == 0
    assert "Created transaction 4711" in result.output


def test_add_transaction_to_group(cli_runner, client, executor, load_fixture):
    """Test account groups are rejected."""
    executor.queue(load_fixture("accounts"))

    result = _invoke(cli_runner, client, ["add", "Banken", "today", "X", "1"])

    assert result.exit_code == 1
    assert "account group" in result.output
    assert len(executor.commands) == 1


def test_add_transaction_unknown_account(cli_runner, client, executor, load_fixture):
    """Test unknown accounts are rejected."""
    executor.queue(load_fixture("accounts"))

    result = _invoke(cli_runner, client, ["add", "Sparbuch", "today", "X", "1"])

    assert result.exit_code == 1
    assert "Error: Account 'Sparbuch' not found" in result.output


def test_add_transaction_invalid_amount(cli_runner, client, executor):
    """Test an invalid amount fails before contacting MoneyMoney."""
    result = _invoke(cli_runner, client, ["add", "Bargeld", "today", "X", "zwölf"])

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output
    assert executor.commands == []


def test_set_checkmark_keeps_other_fields(cli_runner, client, executor, load_fixture, ack):
    """Test setting the checkmark resends stored category and comment."""
    executor.queue(load_fixture("transactions"))
    executor.queue(ack)

    result = _invoke(cli_runner, client, ["set", "101", "--checkmark", "--account", "acc-giro"])

    assert result.exit_code == 0
    assert "Updated transaction 101" in result.output
    assert 'from account "acc-giro"' in executor.commands[0]
    assert executor.commands[1].splitlines()[0].endswith(
        'set transaction id 101 checkmark to "on" category to "cat-food" comment to "Wocheneinkauf"'
    )


def test_set_clear_comment(cli_runner, client, executor, load_fixture, ack):
    """Test an empty --comment clears the comment."""
    executor.queue(load_fixture("transactions"))
    executor.queue(ack)

    result = _invoke(cli_runner, client, ["set", "101", "--comment", ""])

    assert result.exit_code == 0
    assert 'comment to ""' in executor.commands[1]
    assert 'checkmark to "off"' in executor.commands[1]


def test_set_unknown_transaction(cli_runner, client, executor, load_fixture):
    """Test a missing transaction id is reported."""
    executor.queue(load_fixture("transactions"))

    result = _invoke(cli_runner, client, ["set", "999", "--checkmark"])

    assert result.exit_code == 1
    assert "Transaction 999 not found" in result.output
    assert len(executor.commands) == 1


def test_set_without_changes(cli_runner, client, executor):
    """Test set needs at least one field."""
    result = _invoke(cli_runner, client, ["set", "101"])

    assert result.exit_code == 1
    assert "Nothing to update" in result.output
    assert executor.commands == []


def test_transfer_requires_experimental(cli_runner, client, executor):
    """Test transfers are refused without --experimental."""
    result = _invoke(
        cli_runner, client, ["transfer", "Girokonto", "Max", "DE89370400440532013000", "10"]
    )

    assert result.exit_code == 1
    assert "experimental" in result.output
    assert executor.commands == []


def test_transfer(cli_runner, client, executor, ack):
    """Test an experimental transfer to the outbox."""
    executor.queue(ack)

    result = _invoke(
        cli_runner,
        client,
        [
            "--experimental",
            "transfer",
            "Girokonto",
            "Max Mustermann",
            "DE89 3704 0044 0532 0130 00",
            "42,00",
            "--purpose",
            "Miete",
            "--instant",
            "--outbox",
        ],
    )

    assert result.exit_code == 0
    assert "Transfer of 42.00 EUR to Max Mustermann sent to outbox" in result.output
    command = executor.commands[0]
    assert 'iban "DE89370400440532013000"' in command
    assert 'instrument code "INST"' in command
    assert 'into "outbox"' in command


def test_transfer_invalid_iban(cli_runner, client, executor):
    """Test an invalid IBAN is rejected before sending."""
    result = _invoke(
        cli_runner,
        client,
        ["--experimental", "transfer", "Girokonto", "Max", "DE89370400440532013001", "10"],
    )

    assert result.exit_code == 1
    assert "Invalid IBAN" in result.output
    assert executor.commands == []


def test_direct_debit(cli_runner, client, executor, ack):
    """Test an experimental direct debit."""
    executor.queue(ack)

    result = _invoke(
        cli_runner,
        client,
        [
            "--experimental",
            "direct-debit",
            "Girokonto",
            "Erika Mustermann",
            "DE89370400440532013000",
            "25",
            "--mandate-reference",
            "M-001",
            "--mandate-date",
            "2024-01-01",
            "--sequence",
            "rcur",
        ],
    )

    assert result.exit_code == 0
    assert "Direct debit of 25.00 EUR from Erika Mustermann" in result.output
    command = executor.commands[0]
    assert 'mandate reference "M-001" mandate date "2024-01-01"' in command
    assert 'sequence code "RCUR"' in command


def test_add_transaction_ambiguous_amount(cli_runner, client, executor):
    """Test an amount that may hold a thousands separator is refused."""
    result = _invoke(cli_runner, client, ["add", "Bargeld", "today", "X", "12.500"])

    assert result.exit_code == 1
    assert "Ambiguous amount '12.500'" in result.output
    assert executor.commands == []
