"""Tests for CLI date filter helper."""

import click
import pytest

from moneymoney.cli.date_filters import resolve_cli_date_range
from moneymoney.utils.date_parser import get_date_range, parse_date


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Only one period option" in err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    period_flags = {"this-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "cannot be combined" in err


def test_resolve_cli_date_range_returns_period_range():
    period_flags = {"this-month": False, "last-year": True}

    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags=period_flags,
    )

    assert (start, end) == get_date_range("last-year")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2024-01-02",
        end_date="05.01.2024",
        period_flags={},
    )

    assert start == parse_date("2024-01-02")
    assert end == parse_date("2024-01-05")


def test_resolve_cli_date_range_open_ended():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags={"this-week": False},
    )

    assert start is None
    assert end is None


def test_resolve_cli_date_range_invalid_end_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date="not-a-date",
            period_flags={},
        )

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Invalid end date" in err
