"""Date parsing utilities for command line filters."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-week", "this-month", "this-year", "last-week", "last-month", "last-year")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts ISO dates ("2024-01-15"), day-first dates as MoneyMoney shows
    them ("15.01.2024"), other formats dateutil understands, and the
    keywords "today", "yesterday", "this month", "last month", "this year"
    and "last year".

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    keywords = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if text in keywords:
        return keywords[text]

    # "15.01.2024" is day-first; ISO stays year-first
    dayfirst = "." in text
    try:
        return date_parser.parse(text, dayfirst=dayfirst).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    "this-*" periods end today; "last-*" periods cover the whole previous
    week (Monday to Sunday), month or year.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-week":
        return (today - timedelta(days=today.weekday()), today)
    if period == "this-month":
        return (today.replace(day=1), today)
    if period == "this-year":
        return (today.replace(month=1, day=1), today)
    if period == "last-week":
        start_date = today - timedelta(days=today.weekday() + 7)
        return (start_date, start_date + timedelta(days=6))
    if period == "last-month":
        first_of_month = today.replace(day=1)
        return (first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1))
    if period == "last-year":
        first_of_year = today.replace(month=1, day=1)
        return (first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1))

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
