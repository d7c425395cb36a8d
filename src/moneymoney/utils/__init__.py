"""Utility functions for moneymoney."""

from moneymoney.utils.date_parser import parse_date
from moneymoney.utils.amount_parser import parse_amount
from moneymoney.utils.iban import is_valid_iban, normalize_iban

__all__ = ["parse_date", "parse_amount", "is_valid_iban", "normalize_iban"]
