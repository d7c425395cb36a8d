"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles both English and German notation:
    - "123.45", "-123.45", "1,234.56"
    - "123,45", "1.234,56"
    - "€123.45", "12,50 €", "EUR 12.50"
    - "(123.45)" (negative in parentheses)

    Repeated separators of one kind ("1.234.567") are thousands separators.
    A single separator before exactly three digits is only accepted when the
    whole part is zero ("0,125"); otherwise "1.234" could mean either value
    and is rejected.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()

    is_negative = False
    if text.startswith("(") and text.endswith(")"):
        is_negative = True
        text = text[1:-1]

    text = re.sub(r"[€$£¥]|\bEUR\b", "", text, flags=re.IGNORECASE)
    text = re.sub(r"\s", "", text)

    last_dot = text.rfind(".")
    last_comma = text.rfind(",")
    if last_dot >= 0 and last_comma >= 0:
        # The later separator is the decimal one
        if last_comma > last_dot:
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif last_dot >= 0 or last_comma >= 0:
        separator = "," if last_comma >= 0 else "."
        if text.count(separator) > 1:
            text = text.replace(separator, "")
        else:
            whole, fraction = text.split(separator)
            if len(fraction) == 3 and whole.lstrip("+-").strip("0"):
                raise ValueError(
                    f"Ambiguous amount '{amount_str}', write it with both separators "
                    "or without a thousands separator"
                )
            text = text.replace(separator, ".")

    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
