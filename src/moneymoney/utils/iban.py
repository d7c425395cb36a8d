"""IBAN normalization and checksum validation."""

import re

_IBAN_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{11,30}$")


def normalize_iban(iban: str) -> str:
    """Strip spaces and uppercase an IBAN.

    Args:
        iban: IBAN in paper or electronic format

    Returns:
        IBAN in electronic format (e.g., "DE89370400440532013000")
    """
    return iban.replace(" ", "").upper()


def is_valid_iban(iban: str) -> bool:
    """Check an IBAN's format and ISO 13616 mod-97 checksum.

    The first four characters are moved to the end, letters are replaced by
    two-digit numbers (A=10 ... Z=35), and the resulting integer must leave
    a remainder of 1 when divided by 97.

    Args:
        iban: IBAN in paper or electronic format

    Returns:
        True if the IBAN is well-formed and its check digits match
    """
    normalized = normalize_iban(iban)
    if not _IBAN_PATTERN.match(normalized):
        return False

    rearranged = normalized[4:] + normalized[:4]
    digits = "".join(str(int(char, 36)) for char in rearranged)
    return int(digits) % 97 == 1
