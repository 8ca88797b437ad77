"""Input rules shared by the library services."""

import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@([A-Za-z0-9.-]+\.[A-Za-z]{2,})$")
ID_PATTERN = re.compile(r"-?[0-9]+")

# Bounds of the signed 32-bit INTEGER columns holding ids and years.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def is_valid_email(email: str) -> bool:
    """Return True when the address has a local part, a domain and a 2+ letter TLD."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def parse_int32(raw: str) -> Optional[int]:
    """Parse a plain decimal integer that fits an INTEGER column, else None.

    Whitespace, underscores, a leading plus and non-ASCII digits
    are all rejected.
    """
    if ID_PATTERN.fullmatch(raw) is None:
        return None
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value
