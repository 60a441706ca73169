"""Small strict parsing helpers shared by the string codecs."""

from __future__ import annotations

import re

# Optional sign and ASCII digits only; int() alone would also accept "1_000".
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def try_parse_int(text: str) -> int | None:
    """Parse *text* as a base-10 integer, or return None.

    Surrounding whitespace is ignored.

    Examples:
        >>> try_parse_int(" 42 ")
        42
        >>> try_parse_int("4x") is None
        True
    """
    candidate = text.strip()
    if not _INT_PATTERN.fullmatch(candidate):
        return None
    return int(candidate)
