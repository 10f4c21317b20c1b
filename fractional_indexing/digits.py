"""Digit alphabets and reserved keys."""

from __future__ import annotations

from itertools import pairwise
from typing import Final

from fractional_indexing.errors import InvalidKeyError


BASE_62_DIGITS: Final = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE_10_DIGITS: Final = "0123456789"

# Head "A" followed by the longest run of zero digits it allows.
SMALLEST_INTEGER: Final = "A00000000000000000000000000"
INTEGER_ZERO: Final = "a0"


def is_ascending(digits: str) -> bool:
    """Return True when ``digits`` is usable as an alphabet.

    The library never checks this itself; callers that accept alphabets from
    users (such as the command line) should.
    """
    return len(digits) >= 2 and all(left < right for left, right in pairwise(digits))


def digit_index(char: str, digits: str, context: str) -> int:
    """Return the position of ``char`` in ``digits``; ``context`` names the offending string."""
    index = digits.find(char)
    if index < 0:
        msg = f"invalid digit {char!r} in {context!r}"
        raise InvalidKeyError(msg)
    return index
