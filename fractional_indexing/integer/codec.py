"""Parsing and validation of the self-delimiting integer part of order keys."""

from __future__ import annotations

from fractional_indexing.digits import BASE_62_DIGITS, SMALLEST_INTEGER, digit_index
from fractional_indexing.errors import InvalidHeadError, InvalidIntegerPartError, InvalidKeyError


def integer_length(head: str) -> int:
    """Return the total length of an integer part starting with ``head``.

    Lowercase heads encode non-negative integers and grow longer towards ``z``;
    uppercase heads encode negative integers and grow longer towards ``A``.
    """
    if "a" <= head <= "z":
        return ord(head) - ord("a") + 2
    if "A" <= head <= "Z":
        return ord("Z") - ord(head) + 2
    msg = f"invalid order key head: {head!r}"
    raise InvalidHeadError(msg)


def integer_part(key: str) -> str:
    """Return the integer prefix of ``key``."""
    if not key:
        msg = "invalid order key: empty string"
        raise InvalidKeyError(msg)
    length = integer_length(key[0])
    if length > len(key):
        msg = f"invalid order key: {key!r}"
        raise InvalidKeyError(msg)
    return key[:length]


def split_key(key: str) -> tuple[str, str]:
    """Split ``key`` into its integer and fractional parts."""
    integer = integer_part(key)
    return integer, key[len(integer) :]


def validate_integer(value: str) -> None:
    """Raise unless ``value`` is exactly as long as its head implies."""
    if not value or len(value) != integer_length(value[0]):
        msg = f"invalid integer part of order key: {value!r}"
        raise InvalidIntegerPartError(msg)


def validate_order_key(key: str, digits: str = BASE_62_DIGITS) -> None:
    """Raise when ``key`` cannot be used as a bound for key generation."""
    if key == SMALLEST_INTEGER:
        msg = f"invalid order key: {key!r}"
        raise InvalidKeyError(msg)
    # integer_part() also rejects a bad head or a key that is too short
    _, fraction = split_key(key)
    if fraction.endswith(digits[0]):
        msg = f"invalid order key: {key!r}"
        raise InvalidKeyError(msg)
    for char in fraction:
        _ = digit_index(char, digits, key)
