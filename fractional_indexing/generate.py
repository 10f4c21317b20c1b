"""Order key generation between optional neighbours."""

from __future__ import annotations

import logging

from fractional_indexing.digits import BASE_62_DIGITS, INTEGER_ZERO, SMALLEST_INTEGER
from fractional_indexing.errors import OrderingViolationError
from fractional_indexing.integer import (
    decrement_integer_strict,
    increment_integer,
    increment_integer_strict,
    split_key,
    validate_order_key,
)
from fractional_indexing.midpoint import midpoint


logger = logging.getLogger(__name__)


def generate_key_between(a: str | None, b: str | None, digits: str = BASE_62_DIGITS) -> str:
    """Return a key that sorts strictly between ``a`` and ``b``.

    Either bound may be None to leave that side open.  With both bounds open
    the first key, ``"a0"``, is returned.

    Raises
    ------
    OrderingViolationError
        When both bounds are given and ``a >= b``.
    InvalidKeyError
        When a bound is not a valid order key.
    ExhaustedError
        When the integer part would have to move past its representable range.
    """
    if a is not None and b is not None and a >= b:
        msg = f"{a!r} >= {b!r}"
        raise OrderingViolationError(msg)
    if a is not None:
        validate_order_key(a, digits)
    if b is not None:
        validate_order_key(b, digits)

    if a is None:
        if b is None:
            return INTEGER_ZERO
        int_b, frac_b = split_key(b)
        if int_b == SMALLEST_INTEGER:
            logger.debug("key below %r lives in the fraction of the smallest integer", b)
            return int_b + midpoint("", frac_b, digits)
        if int_b < b:
            return int_b
        return decrement_integer_strict(int_b, digits)

    int_a, frac_a = split_key(a)
    if b is None:
        incremented = increment_integer(int_a, digits)
        if incremented is not None:
            return incremented
        logger.debug("integer part of %r is exhausted, extending its fraction", a)
        return int_a + midpoint(frac_a, None, digits)

    int_b, frac_b = split_key(b)
    if int_a == int_b:
        return int_a + midpoint(frac_a, frac_b, digits)
    incremented = increment_integer_strict(int_a, digits)
    if incremented < b:
        return incremented
    return int_a + midpoint(frac_a, None, digits)


def generate_n_keys_between(a: str | None, b: str | None, n: int, digits: str = BASE_62_DIGITS) -> list[str]:
    """Return ``n`` strictly increasing keys between ``a`` and ``b``.

    With an open upper bound the keys are consecutive appends after ``a``;
    with an open lower bound they are consecutive prepends before ``b``.
    Otherwise the range is split around its midpoint so keys stay short.
    """
    if n < 0:
        msg = f"n must not be negative: {n}"
        raise ValueError(msg)
    if n == 0:
        return []
    if n == 1:
        return [generate_key_between(a, b, digits)]

    if b is None:
        keys: list[str] = []
        lower = a
        for _ in range(n):
            lower = generate_key_between(lower, None, digits)
            keys.append(lower)
        return keys

    if a is None:
        keys = []
        upper = b
        for _ in range(n):
            upper = generate_key_between(None, upper, digits)
            keys.append(upper)
        keys.reverse()
        return keys

    half = n // 2
    middle = generate_key_between(a, b, digits)
    logger.debug("splitting %d keys between %r and %r around %r", n, a, b, middle)
    return [
        *generate_n_keys_between(a, middle, half, digits),
        middle,
        *generate_n_keys_between(middle, b, n - half - 1, digits),
    ]
