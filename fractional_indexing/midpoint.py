"""Shortest fractional string strictly between two bounds."""

from __future__ import annotations

from fractional_indexing.digits import digit_index
from fractional_indexing.errors import OrderingViolationError, TrailingZeroError


def _common_prefix_length(a: str, b: str, zero: str) -> int:
    # ``a`` is padded with zero digits; ``b`` cannot end inside the prefix
    # because ``a < b``.
    length = 0
    for index, char in enumerate(b):
        if (a[index] if index < len(a) else zero) != char:
            break
        length += 1
    return length


def _above(a: str, digits: str) -> str:
    # Open upper bound: copy digits of ``a`` until one leaves room above it.
    prefix: list[str] = []
    for char in a:
        digit_a = digit_index(char, digits, a)
        if len(digits) - digit_a > 1:
            prefix.append(digits[(digit_a + len(digits) + 1) // 2])
            return "".join(prefix)
        prefix.append(char)
    prefix.append(digits[(len(digits) + 1) // 2])
    return "".join(prefix)


def midpoint(a: str, b: str | None, digits: str) -> str:
    """Return a string strictly between ``a`` and ``b`` with no trailing zero digit.

    ``a`` may be empty and ``b`` may be None for an open upper bound.  Neither
    may end in the zero digit ``digits[0]``, and ``a < b`` when ``b`` is given.
    ``digits`` must be in ascending character order.
    """
    zero = digits[0]
    if b is not None and a >= b:
        msg = f"{a!r} >= {b!r}"
        raise OrderingViolationError(msg)
    if a.endswith(zero) or (b is not None and b.endswith(zero)):
        msg = f"trailing zero in midpoint bounds {a!r}, {b!r}"
        raise TrailingZeroError(msg)

    if b is None:
        return _above(a, digits)

    shared = _common_prefix_length(a, b, zero)
    prefix, a, b = b[:shared], a[shared:], b[shared:]

    # first digits (or lack of digit) differ
    digit_a = digit_index(a[0], digits, a) if a else 0
    digit_b = digit_index(b[0], digits, b)
    if digit_b - digit_a > 1:
        return prefix + digits[(digit_a + digit_b + 1) // 2]

    # consecutive first digits
    if len(b) > 1:
        return prefix + b[0]
    # e.g. midpoint("49", "5") is "4" + midpoint("9", None), which is "495"
    return prefix + digits[digit_a] + _above(a[1:], digits)
