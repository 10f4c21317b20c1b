"""Increment and decrement of integer parts.

An integer part is a head character followed by big-endian digits of the
alphabet.  Carrying past the first digit moves the head to its neighbour,
which changes the number of digits by one.
"""

from __future__ import annotations

from fractional_indexing.digits import digit_index
from fractional_indexing.errors import ExhaustedError

from .codec import validate_integer


def increment_integer(value: str, digits: str) -> str | None:
    """Return the integer part one unit above ``value``.

    Returns None when ``value`` is the largest integer the ``z`` head can hold.
    """
    validate_integer(value)
    head = value[0]
    reversed_body: list[str] = []
    carry = True
    for char in reversed(value[1:]):
        if not carry:
            reversed_body.append(char)
            continue
        index = digit_index(char, digits, value) + 1
        if index == len(digits):
            reversed_body.append(digits[0])
        else:
            reversed_body.append(digits[index])
            carry = False
    body = reversed_body[::-1]

    if not carry:
        return head + "".join(body)
    if head == "Z":
        return "a" + digits[0]
    if head == "z":
        return None

    next_head = chr(ord(head) + 1)
    if next_head.islower():
        body.append(digits[0])
    else:
        _ = body.pop()
    return next_head + "".join(body)


def decrement_integer(value: str, digits: str) -> str | None:
    """Return the integer part one unit below ``value``.

    Returns None when ``value`` is the smallest integer the ``A`` head can hold.
    """
    validate_integer(value)
    head = value[0]
    reversed_body: list[str] = []
    borrow = True
    for char in reversed(value[1:]):
        if not borrow:
            reversed_body.append(char)
            continue
        index = digit_index(char, digits, value) - 1
        if index == -1:
            reversed_body.append(digits[-1])
        else:
            reversed_body.append(digits[index])
            borrow = False
    body = reversed_body[::-1]

    if not borrow:
        return head + "".join(body)
    if head == "a":
        return "Z" + digits[-1]
    if head == "A":
        return None

    previous_head = chr(ord(head) - 1)
    if previous_head.isupper():
        body.append(digits[-1])
    else:
        _ = body.pop()
    return previous_head + "".join(body)


def increment_integer_strict(value: str, digits: str) -> str:
    """Like :func:`increment_integer` but raise when no larger integer exists."""
    result = increment_integer(value, digits)
    if result is None:
        msg = f"cannot increment {value!r} any further"
        raise ExhaustedError(msg)
    return result


def decrement_integer_strict(value: str, digits: str) -> str:
    """Like :func:`decrement_integer` but raise when no smaller integer exists."""
    result = decrement_integer(value, digits)
    if result is None:
        msg = f"cannot decrement {value!r} any further"
        raise ExhaustedError(msg)
    return result
