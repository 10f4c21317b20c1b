"""Integer-part codec and arithmetic."""

from .arithmetic import decrement_integer, decrement_integer_strict, increment_integer, increment_integer_strict
from .codec import integer_length, integer_part, split_key, validate_integer, validate_order_key


__all__ = [
    "decrement_integer",
    "decrement_integer_strict",
    "increment_integer",
    "increment_integer_strict",
    "integer_length",
    "integer_part",
    "split_key",
    "validate_integer",
    "validate_order_key",
]
