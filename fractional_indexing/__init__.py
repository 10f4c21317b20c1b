"""fractional-indexing - sortable string keys that always fit between two neighbours"""

from ._version import version as __version__
from .digits import BASE_10_DIGITS, BASE_62_DIGITS, INTEGER_ZERO, SMALLEST_INTEGER
from .errors import (
    ExhaustedError,
    FractionalIndexingError,
    InvalidHeadError,
    InvalidIntegerPartError,
    InvalidKeyError,
    OrderingViolationError,
    TrailingZeroError,
)
from .generate import generate_key_between, generate_n_keys_between
from .integer import decrement_integer, increment_integer, validate_order_key
from .midpoint import midpoint


__all__ = [
    "BASE_10_DIGITS",
    "BASE_62_DIGITS",
    "INTEGER_ZERO",
    "SMALLEST_INTEGER",
    "ExhaustedError",
    "FractionalIndexingError",
    "InvalidHeadError",
    "InvalidIntegerPartError",
    "InvalidKeyError",
    "OrderingViolationError",
    "TrailingZeroError",
    "__version__",
    "decrement_integer",
    "generate_key_between",
    "generate_n_keys_between",
    "increment_integer",
    "midpoint",
    "validate_order_key",
]
