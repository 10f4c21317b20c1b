"""Exception taxonomy for order key generation."""

from __future__ import annotations


class FractionalIndexingError(ValueError):
    """Base class for every failure raised by this package."""


class InvalidHeadError(FractionalIndexingError):
    """The first character of a key is outside ``A..Z`` and ``a..z``."""


class InvalidIntegerPartError(FractionalIndexingError):
    """An integer part's length does not match the length implied by its head."""


class InvalidKeyError(FractionalIndexingError):
    """An order key is malformed or equals the reserved smallest integer."""


class OrderingViolationError(FractionalIndexingError):
    """A lower bound was not strictly less than its upper bound."""


class TrailingZeroError(FractionalIndexingError):
    """A fractional part ends in the alphabet's zero digit."""


class ExhaustedError(FractionalIndexingError):
    """The integer part cannot be incremented or decremented any further."""
