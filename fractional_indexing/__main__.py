"""Interface for ``python -m fractional_indexing``."""

from __future__ import annotations

import logging
from argparse import ArgumentParser
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .digits import BASE_62_DIGITS, is_ascending
from .errors import FractionalIndexingError
from .generate import generate_n_keys_between


__all__ = ["main"]


def main(args: Sequence[str] | None = None) -> None:
    """Print ``-n`` order keys between ``--after`` and ``--before``, one per line."""
    parser = ArgumentParser(prog="fractional_indexing")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("-n", type=int, default=1, help="number of keys to generate")
    _ = parser.add_argument("--after", default=None, help="lower bound; omit for an open start")
    _ = parser.add_argument("--before", default=None, help="upper bound; omit for an open end")
    _ = parser.add_argument("--digits", default=BASE_62_DIGITS, help="ascending digit alphabet")
    _ = parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    options = parser.parse_args(args)

    logging.basicConfig(level=options.log_level)
    if not is_ascending(options.digits):
        parser.error("--digits must hold at least two characters in ascending order")
    if options.n < 0:
        parser.error("-n must not be negative")

    try:
        keys = generate_n_keys_between(options.after, options.before, options.n, options.digits)
    except FractionalIndexingError as exc:
        parser.error(str(exc))
    for key in keys:
        print(key)


if __name__ == "__main__":
    main()
