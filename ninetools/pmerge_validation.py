"""Validation of the command-line numbers given to the merge-insertion sorter."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MAX = 2**31 - 1
_NUMBER = re.compile(r"^[+]?[0-9]+\Z")


class ArgumentError(ValueError):
    """Raised when the arguments are not a list of non-negative integers."""


def check_arguments(args: Iterable[str]) -> list[int]:
    """Check every argument and return them as integers.

    Each argument must be a run of decimal digits, optionally preceded by
    ``+``, whose value fits in a signed 32-bit integer.
    """
    items = list(args)
    if not items:
        raise ArgumentError("Number argument invalid")
    numbers = []
    for item in items:
        if not _NUMBER.match(item):
            raise ArgumentError("Format invalid")
        number = int(item)
        if number > INT_MAX:
            raise ArgumentError("Number sup int max")
        numbers.append(number)
    return numbers