"""Validation of the exchange-rate database and of conversion requests."""

from __future__ import annotations

import datetime
import re

_INPUT_HEADER = "date | value"
_DATABASE_HEADER = "date,exchange_rate"
_INPUT_LINE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} \| -?[0-9]+(\.[0-9]{1,2})?\Z")
_DATABASE_LINE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2},[0-9]+(\.[0-9]{1,2})?\Z")
_TXT_NAME = re.compile(r"\.txt\Z")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)


class InputError(ValueError):
    """Raised when a file, a line or a value is not acceptable."""


def _atoi(text: str) -> int:
    """Parse the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _strtod(text: str) -> float:
    """Parse the leading floating-point number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def split_field(text: str, delimiter: str, start: int) -> str:
    """Take the substring from ``start`` whose length is the position of the first ``delimiter``.

    When ``delimiter`` does not occur, everything from ``start`` is returned.
    """
    if start > len(text):
        raise InputError("basic_string::substr")
    position = text.find(delimiter)
    if position < 0:
        return text[start:]
    return text[start:start + position]


def _date_parts(date: str) -> tuple[int, int, int]:
    """Split a ``YYYY-MM-DD`` field into year, month and day numbers."""
    return (
        _atoi(split_field(date, "-", 0)),
        _atoi(split_field(date, "-", 5)),
        _atoi(split_field(date, "-", 8)),
    )


def check_input_line(line: str, index: int) -> str:
    """Check one line of the request file; line 0 must be the header."""
    if index == 0:
        if line != _INPUT_HEADER:
            raise InputError("One line")
        return line
    if not _INPUT_LINE.search(line):
        raise InputError("Format invalid")
    return line


def check_date(date: str) -> datetime.date:
    """Return the calendar date named by ``date``, rejecting impossible dates."""
    year, month, day = _date_parts(date)
    try:
        return datetime.date(year, month, day)
    except ValueError as exc:
        raise InputError("Bad Input") from exc


def check_value(value: str) -> float:
    """Return the amount in ``value``, which must lie between 0 and 100."""
    amount = _strtod(value)
    if amount < 0:
        raise InputError("Bad value (neg)")
    if amount > 100:
        raise InputError("Bad value (top)")
    return amount


def check_txt_name(path: str) -> str:
    """Require a file name ending in ``.txt``."""
    if not _TXT_NAME.search(path):
        raise InputError("Error not format Valid for Txt")
    return path


def check_database_line(index: int, line: str) -> str:
    """Check one line of the database; line 1 may be the header."""
    if index == 1 and line == _DATABASE_HEADER:
        return line
    if not _DATABASE_LINE.search(line):
        raise InputError("Format invalid Data")
    return line