"""Convert amounts of bitcoin at the exchange rate of a given date."""

from __future__ import annotations

import os
import struct
import sys
from collections.abc import Iterable, Iterator, Mapping

from ninetools.btc_validation import (
    InputError,
    _date_parts,
    _strtod,
    check_database_line,
    check_date,
    check_input_line,
    check_txt_name,
    check_value,
    split_field,
)

DEFAULT_DATABASE = "data.csv"
_FIRST_DAY = (2009, 2, 1)


def _f32(number: float) -> float:
    """Round ``number`` to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return float("inf") if number > 0 else float("-inf")


def _read_lines(path: str | os.PathLike) -> list[str]:
    """Read a file as lines split on newline only, keeping carriage returns."""
    with open(path, "rb") as handle:
        text = handle.read().decode("utf-8", errors="replace")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_database(path: str | os.PathLike) -> dict[str, float]:
    """Read the rate database into a date-ordered mapping of date to rate."""
    try:
        lines = _read_lines(path)
    except OSError as exc:
        raise InputError("Not Rights file Csv") from exc
    for number, line in enumerate(lines, start=1):
        check_database_line(number, line)
    rates: dict[str, float] = {}
    for line in lines[1:]:
        rates.setdefault(split_field(line, ",", 0), _strtod(split_field(line, "\0", 11)))
    return dict(sorted(rates.items()))


def lookup_rate(rates: Mapping[str, float], date: str) -> float | None:
    """Find the rate for ``date``, or the closest earlier one in the same month.

    Dates before 2009-02-01 get a rate of 0. ``None`` means no rate applies.
    """
    wanted = _date_parts(date)
    year, month, day = wanted
    previous: float | None = None
    for key in sorted(rates):
        rate = rates[key]
        if wanted < _FIRST_DAY:
            return 0.0
        key_year, key_month, key_day = _date_parts(key)
        if year == key_year and month == key_month:
            if day == key_day:
                return rate
            if day < key_day:
                return previous
        previous = rate
    return None


def format_result(date: str, value: str, rate: float) -> str:
    """Render one conversion as ``date=>value = product``."""
    product = _f32(_f32(_strtod(value)) * _f32(rate))
    return f"{date}=>{value} = {product:g}"


def convert_lines(
    rates: Mapping[str, float], lines: Iterable[str]
) -> Iterator[tuple[str, bool]]:
    """Convert request lines, yielding ``(text, is_error)`` for each message."""
    for index, line in enumerate(lines):
        try:
            check_input_line(line, index)
            if index == 0:
                continue
            date = split_field(line, "|", 0)
            value = split_field(line, "\n", 12)
            check_date(date)
            check_value(value)
            rate = lookup_rate(rates, date)
        except InputError as exc:
            yield f"Erreur: {exc} for: {line}", True
            continue
        if rate is not None:
            yield format_result(date, value, rate), False


def run(
    input_path: str | os.PathLike, database_path: str | os.PathLike = DEFAULT_DATABASE
) -> list[tuple[str, bool]]:
    """Check both files, then convert every request in ``input_path``."""
    try:
        with open(database_path, "rb"):
            pass
    except OSError as exc:
        raise InputError("Not Rights file Csv") from exc
    try:
        with open(input_path, "rb"):
            pass
    except OSError as exc:
        raise InputError("Not Rights file Txt") from exc
    check_txt_name(os.fspath(input_path))
    rates = load_database(database_path)
    return list(convert_lines(rates, _read_lines(input_path)))


def main(argv: list[str] | None = None) -> int:
    """Command entry point: convert the requests in the single file argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise InputError("Not number arguments")
        for text, is_error in run(args[0]):
            print(text, file=sys.stderr if is_error else sys.stdout)
    except InputError as exc:
        print(f"Erreur: {exc}", file=sys.stderr)
    print("Destructor class")
    return 0


if __name__ == "__main__":
    sys.exit(main())