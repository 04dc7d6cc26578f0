"""Command that sorts its integer arguments and reports the time taken."""

from __future__ import annotations

import sys
import time
from collections import deque
from collections.abc import Iterable

from ninetools.pmerge import _merge_insert, merge_insert_sort
from ninetools.pmerge_validation import ArgumentError, check_arguments


def format_before(args: Iterable[str]) -> str:
    """Render the arguments as given, without any leading ``+``."""
    shown = "".join(f" {arg[1:] if arg.startswith('+') else arg}" for arg in args)
    return f"Before{shown}"


def format_after(values: Iterable[int]) -> str:
    """Render the sorted values, each followed by a space."""
    return "After: " + "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: sort the arguments with a list and with a deque."""
    args = sys.argv[1:] if argv is None else list(argv)
    start = time.perf_counter()
    try:
        values = check_arguments(args)
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 2

    print(format_before(args))
    if len(values) > 1:
        print(format_after(merge_insert_sort(values)))
    else:
        print(f"After: {args[0]}")
    list_time = (time.perf_counter() - start) * 1e6
    print(f"Time to process a range of {len(args)} elements with [list] :{list_time:.5f} us")

    if len(values) > 1:
        _merge_insert(values, deque())
    deque_time = (time.perf_counter() - start) * 1e6 - list_time
    print(f"Time to process a range of {len(args)} elements with [deque] :{deque_time:.5f} us")
    return 0


if __name__ == "__main__":
    sys.exit(main())