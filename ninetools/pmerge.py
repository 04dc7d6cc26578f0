"""Ford-Johnson merge-insertion sort driven by Jacobsthal-sized blocks."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, MutableSequence
from typing import Optional, Tuple, TypeVar

Pair = Tuple[int, Optional[int]]
_Seq = TypeVar("_Seq", bound=MutableSequence)


def jacobsthal(n: int) -> int:
    """Return the ``n``-th block size: 2, 2, 6, 10, 22, ... (each term is the
    previous plus twice the one before it)."""
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 2, 2
    for _ in range(n - 1):
        previous, current = current, current + 2 * previous
    return current


def make_pairs(values: Iterable[int]) -> list[Pair]:
    """Group consecutive values in twos, larger first; an odd last value stands alone."""
    pairs: list[Pair] = []
    items = iter(values)
    for first in items:
        second = next(items, None)
        if second is None or first >= second:
            pairs.append((first, second))
        else:
            pairs.append((second, first))
    return pairs


def jacobsthal_order(pairs: Iterable[Pair]) -> list[Pair]:
    """Reverse the pairs inside consecutive blocks whose sizes follow :func:`jacobsthal`."""
    order = list(pairs)
    count = len(order)
    start = 0
    term = 0
    while True:
        size = jacobsthal(term)
        end = min(start + size - 1, count - 1)
        if end > start:
            order[start:end + 1] = order[start:end + 1][::-1]
        if start >= count:
            break
        start += size
        term += 1
    return order


def _insert_smaller(sorted_values: MutableSequence, pairs: list[Pair]) -> None:
    """Insert the smaller member of every pair before its larger partner."""
    if len(pairs) == 1:
        smaller = pairs[0][1]
        if smaller is not None:
            sorted_values.append(smaller)
        return
    for larger, smaller in jacobsthal_order(pairs):
        if smaller is None:
            continue
        try:
            bound = sorted_values.index(larger)
        except ValueError:
            sorted_values.append(smaller)
            continue
        low = bisect_left(sorted_values, smaller, 0, bound)
        if low == bound or sorted_values[low] > smaller:
            sorted_values.insert(low, smaller)
        else:
            sorted_values.insert(low + 1, smaller)


def _sort_level(pairs: list[Pair], sorted_values: MutableSequence) -> None:
    promoted = make_pairs(larger for larger, _ in pairs)
    if len(promoted) == 1:
        sorted_values.extend(sorted(v for v in promoted[0] if v is not None))
    else:
        _sort_level(promoted, sorted_values)
    _insert_smaller(sorted_values, pairs)


def _merge_insert(values: Iterable[int], container: _Seq) -> _Seq:
    """Sort ``values`` into the empty mutable sequence ``container`` and return it."""
    items = list(values)
    if len(items) <= 1:
        container.extend(items)
        return container
    _sort_level(make_pairs(items), container)
    return container


def merge_insert_sort(values: Iterable[int]) -> list[int]:
    """Sort ``values`` by merge-insertion.

    With exactly two values the larger one comes first.
    """
    return _merge_insert(values, [])