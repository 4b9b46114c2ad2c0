"""Linear and binary search over sequences."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(items: Iterable[Any], value: Any) -> int:
    """Return the index of the first item equal to ``value``, or -1."""
    for index, item in enumerate(items):
        if item == value:
            return index
    return -1


def binary_search(items: Sequence[Any], value: Any) -> int:
    """Return an index of ``value`` in the sorted ``items``, or -1.

    The range is halved at its midpoint until two or fewer items remain,
    which are then compared in order.
    """
    low, high = 0, len(items)
    while True:
        count = high - low
        if count <= 2:
            for index in range(low, high):
                if items[index] == value:
                    return index
            return -1
        mid = low + count // 2
        if items[mid] == value:
            return mid
        if value < items[mid]:
            high = mid
        else:
            low = mid + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the results of the two searches on sample data.

    Integers given as arguments are looked up in both samples instead of
    the default queries.
    """
    if argv is None:
        argv = sys.argv[1:]
    queries = [int(arg) for arg in argv]
    linear_queries = queries or [5, 9]
    binary_queries = queries or [5, 6]

    chain = [3, 5, 7]
    for query in linear_queries:
        print(f"Index of {query}: {linear_search(chain, query)}")

    ordered = [1, 3, 5, 7, 9, 11]
    for query in binary_queries:
        print(f"Index of {query}: {binary_search(ordered, query)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())