"""
Chunk Sort Algorithms
=====================
Per-chunk ascending sorts used by the parallel sorter.

Two algorithms are available:

- ``builtin``: ``list.sort`` (Timsort).
- ``merge_sort``: a plain top-down merge sort with O(n log n) worst-case
  complexity, kept as a self-contained alternative for benchmarking.

Both sort the chunk in place so the worker never replaces the list object
that the chunk collection holds.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from chunksort.errors import ConfigurationError


def merge_sort(seq: Sequence[int]) -> List[int]:
    """
    Return a new list containing the integers of *seq* in ascending order.

    The original *seq* is never mutated.
    """
    items: List[int] = list(seq)
    n = len(items)
    if n <= 1:
        return items

    mid = n // 2
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    return _merge_pair(left, right)


def _merge_pair(left: List[int], right: List[int]) -> List[int]:
    """Merge two sorted lists into one sorted list."""
    result: List[int] = []
    i = j = 0
    len_l = len(left)
    len_r = len(right)

    while i < len_l and j < len_r:
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    if i < len_l:
        result.extend(left[i:])
    if j < len_r:
        result.extend(right[j:])

    return result


def builtin_sort_in_place(chunk: List[int]) -> None:
    chunk.sort()


def merge_sort_in_place(chunk: List[int]) -> None:
    chunk[:] = merge_sort(chunk)


SORTERS: Dict[str, Callable[[List[int]], None]] = {
    "builtin": builtin_sort_in_place,
    "merge_sort": merge_sort_in_place,
}


def get_sorter(name: str) -> Callable[[List[int]], None]:
    """Look up an in-place chunk sort by name."""
    try:
        return SORTERS[name]
    except KeyError:
        known = ", ".join(sorted(SORTERS))
        raise ConfigurationError(f"unknown sort algorithm {name!r} (expected one of: {known})") from None
