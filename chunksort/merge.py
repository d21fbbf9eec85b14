"""
K-Way Merge
===========
Combines already-sorted chunks into one sorted list without re-sorting.

A min-heap holds at most one frontier candidate per non-empty chunk: the
smallest element of that chunk not yet emitted.  Each step pops the global
minimum, appends it to the output and pushes the next element of the same
chunk.  Cost is O(N log k) for N integers spread over k chunks.

Equal values are popped in (chunk index, position) order.
"""

from __future__ import annotations

import heapq
from typing import List, NamedTuple, Sequence


class MergeCandidate(NamedTuple):
    """Heap entry: compared by value first, then chunk, then position."""
    value: int
    chunk_index: int
    position: int


def merge(chunks: Sequence[Sequence[int]]) -> List[int]:
    """
    Merge ascending-sorted *chunks* into a single ascending list.

    Every element of every chunk appears exactly once in the result.
    Empty chunks are skipped; an empty collection merges to ``[]``.
    The chunks themselves are only read.
    """
    heap: List[MergeCandidate] = []
    for ci, chunk in enumerate(chunks):
        if len(chunk) > 0:
            heap.append(MergeCandidate(chunk[0], ci, 0))
    heapq.heapify(heap)

    result: List[int] = []
    while heap:
        value, ci, pi = heap[0]
        result.append(value)
        chunk = chunks[ci]
        if pi + 1 < len(chunk):
            heapq.heapreplace(heap, MergeCandidate(chunk[pi + 1], ci, pi + 1))
        else:
            heapq.heappop(heap)

    return result
