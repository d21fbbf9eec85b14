"""
Chunk Partitioner
=================
Splits an input sequence into near-equal contiguous chunks.

The number of chunks is ``ceil(sqrt(n))``, but never fewer than
``MIN_CHUNKS`` (4) so that even small inputs are sorted by several
workers.  The first ``n % k`` chunks receive one extra element.
Chunks that would be empty (only possible when ``n < k``) are left out.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from chunksort.config import MIN_CHUNKS


def chunk_count(n: int) -> int:
    """Target number of chunks for an input of length *n*."""
    k = math.isqrt(n)
    if k * k < n:
        k += 1
    return max(k, MIN_CHUNKS)


def chunk_sizes(n: int) -> List[int]:
    """
    Sizes of the non-empty chunks ``make_chunks`` will produce, in order.
    """
    k = chunk_count(n)
    base, rem = divmod(n, k)
    sizes = []
    for i in range(k):
        size = base + 1 if i < rem else base
        if size == 0:
            continue
        sizes.append(size)
    return sizes


def make_chunks(nums: Sequence[int]) -> List[List[int]]:
    """
    Return the partition of *nums* as a list of fresh lists.

    Concatenating the chunks in order gives back *nums* exactly.  The
    input is never mutated; each chunk is an independent copy so that the
    sort workers own their memory.
    """
    chunks: List[List[int]] = []
    idx = 0
    for size in chunk_sizes(len(nums)):
        chunks.append(list(nums[idx:idx + size]))
        idx += size
    return chunks
