"""
Sort Pipeline
=============
Sequences the three stages: partition -> concurrent sort -> k-way merge.

The pipeline does no sorting work of its own.  It hands the intermediate
state to a reporter (console output, or nothing) and measures how long
each stage took.
"""

import copy
import queue
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from chunksort.config import DEFAULT_ALGORITHM, SortSettings
from chunksort.merge import merge
from chunksort.parallel_sorter import ChunkSortMetrics, sort_chunks_concurrently
from chunksort.partitioner import make_chunks
from chunksort.reporting import PipelineReporter


def partition_and_sort(
    nums: Sequence[int],
    algorithm: str = DEFAULT_ALGORITHM,
) -> List[List[int]]:
    """Partition *nums* and sort every chunk concurrently; returns the sorted chunks."""
    chunks = make_chunks(nums)
    sort_chunks_concurrently(chunks, algorithm)
    return chunks


@dataclass
class PipelineResult:
    """Everything one pipeline run produced."""
    merged: List[int]
    chunks: List[List[int]]
    partition_ms: float = 0.0
    sort_ms: float = 0.0
    merge_ms: float = 0.0
    metrics: List[ChunkSortMetrics] = field(default_factory=list)

    @property
    def total_ms(self) -> float:
        return self.partition_ms + self.sort_ms + self.merge_ms


class SortPipeline:
    """
    Runs partition, parallel sort and merge on one input sequence.

    The reporter sees the original numbers, a snapshot of the chunks before
    sorting, the chunks after the sort barrier, and the merged result.
    Per-chunk metrics are also pushed to *metrics_queue* when one is given.
    """

    def __init__(self, reporter: Optional[PipelineReporter] = None,
                 settings: Optional[SortSettings] = None,
                 metrics_queue: Optional[queue.Queue] = None):
        self.reporter = reporter or PipelineReporter()
        self.settings = settings or SortSettings()
        self.metrics_queue = metrics_queue

    def run(self, nums: Sequence[int]) -> PipelineResult:
        self.reporter.original(nums)

        start = time.perf_counter()
        chunks = make_chunks(nums)
        partition_ms = (time.perf_counter() - start) * 1000.0
        # Workers sort in place, so the "before" view must be a copy.
        self.reporter.chunks_before(copy.deepcopy(chunks))

        start = time.perf_counter()
        metrics = sort_chunks_concurrently(chunks, self.settings.algorithm, self.metrics_queue)
        sort_ms = (time.perf_counter() - start) * 1000.0
        self.reporter.chunks_after(chunks)

        start = time.perf_counter()
        merged = merge(chunks)
        merge_ms = (time.perf_counter() - start) * 1000.0
        self.reporter.merged(merged)

        result = PipelineResult(
            merged=merged,
            chunks=chunks,
            partition_ms=partition_ms,
            sort_ms=sort_ms,
            merge_ms=merge_ms,
            metrics=metrics,
        )
        self.reporter.timings(result)
        return result

    def sort(self, nums: Sequence[int]) -> List[int]:
        """Convenience: run the pipeline and return only the merged list."""
        return self.run(nums).merged
