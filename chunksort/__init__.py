"""
chunksort
=========
Concurrent chunk sorting: partition, sort each chunk in its own thread,
then k-way merge the sorted chunks.
"""

from chunksort.partitioner import chunk_count, make_chunks
from chunksort.parallel_sorter import ChunkSortMetrics, sort_chunks_concurrently
from chunksort.merge import merge
from chunksort.pipeline import PipelineResult, SortPipeline, partition_and_sort

__all__ = [
    "ChunkSortMetrics",
    "PipelineResult",
    "SortPipeline",
    "chunk_count",
    "make_chunks",
    "merge",
    "partition_and_sort",
    "sort_chunks_concurrently",
]

__version__ = "0.1.0"
