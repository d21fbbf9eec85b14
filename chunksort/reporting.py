"""
Console Reporting
=================
Reporters receive the pipeline's intermediate state for display.

``PipelineReporter`` ignores everything; ``ConsoleReporter`` prints the
same sections the command-line tool always showed.
"""

import sys
from typing import List, Sequence, TextIO


class PipelineReporter:
    """Reporter hook with no output.  Subclass and override what you need."""

    def original(self, nums: Sequence[int]):
        pass

    def chunks_before(self, chunks: List[List[int]]):
        pass

    def chunks_after(self, chunks: List[List[int]]):
        pass

    def merged(self, nums: List[int]):
        pass

    def timings(self, result):
        pass


class ConsoleReporter(PipelineReporter):
    """
    Prints the original numbers, the chunks before and after sorting, and
    the final merged result.  With ``show_timings`` a stage timing summary
    follows.
    """

    def __init__(self, stream: TextIO = None, show_timings: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.show_timings = show_timings

    def _print(self, *args):
        print(*args, file=self.stream)

    def original(self, nums):
        self._print("Original numbers:")
        self._print(list(nums))

    def chunks_before(self, chunks):
        self._print("\nChunks before sorting:")
        self._print_chunks(chunks)

    def chunks_after(self, chunks):
        self._print("\nChunks after sorting:")
        self._print_chunks(chunks)

    def merged(self, nums):
        self._print("\nFinal merged sorted result:")
        self._print(nums)

    def timings(self, result):
        if not self.show_timings:
            return
        self._print("\nTimings:")
        self._print(f"{'Stage':<10} | {'Time (ms)':>10}")
        self._print("-" * 23)
        self._print(f"{'partition':<10} | {result.partition_ms:>10.3f}")
        self._print(f"{'sort':<10} | {result.sort_ms:>10.3f}")
        self._print(f"{'merge':<10} | {result.merge_ms:>10.3f}")
        self._print(f"{'total':<10} | {result.total_ms:>10.3f}")

    def _print_chunks(self, chunks):
        for i, chunk in enumerate(chunks):
            self._print(f"Chunk {i}: {chunk}")
