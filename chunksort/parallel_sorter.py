"""
Parallel Sorter
===============
Sorts every chunk of a chunk collection in its own thread.

Provides:
- One worker thread per chunk, all started before any is joined
- A hard join barrier: the call returns only after every worker finished
- Per-chunk metrics streaming via queue.Queue
- Worker errors captured and re-raised after the barrier
"""

import queue
import threading
import time
from dataclasses import dataclass
from typing import List, Optional

from chunksort.config import DEFAULT_ALGORITHM, debug_enabled
from chunksort.errors import ChunkSortError
from chunksort.sorting import get_sorter

DEBUG_MODE = debug_enabled()


@dataclass
class ChunkSortMetrics:
    """Snapshot of one finished chunk sort."""
    chunk_index: int      # position of the chunk in the collection
    size: int             # number of integers in the chunk
    elapsed_ms: float     # wall-clock time spent sorting (ms)
    thread_name: str      # worker thread that owned the chunk


class ChunkSortWorker:
    """
    Sorts a single chunk in a background thread.

    The worker is the only writer of its chunk while running.  Nothing
    else about the collection is touched.

    Usage:
        worker = ChunkSortWorker(chunks, 0, sorter)
        worker.start()
        worker.join()
        worker.get_error()
    """

    def __init__(
        self,
        chunks: List[List[int]],
        index: int,
        sorter,
        metrics_queue: Optional[queue.Queue] = None,
    ):
        self.chunks = chunks
        self.index = index
        self.sorter = sorter
        self.metrics_queue = metrics_queue

        self.done_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[BaseException] = None
        self.metrics: Optional[ChunkSortMetrics] = None

    # ── Public API ─────────────────────────────────────────────

    def start(self):
        """Launch the sort in its own thread."""
        self.done_event.clear()
        self._error = None
        self._thread = threading.Thread(
            target=self._run,
            name=f"chunk-sort-{self.index}",
            daemon=True,
        )
        self._thread.start()

    def join(self):
        if self._thread is not None:
            self._thread.join()

    def is_done(self) -> bool:
        return self.done_event.is_set()

    def get_error(self) -> Optional[BaseException]:
        return self._error

    # ── Internal ───────────────────────────────────────────────

    def _run(self):
        """Thread target: sort the owned chunk and record timing."""
        chunk = self.chunks[self.index]
        start_time = time.perf_counter()
        try:
            self.sorter(chunk)
            elapsed_ms = (time.perf_counter() - start_time) * 1000.0
            self.metrics = ChunkSortMetrics(
                chunk_index=self.index,
                size=len(chunk),
                elapsed_ms=elapsed_ms,
                thread_name=threading.current_thread().name,
            )
            if self.metrics_queue is not None:
                self.metrics_queue.put(self.metrics)
        except Exception as e:
            self._error = e
        finally:
            self.done_event.set()


def sort_chunks_concurrently(
    chunks: List[List[int]],
    algorithm: str = DEFAULT_ALGORITHM,
    metrics_queue: Optional[queue.Queue] = None,
) -> List[ChunkSortMetrics]:
    """
    Sort every chunk of *chunks* ascending, in place, one thread per chunk.

    Returns the per-chunk metrics in chunk order once all workers have
    joined.  Raises ``ConfigurationError`` for an unknown *algorithm* and
    ``ChunkSortError`` if any worker failed.
    """
    sorter = get_sorter(algorithm)
    workers = [ChunkSortWorker(chunks, i, sorter, metrics_queue) for i in range(len(chunks))]

    started = 0
    try:
        for worker in workers:
            worker.start()
            started += 1
    except RuntimeError as e:
        raise ChunkSortError(f"could not start worker for chunk {started}") from e
    finally:
        # Barrier: no caller may see the collection before every started worker is done.
        for worker in workers[:started]:
            worker.join()

    failed = [w for w in workers if w.get_error() is not None]
    if failed:
        first = failed[0]
        raise ChunkSortError(
            f"sorting chunk {first.index} failed: {first.get_error()}"
        ) from first.get_error()

    metrics = [w.metrics for w in workers]
    if DEBUG_MODE:
        for m in metrics:
            print(f"[SORT DEBUG] chunk {m.chunk_index}: size={m.size} "
                  f"elapsed={m.elapsed_ms:.3f}ms thread={m.thread_name}")
    return metrics
