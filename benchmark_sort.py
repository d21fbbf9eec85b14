import sys
import os
import time
import csv
import argparse
from typing import Dict, Any, List, Optional

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from chunksort.config import ALGORITHMS, SortSettings
from chunksort.partitioner import chunk_count
from chunksort.pipeline import SortPipeline
from chunksort.sources import generate_random

DEFAULT_SIZES = [10, 100, 1_000, 10_000, 100_000]


def run_single_size(n: int, repeats: int = 3, seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Times every chunk sort algorithm and the built-in sorted() on the same
    random input of length n.  Best-of-`repeats` wall clock times, in ms.
    """
    nums = generate_random(n, seed=seed)
    expected = sorted(nums)

    result = {
        "n": n,
        "chunks": chunk_count(n),
        "sorted_ms": 0.0,
    }

    # 1. Baseline
    best = float("inf")
    for _ in range(repeats):
        start = time.perf_counter()
        sorted(nums)
        best = min(best, time.perf_counter() - start)
    result["sorted_ms"] = best * 1000.0

    # 2. Chunked pipeline, once per algorithm
    for algorithm in ALGORITHMS:
        pipeline = SortPipeline(settings=SortSettings(algorithm=algorithm))
        best_run = None
        for _ in range(repeats):
            run = pipeline.run(nums)
            if run.merged != expected:
                raise AssertionError(f"{algorithm} produced an unsorted result for n={n}")
            if best_run is None or run.total_ms < best_run.total_ms:
                best_run = run
        result[f"{algorithm}_partition_ms"] = best_run.partition_ms
        result[f"{algorithm}_sort_ms"] = best_run.sort_ms
        result[f"{algorithm}_merge_ms"] = best_run.merge_ms
        result[f"{algorithm}_total_ms"] = best_run.total_ms

    return result


def run_benchmark(sizes: List[int], repeats: int = 3, seed: Optional[int] = None) -> List[Dict[str, Any]]:
    results = []
    for i, n in enumerate(sizes):
        print(f"Running size {i+1}/{len(sizes)} (n={n})...", end="\r")
        results.append(run_single_size(n, repeats, seed))
    print()
    return results


def write_csv(results: List[Dict[str, Any]], path: str):
    keys = results[0].keys()
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)


def print_summary(results: List[Dict[str, Any]]):
    print("\nSummary (best wall clock, ms):")
    print(f"{'N':>8} | {'Chunks':>6} | {'sorted()':>10} | {'builtin':>10} | {'merge_sort':>10}")
    print("-" * 56)
    for r in results:
        print(f"{r['n']:>8} | {r['chunks']:>6} | {r['sorted_ms']:>10.3f} | "
              f"{r['builtin_total_ms']:>10.3f} | {r['merge_sort_total_ms']:>10.3f}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark the concurrent chunk sort")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Input sizes")
    parser.add_argument("--repeats", type=int, default=3, help="Runs per size (best is kept)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args()

    print(f"Starting Benchmark: sizes={args.sizes}, repeats={args.repeats}")
    results = run_benchmark(args.sizes, args.repeats, args.seed)

    write_csv(results, args.output)
    print(f"Results saved to {args.output}")

    print_summary(results)


if __name__ == "__main__":
    main()
