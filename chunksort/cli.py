"""
Command Line
============
Modes (exactly one):
  -r N            generate N random integers (N >= 10)
  -i input.txt    read integers from file (one per line, empty lines ignored)
  -d incoming     sort all .txt files in directory, write to sibling output directory
"""

import argparse
import sys
from typing import List, Optional

import chunksort.parallel_sorter as sorter_mod
from chunksort.config import ALGORITHMS, SortSettings, debug_enabled
from chunksort.errors import ChunkSortError
from chunksort.pipeline import SortPipeline
from chunksort.reporting import ConsoleReporter, PipelineReporter
from chunksort.sources import (
    generate_random,
    process_directory,
    read_ints_from_file,
    require_min_count,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunksort",
        description="Concurrent chunk sorting: partition, sort chunks in parallel, k-way merge.",
    )
    parser.add_argument("-r", dest="random_n", type=int, default=None, metavar="N",
                        help="generate N random integers (N >= 10)")
    parser.add_argument("-i", dest="input_file", type=str, default=None, metavar="FILE",
                        help="input file with one integer per line")
    parser.add_argument("-d", dest="input_dir", type=str, default=None, metavar="DIR",
                        help="directory containing .txt files to sort")
    parser.add_argument("--seed", type=int, default=None, help="seed for -r (reproducible runs)")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default=None,
                        help="per-chunk sort algorithm (default: builtin)")
    parser.add_argument("--suffix", type=str, default=None,
                        help="output directory suffix for -d (default: _sorted)")
    parser.add_argument("--timings", action="store_true", help="print stage timings")
    parser.add_argument("--debug", action="store_true", help="print per-worker debug lines")
    return parser


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def run_single(nums: List[int], settings: SortSettings, show_timings: bool) -> int:
    require_min_count(nums, settings.min_input_count)
    pipeline = SortPipeline(ConsoleReporter(show_timings=show_timings), settings)
    pipeline.run(nums)
    return 0


def run_directory(input_dir: str, settings: SortSettings) -> int:
    pipeline = SortPipeline(PipelineReporter(), settings)

    def on_file(name, error):
        if error is None:
            print(f"Sorted {name}")
        else:
            print(f"Error: {name}: {error}", file=sys.stderr)

    report = process_directory(
        input_dir,
        pipeline.sort,
        suffix=settings.output_suffix,
        min_count=settings.min_input_count,
        on_file=on_file,
    )
    print(f"Output written to {report.output_dir} "
          f"({len(report.written)} sorted, {len(report.failed)} failed)")
    return 0 if report.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    modes_used = sum(x is not None for x in (args.random_n, args.input_file, args.input_dir))
    if modes_used != 1:
        return _fail("Use exactly one mode: -r, -i, or -d")

    settings = SortSettings.from_env(
        algorithm=args.algorithm,
        output_suffix=args.suffix,
    )
    sorter_mod.DEBUG_MODE = args.debug or debug_enabled()

    try:
        if args.random_n is not None:
            if args.random_n < settings.min_input_count:
                return _fail(f"N must be >= {settings.min_input_count}")
            nums = generate_random(args.random_n, settings.random_low,
                                   settings.random_high, seed=args.seed)
            return run_single(nums, settings, args.timings)

        if args.input_file is not None:
            nums = read_ints_from_file(args.input_file)
            return run_single(nums, settings, args.timings)

        return run_directory(args.input_dir, settings)
    except ChunkSortError as e:
        return _fail(str(e))


if __name__ == "__main__":
    sys.exit(main())
