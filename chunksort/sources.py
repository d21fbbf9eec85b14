"""
Input Sources & Output Sinks
============================
Everything that feeds integers into the pipeline or writes results out:

- random generation
- reading one integer per line from a text file
- batch sorting every ``.txt`` file of a directory into a sibling
  output directory
"""

from __future__ import annotations

import os
import random
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from chunksort.config import (
    DEFAULT_MIN_INPUT_COUNT,
    DEFAULT_OUTPUT_SUFFIX,
    DEFAULT_RANDOM_HIGH,
    DEFAULT_RANDOM_LOW,
)
from chunksort.errors import (
    ChunkSortError,
    ConfigurationError,
    InputIOError,
    InsufficientInputError,
    MalformedIntegerError,
)

INPUT_EXTENSION = ".txt"
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+\Z")


def generate_random(
    n: int,
    low: int = DEFAULT_RANDOM_LOW,
    high: int = DEFAULT_RANDOM_HIGH,
    seed: Optional[int] = None,
) -> List[int]:
    """Return *n* random integers from the inclusive range [low, high]."""
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(n)]


def parse_ints(lines: Iterable[str], source: str = "<input>") -> List[int]:
    """
    Parse one integer per line.  Blank lines are skipped; line numbers in
    errors count them anyway.  Only an optional sign followed by ASCII
    digits is accepted.
    """
    nums: List[int] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        if not INTEGER_PATTERN.match(text):
            raise MalformedIntegerError(line_number, text, source=source)
        nums.append(int(text))
    return nums


def read_ints_from_file(path: str) -> List[int]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_ints(f, source=path)
    except OSError as e:
        raise InputIOError(f"cannot read {path}: {e.strerror or e}", source=path) from e
    except UnicodeDecodeError as e:
        raise InputIOError(f"cannot decode {path}: {e.reason}", source=path) from e


def require_min_count(
    nums: Sequence[int],
    minimum: int = DEFAULT_MIN_INPUT_COUNT,
    source: Optional[str] = None,
) -> Sequence[int]:
    """Raise ``InsufficientInputError`` below *minimum*; *minimum* is never taken below 10."""
    minimum = max(minimum, DEFAULT_MIN_INPUT_COUNT)
    if len(nums) < minimum:
        raise InsufficientInputError(len(nums), minimum, source=source)
    return nums


def write_ints(path: str, nums: Iterable[int]) -> None:
    """Write one integer per line.  The file only appears once fully written."""
    tmp_path = path + ".part"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            for v in nums:
                f.write(f"{v}\n")
        os.replace(tmp_path, path)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise InputIOError(f"cannot write {path}: {e.strerror or e}", source=path) from e


def output_dir_for(input_dir: str, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> str:
    """Sibling directory of *input_dir* named ``<basename><suffix>``."""
    normalized = os.path.normpath(os.path.abspath(input_dir))
    parent = os.path.dirname(normalized)
    base = os.path.basename(normalized)
    return os.path.join(parent, f"{base}{suffix}")


def list_input_files(input_dir: str) -> List[str]:
    """Names of the regular ``.txt`` files directly inside *input_dir*, sorted."""
    names = []
    with os.scandir(input_dir) as entries:
        for entry in entries:
            if entry.is_file() and os.path.splitext(entry.name)[1] == INPUT_EXTENSION:
                names.append(entry.name)
    names.sort()
    return names


@dataclass
class BatchReport:
    """Outcome of one directory run."""
    input_dir: str
    output_dir: str
    written: List[str] = field(default_factory=list)
    failed: List[Tuple[str, ChunkSortError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def process_directory(
    input_dir: str,
    sort_fn: Callable[[List[int]], List[int]],
    suffix: str = DEFAULT_OUTPUT_SUFFIX,
    min_count: int = DEFAULT_MIN_INPUT_COUNT,
    on_file: Optional[Callable[[str, Optional[ChunkSortError]], None]] = None,
) -> BatchReport:
    """
    Sort every ``.txt`` file of *input_dir* with *sort_fn* and write each
    result under the same name into the sibling output directory.

    A file that cannot be read, parsed, or that holds too few numbers is
    recorded in the report and skipped; the remaining files are still
    processed.  *on_file* is called after each file with the error (or
    ``None`` on success).
    """
    if not os.path.isdir(input_dir):
        raise InputIOError("directory not found", source=input_dir)

    out_dir = output_dir_for(input_dir, suffix)
    if out_dir == os.path.normpath(os.path.abspath(input_dir)):
        raise ConfigurationError("output suffix must not be empty", source=input_dir)
    try:
        os.makedirs(out_dir, exist_ok=True)
        names = list_input_files(input_dir)
    except OSError as e:
        raise InputIOError(f"{e.strerror or e}", source=input_dir) from e

    report = BatchReport(input_dir=input_dir, output_dir=out_dir)
    for name in names:
        in_path = os.path.join(input_dir, name)
        error: Optional[ChunkSortError] = None
        try:
            nums = read_ints_from_file(in_path)
            require_min_count(nums, min_count, source=name)
            out_path = os.path.join(out_dir, name)
            write_ints(out_path, sort_fn(nums))
            report.written.append(out_path)
        except ChunkSortError as e:
            error = e
            report.failed.append((name, e))
        if on_file is not None:
            on_file(name, error)
    return report
