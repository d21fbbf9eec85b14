"""
Sort settings and their environment overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

MIN_CHUNKS = 4
DEFAULT_MIN_INPUT_COUNT = 10
DEFAULT_RANDOM_LOW = -1000
DEFAULT_RANDOM_HIGH = 1000
DEFAULT_ALGORITHM = "builtin"
DEFAULT_OUTPUT_SUFFIX = "_sorted"

ALGORITHMS = ("builtin", "merge_sort")

ENV_MIN_INPUT = "CHUNKSORT_MIN_INPUT"
ENV_ALGORITHM = "CHUNKSORT_ALGORITHM"
ENV_OUTPUT_SUFFIX = "CHUNKSORT_OUTPUT_SUFFIX"
ENV_DEBUG = "CHUNKSORT_DEBUG"


def _resolve(raw: Any, env_name: str, default: Any, convert: Callable[[Any], Any]) -> Any:
    """
    Resolve a setting with override support.

    Priority:
    1) explicit value
    2) env <env_name>
    3) default
    """
    if raw is None:
        raw = os.getenv(env_name)
    if raw is None:
        return default
    try:
        return convert(raw)
    except (TypeError, ValueError):
        return default


def _min_input_count(raw: Any) -> int:
    # May be raised above the default, never lowered below it.
    return max(int(raw), DEFAULT_MIN_INPUT_COUNT)


def _algorithm_name(raw: Any) -> str:
    name = str(raw).strip().lower()
    if name not in ALGORITHMS:
        raise ValueError(raw)
    return name


def resolve_min_input_count(raw: Any = None) -> int:
    return _resolve(raw, ENV_MIN_INPUT, DEFAULT_MIN_INPUT_COUNT, _min_input_count)


def resolve_algorithm(raw: Any = None) -> str:
    return _resolve(raw, ENV_ALGORITHM, DEFAULT_ALGORITHM, _algorithm_name)


def resolve_output_suffix(raw: Optional[str] = None) -> str:
    return _resolve(raw, ENV_OUTPUT_SUFFIX, DEFAULT_OUTPUT_SUFFIX, str)


def debug_enabled() -> bool:
    """True when CHUNKSORT_DEBUG is set to a truthy value."""
    return os.getenv(ENV_DEBUG, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SortSettings:
    """Everything the pipeline and the input adapters need to know."""
    min_input_count: int = DEFAULT_MIN_INPUT_COUNT
    random_low: int = DEFAULT_RANDOM_LOW
    random_high: int = DEFAULT_RANDOM_HIGH
    algorithm: str = DEFAULT_ALGORITHM
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX

    def __post_init__(self):
        self.min_input_count = max(self.min_input_count, DEFAULT_MIN_INPUT_COUNT)

    @classmethod
    def from_env(
        cls,
        min_input_count: Any = None,
        algorithm: Any = None,
        output_suffix: Optional[str] = None,
    ) -> "SortSettings":
        """Build settings from explicit values, falling back to CHUNKSORT_* env vars."""
        return cls(
            min_input_count=resolve_min_input_count(min_input_count),
            algorithm=resolve_algorithm(algorithm),
            output_suffix=resolve_output_suffix(output_suffix),
        )
