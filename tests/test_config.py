import unittest
import sys
import os
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from chunksort.config import (
    SortSettings,
    debug_enabled,
    resolve_algorithm,
    resolve_min_input_count,
    resolve_output_suffix,
)
from chunksort.errors import InsufficientInputError
from chunksort.sources import require_min_count

CLEAN_ENV = {k: v for k, v in os.environ.items() if not k.startswith("CHUNKSORT_")}


class TestSettingResolution(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, CLEAN_ENV, clear=True):
            settings = SortSettings.from_env()
            self.assertFalse(debug_enabled())
        self.assertEqual(settings, SortSettings())
        self.assertEqual(settings.min_input_count, 10)
        self.assertEqual(settings.algorithm, "builtin")
        self.assertEqual(settings.output_suffix, "_sorted")

    def test_env_overrides(self):
        env = dict(CLEAN_ENV, CHUNKSORT_MIN_INPUT="20",
                   CHUNKSORT_ALGORITHM="Merge_Sort", CHUNKSORT_OUTPUT_SUFFIX="_out",
                   CHUNKSORT_DEBUG="yes")
        with mock.patch.dict(os.environ, env, clear=True):
            settings = SortSettings.from_env()
            self.assertTrue(debug_enabled())
        self.assertEqual(settings.min_input_count, 20)
        self.assertEqual(settings.algorithm, "merge_sort")
        self.assertEqual(settings.output_suffix, "_out")

    def test_explicit_value_beats_env(self):
        env = dict(CLEAN_ENV, CHUNKSORT_MIN_INPUT="30")
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(resolve_min_input_count(12), 12)

    def test_invalid_values_fall_back(self):
        env = dict(CLEAN_ENV, CHUNKSORT_MIN_INPUT="many", CHUNKSORT_ALGORITHM="bogosort")
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(resolve_min_input_count(), 10)
            self.assertEqual(resolve_algorithm(), "builtin")
            self.assertEqual(resolve_output_suffix(), "_sorted")


class TestMinimumInputFloor(unittest.TestCase):
    """The minimum input count can be raised but never dropped below 10."""

    def test_env_cannot_lower_minimum(self):
        env = dict(CLEAN_ENV, CHUNKSORT_MIN_INPUT="3")
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(resolve_min_input_count(), 10)
            self.assertEqual(SortSettings.from_env().min_input_count, 10)
        self.assertEqual(resolve_min_input_count(0), 10)

    def test_settings_cannot_lower_minimum(self):
        self.assertEqual(SortSettings(min_input_count=2).min_input_count, 10)

    def test_require_min_count_keeps_floor(self):
        with self.assertRaises(InsufficientInputError) as ctx:
            require_min_count(list(range(5)), minimum=3)
        self.assertEqual(ctx.exception.minimum, 10)


if __name__ == '__main__':
    unittest.main()
