import unittest
import sys
import os
import random
import heapq

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from chunksort.merge import MergeCandidate, merge


class TestKWayMerge(unittest.TestCase):

    def test_concrete_scenario(self):
        chunks = [[-3, 5, 5], [-3, 0, 9], [2, 7], [1, 4]]
        self.assertEqual(merge(chunks), [-3, -3, 0, 1, 2, 4, 5, 5, 7, 9])

    def test_empty_collection(self):
        self.assertEqual(merge([]), [])

    def test_empty_chunks_are_skipped(self):
        self.assertEqual(merge([[], [1, 3], [], [2]]), [1, 2, 3])
        self.assertEqual(merge([[], []]), [])

    def test_single_chunk(self):
        self.assertEqual(merge([[1, 2, 2, 5]]), [1, 2, 2, 5])

    def test_unequal_lengths(self):
        chunks = [[1], [0, 2, 4, 6, 8, 10], [3, 5]]
        self.assertEqual(merge(chunks), [0, 1, 2, 3, 4, 5, 6, 8, 10])

    def test_duplicates_preserve_multiplicity(self):
        chunks = [[1, 1, 2], [1, 2, 2], [2]]
        self.assertEqual(merge(chunks), [1, 1, 1, 2, 2, 2, 2])

    def test_all_identical(self):
        chunks = [[3, 3, 3], [3, 3, 3], [3, 3], [3, 3]]
        self.assertEqual(merge(chunks), [3] * 10)

    def test_negative_and_large_values(self):
        chunks = [[-2**40, 0], [-1, 2**63]]
        self.assertEqual(merge(chunks), [-2**40, -1, 0, 2**63])

    def test_random_against_sorted(self):
        rng = random.Random(1234)
        for _ in range(50):
            k = rng.randint(1, 12)
            chunks = [sorted(rng.randint(-50, 50) for _ in range(rng.randint(0, 20)))
                      for _ in range(k)]
            flat = [x for c in chunks for x in c]
            self.assertEqual(merge(chunks), sorted(flat))

    def test_chunks_not_mutated(self):
        chunks = [[1, 4], [2, 3]]
        merge(chunks)
        self.assertEqual(chunks, [[1, 4], [2, 3]])

    def test_accepts_tuples(self):
        self.assertEqual(merge(((1, 3), (2,))), [1, 2, 3])

    def test_does_not_sort(self):
        """Merge relies on the chunks' order; it must never call a sort."""
        class NoSort(list):
            def sort(self, *a, **kw):
                raise AssertionError("merge must not sort")

        chunks = [NoSort([1, 5]), NoSort([2, 3])]
        self.assertEqual(merge(chunks), [1, 2, 3, 5])

    def test_candidate_ordering(self):
        a = MergeCandidate(1, 2, 0)
        b = MergeCandidate(1, 0, 5)
        c = MergeCandidate(0, 9, 9)
        heap = [a, b, c]
        heapq.heapify(heap)
        self.assertEqual([heapq.heappop(heap) for _ in range(3)], [c, b, a])


if __name__ == '__main__':
    unittest.main()
