"""Tests for the sorted point container."""

from __future__ import annotations

import unittest

import numpy as np

from interpolating_map import DuplicateKeyError, PointStore


class PointStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self.store = PointStore([(5.0, 3.0), (1.0, 1.0), (3.0, 2.0)])

    def test_snapshot_is_sorted_by_x(self) -> None:
        self.assertEqual(self.store.snapshot(), [(1.0, 1.0), (3.0, 2.0), (5.0, 3.0)])

    def test_insert_or_update_overwrites_existing_key(self) -> None:
        self.store.insert_or_update(3.0, 9.0)
        self.assertEqual(self.store.size(), 3)
        self.assertEqual(self.store.exact_lookup(3.0), 9.0)

    def test_insert_keeps_order(self) -> None:
        self.store.insert_or_update(2.0, 7.0)
        self.assertEqual([x for x, _ in self.store.snapshot()], [1.0, 2.0, 3.0, 5.0])

    def test_delete_absent_key_is_noop(self) -> None:
        self.store.delete(42.0)
        self.assertEqual(self.store.size(), 3)

    def test_delete_present_key(self) -> None:
        self.store.delete(3.0)
        self.assertIsNone(self.store.exact_lookup(3.0))
        self.assertEqual(self.store.snapshot(), [(1.0, 1.0), (5.0, 3.0)])

    def test_exact_lookup_never_interpolates(self) -> None:
        self.assertEqual(self.store.exact_lookup(1), 1.0)
        self.assertIsNone(self.store.exact_lookup(2.0))

    def test_copy_is_independent(self) -> None:
        clone = self.store.copy()
        clone.insert_or_update(10.0, 10.0)
        clone.delete(1.0)
        self.assertEqual(self.store.size(), 3)
        self.assertEqual(self.store.exact_lookup(1.0), 1.0)
        self.assertIsNone(self.store.exact_lookup(10.0))

    def test_snapshot_mutation_does_not_leak(self) -> None:
        snapshot = self.store.snapshot()
        snapshot.append((99.0, 99.0))
        self.assertEqual(self.store.size(), 3)

    def test_from_unique_rejects_duplicates(self) -> None:
        with self.assertRaises(DuplicateKeyError) as ctx:
            PointStore.from_unique([(1.0, 1.0), (2.0, 2.0), (1.0, 5.0)])
        self.assertEqual(ctx.exception.x, 1.0)

    def test_as_arrays(self) -> None:
        x, y = self.store.as_arrays()
        np.testing.assert_array_equal(x, [1.0, 3.0, 5.0])
        np.testing.assert_array_equal(y, [1.0, 2.0, 3.0])

    def test_membership_and_len(self) -> None:
        self.assertIn(3.0, self.store)
        self.assertNotIn(4.0, self.store)
        self.assertNotIn("not a number", self.store)
        self.assertEqual(len(self.store), 3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
