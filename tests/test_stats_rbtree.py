"""Tests for the stats experiment helpers."""

import math
import random
import unittest

import numpy as np

from rb_trees.tree_stats import rbtree_stats_
from stats.stats_rbtree import (
    create_rbtree_from_keys,
    height_bound,
    random_keys,
    random_rbtree_of_size,
    repeated_experiment,
)


class TestStatsHelpers(unittest.TestCase):

    def setUp(self):
        random.seed(42)
        np.random.seed(42)

    def test_random_keys_distinct(self):
        keys = random_keys(500)
        self.assertEqual(len(keys), 500)
        self.assertEqual(len(set(keys)), 500)
        self.assertTrue(all(len(k) == 8 and k.isalpha() for k in keys))

    def test_random_keys_space_too_small(self):
        with self.assertRaises(ValueError):
            random_keys(26, key_len=1)

    def test_create_from_keys(self):
        tree = create_rbtree_from_keys(["b", "a", "b"])
        self.assertEqual(list(tree), ["a", "b", "b"])

    def test_random_tree_size(self):
        tree = random_rbtree_of_size(200)
        self.assertEqual(tree.distinct_count(), 200)
        self.assertLessEqual(tree.height(), height_bound(200))

    def test_random_tree_with_deletes(self):
        tree = random_rbtree_of_size(200, delete_ratio=0.25)
        self.assertEqual(tree.distinct_count(), 150)
        self.assertTrue(rbtree_stats_(tree).is_search_tree)

    def test_bad_delete_ratio(self):
        with self.assertRaises(ValueError):
            random_rbtree_of_size(10, delete_ratio=1.5)

    def test_height_bound(self):
        self.assertAlmostEqual(height_bound(50), 2 * math.log2(51))
        self.assertEqual(height_bound(0), 0)

    def test_repeated_experiment_rows(self):
        rows = repeated_experiment(size=64, repetitions=3)
        self.assertEqual(rows["Node count"], (64, 0))
        self.assertEqual(rows["No red-red"][0], 1.0)
        self.assertEqual(rows["Black balanced"][0], 1.0)
        self.assertLessEqual(rows["Height / bound"][0], 1.0)

    def test_repeated_experiment_with_deletes(self):
        rows = repeated_experiment(size=64, repetitions=2, delete_ratio=0.5)
        self.assertEqual(rows["Node count"][0], 32)


if __name__ == "__main__":
    unittest.main()
