"""
ASV benchmarks for RBTreeBase operations.

Covers full tree construction via insert(), search() with different hit
ratios, delete() of a share of the keys and the three traversals.
"""

import gc

from benchmarks.benchmark_utils import BaseBenchmark, BenchmarkUtils


class RBTreeInsertBenchmarks(BaseBenchmark):
    """Benchmarks for tree construction via sequential inserts."""

    params = [
        [100, 1000, 10000],                           # tree size
        ['uniform', 'sequential', 'duplicates'],      # data distributions
    ]
    param_names = ['size', 'distribution']

    min_run_count = 5

    def setup(self, size, distribution):
        super().setup(size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size,
            distribution=distribution,
        )
        gc.collect()
        gc.disable()  # Enabled in teardown

    def time_insert_batch_construction(self, size, distribution):
        """Benchmark full tree construction by inserting all keys."""
        BenchmarkUtils.build_tree(self.keys)


class RBTreeSearchBenchmarks(BaseBenchmark):
    """Benchmarks for RBTreeBase.search()."""

    params = [
        [100, 1000, 10000],
        [0.0, 0.5, 1.0],    # hit ratios
    ]
    param_names = ['size', 'hit_ratio']

    min_run_count = 5

    # Class-level cache for built trees and their keys
    _tree_cache = {}

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=42 + size)
            self._tree_cache[size] = (BenchmarkUtils.build_tree(keys), keys)
        self.tree, self.insert_keys = self._tree_cache[size]

        self.lookup_keys = BenchmarkUtils.create_lookup_keys(
            insert_keys=self.insert_keys,
            hit_ratio=hit_ratio,
            seed=1042 + size,
        )
        gc.collect()
        gc.disable()

    def time_search(self, size, hit_ratio):
        search = self.tree.search
        for key in self.lookup_keys:
            search(key)


class RBTreeDeleteBenchmarks(BaseBenchmark):
    """Benchmarks for deleting half of the stored keys."""

    params = [[100, 1000, 10000]]
    param_names = ['size']

    min_run_count = 5
    # delete consumes the tree, so each sample needs a fresh setup
    number = 1

    def setup(self, size):
        super().setup(size)
        keys = BenchmarkUtils.generate_deterministic_keys(size=size, seed=42 + size)
        self.tree = BenchmarkUtils.build_tree(keys)
        self.delete_keys = keys[::2]
        gc.collect()
        gc.disable()

    def time_delete_half(self, size):
        tree = self.tree
        for key in self.delete_keys:
            tree = tree.delete(key)
        self.tree = tree


class RBTreeTraversalBenchmarks(BaseBenchmark):
    """Benchmarks for visitor and iterator traversals."""

    params = [[1000, 10000], ['inorder', 'preorder', 'postorder']]
    param_names = ['size', 'order']

    min_run_count = 5

    def setup(self, size, order):
        super().setup(size, order)
        keys = BenchmarkUtils.generate_deterministic_keys(
            size=size, seed=42 + size, distribution='duplicates'
        )
        self.tree = BenchmarkUtils.build_tree(keys)
        gc.collect()
        gc.disable()

    def time_visitor_traversal(self, size, order):
        sink = []
        getattr(self.tree, order)(sink.append)

    def time_iterator_traversal(self, size, order):
        for _ in getattr(self.tree, f"iter_{order}")():
            pass
