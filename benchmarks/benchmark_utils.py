"""
Benchmarking utilities for red-black trees.

This module provides common utilities and base classes for ASV benchmarking
that work optimally with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import random
import gc
import os
import logging
from typing import List, Tuple
import numpy as np

from rb_trees.factory import create_rbtree
from rb_trees.rb_tree_base import RBTreeBase

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))

# Width of the zero-padded decimal keys; keeps string order equal to numeric order
KEY_WIDTH = 8

# Logger for benchmark utilities
_logger = logging.getLogger(__name__)


def format_key(n: int) -> str:
    return f"k{n:0{KEY_WIDTH}d}"


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations.

    This class provides methods for generating deterministic test data and
    performing common benchmark setup operations while ensuring reproducibility.
    """

    @staticmethod
    def check_logging_level():
        """
        Check if logging level is appropriate for benchmarking.

        Raises if DEBUG or lower (more verbose) logging is enabled, as this can
        significantly contaminate benchmark results with I/O overhead.
        """
        rb_logger = logging.getLogger("rb_trees")
        # Use getEffectiveLevel() to handle NOTSET correctly
        effective_level = rb_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[str]:
        """
        Generate deterministic string keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of the numeric part of the keys (min, max)
            distribution: Distribution type ('uniform', 'duplicates', 'sequential')

        Returns:
            List of deterministic keys. Only 'duplicates' repeats keys.
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        random.seed(seed)
        np.random.seed(seed)

        min_key, max_key = key_range

        if distribution == 'uniform':
            # Sample without replacement (no duplicates)
            if max_key - min_key + 1 < size:
                raise ValueError("Not enough unique keys available to generate desired size")
            population = np.arange(min_key, max_key + 1)
            numbers = np.random.choice(population, size=size, replace=False)
        elif distribution == 'duplicates':
            # Roughly four occurrences per distinct key
            distinct = max(1, size // 4)
            numbers = np.random.randint(min_key, min_key + distinct, size=size)
        elif distribution == 'sequential':
            numbers = np.arange(min_key, min_key + size)
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

        return [format_key(int(n)) for n in numbers]

    @staticmethod
    def build_tree(keys: List[str]) -> RBTreeBase:
        """Insert every key into a fresh tree."""
        tree = create_rbtree(str)
        for key in keys:
            tree = tree.insert(key)
        return tree

    @staticmethod
    def create_lookup_keys(insert_keys: List[str],
                           hit_ratio: float = 0.8,
                           seed: int = None,
                           num_lookups: int = 1000) -> List[str]:
        """
        Create keys for lookup operations with specified hit ratio.

        Args:
            insert_keys: Keys that were inserted (for hits)
            hit_ratio: Ratio of lookups that should be hits (0.0 to 1.0)
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            num_lookups: Number of lookup keys to generate

        Returns:
            List of lookup keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        random.seed(seed)
        np.random.seed(seed)

        num_hits = int(num_lookups * hit_ratio) if insert_keys else 0
        num_misses = num_lookups - num_hits

        hit_keys = random.choices(insert_keys, k=num_hits) if num_hits > 0 else []

        # Misses use a suffix that no generated key carries
        miss_numbers = np.random.randint(0, 10 ** KEY_WIDTH, size=num_misses)
        miss_keys = [f"{format_key(int(n))}~" for n in miss_numbers]

        lookup_keys = hit_keys + miss_keys
        random.shuffle(lookup_keys)
        return lookup_keys


class BaseBenchmark:
    """Base class for ASV benchmarks optimized for ASV's built-in timing.

    This class provides a standard setup/teardown pattern that ensures:
    - Garbage collection is disabled during timed sections
    - Logging level is appropriate for benchmarking
    - Consistent parameter handling across benchmarks
    """

    # Parameters for benchmarking
    params = []
    param_names = []

    # Let ASV handle timing optimization automatically
    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Setup method called before each benchmark.

        Subclasses should:
        1. Call super().setup(*params) first
        2. Prepare test data
        3. Call gc.collect() to clean up setup overhead
        4. Call gc.disable() to prevent GC during measurement
        """
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        """Re-enables garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()
