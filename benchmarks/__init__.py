"""
Benchmarks package for red-black trees.

This package contains ASV benchmarks for performance testing of:
- RBTreeBase construction via repeated insert
- search() with varying hit ratios
- delete() of a share of the stored keys
- full traversals

The benchmarks are designed to be robust against CPU and memory load variations
by using multiple iterations, deterministic test data, and proper statistical analysis.
"""

# Import benchmark utilities for easier access
from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
