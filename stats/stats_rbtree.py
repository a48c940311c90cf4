"""Statistics for red-black trees."""

import argparse
import logging
import math
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np
from tqdm import trange

from rb_trees.factory import create_rbtree
from rb_trees.invariants import assert_tree_invariants_raise
from rb_trees.rb_tree_base import RBTreeBase
from rb_trees.tree_stats import rbtree_stats_

logger = logging.getLogger(__name__)

ALPHABET = np.array(list("abcdefghijklmnopqrstuvwxyz"))


def random_keys(n: int, key_len: int = 8) -> list:
    """Draw ``n`` distinct lowercase keys of length ``key_len``."""
    space = len(ALPHABET) ** key_len
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n}, Available: {space}")

    keys = set()
    while len(keys) < n:
        missing = n - len(keys)
        letters = ALPHABET[np.random.randint(0, len(ALPHABET), size=(missing, key_len))]
        keys.update("".join(row) for row in letters)
    keys = list(keys)
    random.shuffle(keys)
    return keys


def create_rbtree_from_keys(keys) -> RBTreeBase:
    """Build a tree by inserting each key in order."""
    tree = create_rbtree(str)
    for key in keys:
        tree = tree.insert(key)
    return tree


def random_rbtree_of_size(n: int, delete_ratio: float = 0.0) -> RBTreeBase:
    """
    Create a random tree with n distinct keys, then delete a random
    ``delete_ratio`` share of them.
    """
    if not 0.0 <= delete_ratio <= 1.0:
        raise ValueError(f"delete_ratio must be in [0, 1], got {delete_ratio}")
    keys = random_keys(n)
    tree = create_rbtree_from_keys(keys)
    for key in random.sample(keys, k=int(n * delete_ratio)):
        tree = tree.delete(key)
    return tree


def height_bound(size: int) -> float:
    """Upper bound 2·log2(n+1) on the height of a valid red-black tree."""
    return 2 * math.log2(size + 1)


def repeated_experiment(
    size: int,
    repetitions: int,
    delete_ratio: float = 0.0,
) -> dict:
    """
    Repeatedly builds random trees with ``size`` keys and aggregates
    statistics and timings. Colour invariants are only asserted for
    insert-only runs.

    Returns:
        dict mapping metric name to ``(avg, var)``.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []

    check_colours = delete_ratio == 0.0
    for _ in trange(repetitions, desc=f"n={size}", leave=False):
        t0 = time.perf_counter()
        tree = random_rbtree_of_size(size, delete_ratio)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = rbtree_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, stats, check_colours=check_colours)
        results.append(stats)

    bound = height_bound(size)
    perfect_height = math.ceil(math.log2(size + 1)) if size > 0 else 0

    def avg_var(values):
        values = list(values)
        avg = mean(values)
        return avg, mean((v - avg) ** 2 for v in values)

    rows = {
        "Node count": avg_var(s.node_count for s in results),
        "Height": avg_var(s.height for s in results),
        "Black height": avg_var(s.black_height for s in results),
        "Height / bound": avg_var((s.height / bound) if bound else 0 for s in results),
        "No red-red": avg_var(float(s.no_red_red) for s in results),
        "Black balanced": avg_var(float(s.black_balanced) for s in results),
        "Build time (s)": avg_var(times_build),
        "Stats time (s)": avg_var(times_stats),
    }

    header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    logger.info(f"{'Perfect height':<20} {perfect_height:>15}")
    logger.info(f"{'Height bound':<20} {bound:15.2f}")
    for name, (avg, var) in rows.items():
        var_str = f"({var:.6f})" if name.endswith("(s)") else f"({var:.2f})"
        avg_fmt = f"{avg:15.6f}" if name.endswith("(s)") else f"{avg:15.2f}"
        logger.info(f"{name:<20} {avg_fmt} {var_str:>15}")

    logger.info(sep_line)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)
    return rows


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for red-black trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument(
        "--delete-ratio", type=float, default=0.0, help="Share of keys deleted after building each tree."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/rb_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )

    # Also apply the chosen level to the library logger
    logging.getLogger("rb_trees").setLevel(log_level)

    for n in args.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, "
            f"delete_ratio = {args.delete_ratio}, repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, delete_ratio=args.delete_ratio)
        logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")
