import logging
import random

import matplotlib.pyplot as plt

from matplotlib.axes import Axes
from hashmaps import ChainedHashMap, ChainedHashMapConfiguration
from hashmaps.utils.performance import track_operations, start_performance_tracking, end_performance_tracking

THRESHOLDS = [0.25, 0.5, 0.75, 1.0, 2.0]
INSERTIONS = 5000
INITIAL_CHAIN_COUNT = 2
CHAIN_INITIAL_CAPACITY = 2

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("load_factor_study")


def growth_of_chain_count(axis: Axes, keys: list, threshold: float) -> Axes:
    """Plot the chain count and load factor observed after every put"""
    table = ChainedHashMap.from_configuration(ChainedHashMapConfiguration(
        load_factor_threshold=threshold,
        initial_chain_count=INITIAL_CHAIN_COUNT,
        chain_initial_capacity=CHAIN_INITIAL_CAPACITY
    ))
    chain_counts, load_factors = [], []
    for key in keys:
        table.put(key, str(key))
        chain_counts.append(table.chain_count)
        load_factors.append(table.load_factor)

    sizes = list(range(1, len(keys) + 1))
    axis.plot(sizes, chain_counts, linestyle='solid', linewidth=2, label=f"chains (t={threshold})")
    axis.twinx().plot(sizes, load_factors, linestyle='dotted', linewidth=1)
    logger.info(f"threshold {threshold}: {table.chain_count} chains after {table.resize_count} resizes")
    return axis


def insertion_runtime(keys: list) -> list:
    """Total seconds to insert every key, per threshold"""
    runtimes = []
    for threshold in THRESHOLDS:
        table = ChainedHashMap(threshold, INITIAL_CHAIN_COUNT, CHAIN_INITIAL_CAPACITY)
        _, seconds = track_operations(table.put, ((key, key) for key in keys))
        runtimes.append(seconds)
    return runtimes


if __name__ == '__main__':
    rng = random.Random(0)
    keys = rng.sample(range(-10 ** 9, 10 ** 9), INSERTIONS)

    start_performance_tracking()
    fig, (growth_axis, runtime_axis) = plt.subplots(1, 2, figsize=(12, 5))
    for t in THRESHOLDS:
        growth_of_chain_count(growth_axis, keys, t)
    growth_axis.set_xlabel("mappings")
    growth_axis.set_ylabel("chains")
    growth_axis.legend()

    runtime_axis.bar([str(t) for t in THRESHOLDS], insertion_runtime(keys), color='blue')
    runtime_axis.set_xlabel("load factor threshold")
    runtime_axis.set_ylabel("insert time (s)")

    fig.savefig("load_factor_study.png")
    logger.info(f"study completed in {end_performance_tracking():.2f}s")
