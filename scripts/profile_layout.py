"""
Profiling script for Sankey layout performance analysis.

This script profiles layouts of random layered flow graphs to identify bottlenecks.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time

import numpy as np
from sankeylayout import Link, Node, Sankey


def create_graph(n_columns, per_column, n_links, seed=42):
    """Create a random layered DAG; links only run to later columns."""
    rng = np.random.default_rng(seed)
    nodes = [Node(f'{c}:{r}') for c in range(n_columns) for r in range(per_column)]

    links = []
    for _ in range(n_links):
        c = rng.integers(0, n_columns - 1)
        d = rng.integers(c + 1, n_columns)
        source = nodes[c * per_column + rng.integers(0, per_column)]
        target = nodes[d * per_column + rng.integers(0, per_column)]
        links.append(Link(source.id, target.id, float(rng.uniform(1, 100))))

    return nodes, links


def run(n_columns, per_column, n_links, iterations=6):
    nodes, links = create_graph(n_columns, per_column, n_links)
    sankey = Sankey(x1=1600, y1=1000, node_width=15, node_padding=4, iterations=iterations)
    sankey.layout(nodes, links)


def profile_small_graph():
    """Profile a small graph (4 columns of 5 nodes, 30 links)."""
    run(4, 5, 30)


def profile_medium_graph():
    """Profile a medium graph (8 columns of 12 nodes, 300 links)."""
    run(8, 12, 300)


def profile_large_graph():
    """Profile a large graph (12 columns of 40 nodes, 2000 links)."""
    run(12, 40, 2000)


def profile_many_iterations():
    """Profile a medium graph relaxed for 64 rounds."""
    run(8, 12, 300, iterations=64)


def benchmark_scenario(name, func):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    profiler = cProfile.Profile()

    start_time = time.time()
    profiler.enable()
    func()
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(20)

    print("\nTop 20 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def main():
    """Run all profiling scenarios."""
    print("Sankey Layout Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Small Graph (20 nodes, 30 links)", profile_small_graph),
        ("Medium Graph (96 nodes, 300 links)", profile_medium_graph),
        ("Large Graph (480 nodes, 2000 links)", profile_large_graph),
        ("Many Iterations (96 nodes, 64 rounds)", profile_many_iterations),
    ]

    profilers = {}
    for name, func in scenarios:
        profilers[name] = benchmark_scenario(name, func)

    print("\n" + "="*60)
    print("Saving detailed profiles...")
    print("="*60)

    for name, profiler in profilers.items():
        filename = f"profile_{name.lower().replace(' ', '_').replace('(', '').replace(')', '').replace(',', '')}.prof"
        profiler.dump_stats(filename)
        print(f"Saved: {filename}")

    print("\nTo view detailed profile, use:")
    print("  python -m pstats <profile_file>")


if __name__ == "__main__":
    main()
