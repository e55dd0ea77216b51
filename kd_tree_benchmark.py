import numpy as np

from config import SEED, BENCHMARK_DIMENSIONS, BENCHMARK_SIZES, BENCHMARK_QUERIES, PLOT_TIMINGS
from function_profiler import FunctionProfiler
from kd_point import ArrayPoint, as_points, euclidean_delta
from kd_tree import KDTree

'''
Compares KD-tree nearest neighbor queries against a brute-force scan on random data
'''

def brute_force_nearest(data: np.ndarray, query: np.ndarray):
    """
    Linear scan over the rows of data. Returns (index, squared distance) of the closest row.
    """
    dsq = np.sum((data - query[None, :]) ** 2, axis=1)
    index = int(np.argmin(dsq))
    return index, float(dsq[index])

def run_benchmark(dimensions, size, queries=BENCHMARK_QUERIES, profiler=None):
    profiler = profiler if profiler is not None else FunctionProfiler()

    @profiler.profile("build")
    def build(points):
        return KDTree(points, euclidean_delta)

    @profiler.profile("kd_tree")
    def tree_query(tree, q):
        return tree.nearest_neighbor_with_distance(ArrayPoint(q))

    @profiler.profile("brute_force")
    def brute_query(data, q):
        return brute_force_nearest(data, q)

    data = np.random.rand(size, dimensions)
    tree = build(as_points(data))

    mismatches = 0
    for q in np.random.rand(queries, dimensions):
        _, tree_dsq = tree_query(tree, q)
        _, true_dsq = brute_query(data, q)
        if not np.isclose(tree_dsq, true_dsq):
            mismatches += 1

    return {
        "dimensions": dimensions,
        "size": size,
        "mismatches": mismatches,
        "build": profiler.summary("build")["mean"],
        "kd_tree": profiler.summary("kd_tree")["mean"],
        "brute_force": profiler.summary("brute_force")["mean"],
        "speedup": profiler.speedup("brute_force", "kd_tree"),
    }

def main():
    np.random.seed(SEED)
    results = []
    for dimensions in BENCHMARK_DIMENSIONS:
        for size in BENCHMARK_SIZES:
            profiler = FunctionProfiler()
            print("=====================================")
            print(f"{dimensions}D, {size} points, {BENCHMARK_QUERIES} queries")
            res = run_benchmark(dimensions, size, profiler=profiler)
            results.append(res)
            print(f"Build: {res['build'] * 1e3:.2f} ms")
            print(f"KD-tree query: {res['kd_tree'] * 1e6:.1f} us")
            print(f"Brute force query: {res['brute_force'] * 1e6:.1f} us")
            print(f"Mismatches: {res['mismatches']}/{BENCHMARK_QUERIES} {'✅' if res['mismatches'] == 0 else '❌'}")
            if PLOT_TIMINGS:
                profiler.plot("kd_tree", "brute_force", title=f"{dimensions}D, {size} points")
    print("=====================================")
    total_mismatches = sum(r["mismatches"] for r in results)
    print(f"Total mismatches: {total_mismatches}")
    return results

if __name__ == '__main__':
    main()
