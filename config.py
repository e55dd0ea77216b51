SEED = 42

# Benchmark datasets
BENCHMARK_DIMENSIONS = [1, 2, 3, 8]
BENCHMARK_SIZES = [100, 1000, 10000]
BENCHMARK_QUERIES = 200
PLOT_TIMINGS = False
