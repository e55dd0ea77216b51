import functools
import time
import seaborn as sns
import matplotlib.pyplot as plt
import numpy as np

class FunctionProfiler:
    def __init__(self):
        self.profiles = {}

    def record(self, name, elapsed):
        self.profiles.setdefault(name, []).append(elapsed)

    def profile(self, name):
        def decorator(func):
            @functools.wraps(func)
            def timed(*args, **kwargs):
                start = time.perf_counter()
                try:
                    return func(*args, **kwargs)
                finally:
                    self.record(name, time.perf_counter() - start)
            return timed
        return decorator

    def summary(self, name):
        if name not in self.profiles:
            return None
        data = np.array(self.profiles[name])
        return {"calls": len(data), "mean": data.mean(), "total": data.sum()}

    def speedup(self, baseline, candidate):
        '''Ratio of mean times, > 1 when candidate is faster than baseline.'''
        base = self.summary(baseline)
        cand = self.summary(candidate)
        if base is None or cand is None or cand["mean"] == 0:
            return None
        return base["mean"] / cand["mean"]

    def reset(self):
        self.profiles = {}

    def plot(self, *names, title="Query time distribution"):
        fig, ax = plt.subplots(figsize=(8, 6))
        for name in names:
            if name not in self.profiles:
                print(f"No timings recorded for '{name}'")
                continue
            # timings span several orders of magnitude
            sns.kdeplot(x=np.log10(self.profiles[name]), fill=True, label=name, ax=ax)
        ax.set_title(title)
        ax.set_xlabel("log10 execution time (s)")
        ax.set_ylabel("Density")
        ax.legend()
        plt.show()
