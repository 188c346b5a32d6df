# benchmark_conjugates.py
"""
Benchmark the reference algorithms against their allowed substitutes:

* totient: exhaustive gcd count vs prime-factorization formula
* conjugates: linear-scan dedup vs dict-keyed dedup

Outputs
=======
* A log-log runtime plot (figures/conjugate_scaling.pdf|png)
* A plain-text table of the averages, printed to stdout
"""

from __future__ import annotations

import gc
import math
import time
import tracemalloc
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from cyclotomic_integer import CyclotomicInteger
from number_theory import euler_phi

Algorithm = Callable[[int], object]


# ----------------------------------------------------------------------------
# 1.  Algorithms under test
# ----------------------------------------------------------------------------

def _generic_element(n: int) -> CyclotomicInteger:
    # Distinct coefficients, so no automorphism fixes it and the orbit is full
    return CyclotomicInteger.from_dense(list(range(1, n + 1)))


def totient_trial(n: int) -> int:
    return euler_phi(n, method="trial")


def totient_factorization(n: int) -> int:
    return euler_phi(n, method="factorization")


def conjugates_scan(n: int) -> int:
    return len(_generic_element(n).conjugates(method="scan"))


def conjugates_hashed(n: int) -> int:
    return len(_generic_element(n).conjugates(method="hashed"))


ALGORITHMS: Dict[str, Algorithm] = {
    "Totient (trial gcd)": totient_trial,
    "Totient (factorization)": totient_factorization,
    "Conjugates (scan)": conjugates_scan,
    "Conjugates (hashed)": conjugates_hashed,
}


# ----------------------------------------------------------------------------
# 2.  Measurement utilities
# ----------------------------------------------------------------------------

def measure_algorithm_memory(algo: Algorithm, n: int) -> Tuple[object, float]:
    """
    Run algo(n) under tracemalloc.
    Returns (result, peak_memory_usage_in_MB).
    """
    gc.collect()
    tracemalloc.start()
    try:
        result = algo(n)
        peak = tracemalloc.get_traced_memory()[1] / (1024 * 1024)
    finally:
        tracemalloc.stop()
    return result, max(0.001, peak)  # Ensure non-zero value for log plots


def scientific(val: float) -> str:
    """Return a compact scientific-notation string, 'inf' for missing values."""
    if val == float("inf") or math.isnan(val):
        return "inf"
    return f"{val:.2e}"


# ----------------------------------------------------------------------------
# 3.  Benchmark driver
# ----------------------------------------------------------------------------

def run_benchmarks(levels: List[int],
                   repetitions: int = 5,
                   algorithms: Optional[Dict[str, Algorithm]] = None) -> Tuple[Dict[str, Dict[int, float]], Dict[str, Dict[int, float]]]:
    """
    Run benchmarks measuring both time and memory usage.
    Returns a tuple of (time_results, memory_results), each {method: {level: average}}.
    """
    if algorithms is None:
        algorithms = ALGORITHMS

    all_times: Dict[str, Dict[int, List[float]]] = {
        name: {n: [] for n in levels} for name in algorithms
    }
    all_memory: Dict[str, Dict[int, List[float]]] = {
        name: {n: [] for n in levels} for name in algorithms
    }

    for rep in range(1, repetitions + 1):
        print(f"Repetition {rep}/{repetitions}")
        for n in levels:
            print(f"  n = {n}")
            for name, algo in algorithms.items():
                try:
                    t0 = time.perf_counter()
                    result = algo(n)
                    elapsed = time.perf_counter() - t0
                    all_times[name][n].append(elapsed)

                    # Measure memory on a separate run to avoid interference
                    _, memory_used = measure_algorithm_memory(algo, n)
                    all_memory[name][n].append(memory_used)

                    print(f"    {name}: {elapsed:.6g}s, {memory_used:.2f}MB - Result: {result}")
                except Exception as exc:
                    print(f"    {name}: ERROR - {exc}")
                    all_times[name][n].append(float("inf"))
                    all_memory[name][n].append(float("inf"))

    avg_times: Dict[str, Dict[int, float]] = {name: {} for name in algorithms}
    avg_memory: Dict[str, Dict[int, float]] = {name: {} for name in algorithms}

    for name in algorithms:
        for n in levels:
            recorded_times = [t for t in all_times[name][n] if math.isfinite(t)]
            avg_times[name][n] = sum(recorded_times) / len(recorded_times) if recorded_times else float("inf")

            recorded_memory = [m for m in all_memory[name][n] if math.isfinite(m)]
            avg_memory[name][n] = sum(recorded_memory) / len(recorded_memory) if recorded_memory else float("inf")

    return avg_times, avg_memory


# ----------------------------------------------------------------------------
# 4.  Reporting
# ----------------------------------------------------------------------------

def create_text_table(results: Dict[str, Dict[int, float]],
                      memory_results: Dict[str, Dict[int, float]],
                      levels: List[int]) -> str:
    """Return a printable table of average time (s) and peak memory (MB)."""
    header = f"{'Method':<26}" + "".join(f"{'n=' + str(n):>22}" for n in levels)
    lines = [header, "-" * len(header)]
    for name in results:
        cells = "".join(
            f"{scientific(results[name][n]) + 's / ' + scientific(memory_results[name][n]) + 'MB':>22}"
            for n in levels
        )
        lines.append(f"{name:<26}{cells}")
    return "\n".join(lines)


def create_performance_plot(results: Dict[str, Dict[int, float]],
                            out_dir: Path) -> List[Path]:
    """Write a log-log plot of runtime against level; returns the written paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    markers = ["o", "s", "^", "D", "v", "x"]

    fig, ax = plt.subplots(figsize=(10, 6))
    for idx, (name, by_level) in enumerate(results.items()):
        points = [(n, t) for n, t in sorted(by_level.items()) if math.isfinite(t) and t > 0]
        if not points:
            continue
        xs, ys = zip(*points)
        ax.loglog(xs, ys, label=name, marker=markers[idx % len(markers)], linewidth=2)

    ax.grid(True, which="both", ls="--", alpha=0.6)
    ax.set_xlabel("Level $n$ (log scale)")
    ax.set_ylabel("Execution time (s, log scale)")
    ax.set_title("Totient and conjugate computation scaling")
    ax.legend()

    plt.tight_layout()
    paths = [out_dir / "conjugate_scaling.pdf", out_dir / "conjugate_scaling.png"]
    for path in paths:
        plt.savefig(path)
    plt.close()
    return paths


# ----------------------------------------------------------------------------
# 5.  Main entry point
# ----------------------------------------------------------------------------

def main() -> None:
    levels = sorted(set(np.logspace(1, 3, num=7, dtype=int).tolist()))
    figures = Path("figures")

    print(f"Benchmarking {len(levels)} levels from {levels[0]} to {levels[-1]} ...")
    time_results, memory_results = run_benchmarks(levels, repetitions=3)

    print()
    print(create_text_table(time_results, memory_results, levels))

    create_performance_plot(time_results, figures)
    print(f"\nAll artifacts written to {figures.resolve()}")


if __name__ == "__main__":
    main()
