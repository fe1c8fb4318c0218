# utils/reporting.py
from dataclasses import dataclass
from typing import Dict, List, Optional
import numpy as np

from config import BENCHMARK_COST_TOLERANCE


@dataclass
class BenchmarkResult:
    algorithm: str
    start: tuple
    goal: tuple
    optimal_length: float
    cost: Optional[float]
    elapsed_s: float

    @property
    def solved(self) -> bool:
        return self.cost is not None

    @property
    def matches_optimal(self) -> bool:
        if self.cost is None:
            return False
        return abs(self.cost - self.optimal_length) <= BENCHMARK_COST_TOLERANCE


def summarize_results(results: List[BenchmarkResult]) -> Dict[str, float]:
    """Aggregates a list of scenario runs for a single algorithm."""
    if not results:
        return {"runs": 0, "solved": 0, "optimal": 0, "mean_time_ms": 0.0, "total_time_ms": 0.0}
    times_ms = np.array([r.elapsed_s for r in results]) * 1000.0
    return {
        "runs": len(results),
        "solved": sum(r.solved for r in results),
        "optimal": sum(r.matches_optimal for r in results),
        "mean_time_ms": float(np.mean(times_ms)),
        "total_time_ms": float(np.sum(times_ms)),
    }


def print_benchmark_summary(title: str, results: List[BenchmarkResult]):
    """Prints a formatted summary of one algorithm's benchmark run."""
    print(f"\n--- {title} ---")
    if not results:
        print("  No scenarios run.")
        return

    for r in results:
        if not r.matches_optimal:
            cost = "none" if r.cost is None else f"{r.cost:.4f}"
            print(f"  MISMATCH {r.start} -> {r.goal}: got {cost}, expected {r.optimal_length:.4f}")

    summary = summarize_results(results)
    print("-" * 25)
    print(f"  Scenarios: {summary['runs']}")
    print(f"  Solved: {summary['solved']}  Optimal: {summary['optimal']}")
    print(f"  Mean Time: {summary['mean_time_ms']:.3f} ms  Total: {summary['total_time_ms']:.1f} ms")
    print("-" * 25)
