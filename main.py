# main.py
import argparse
import logging
import time
from typing import List, Optional

import config
from grid_map import GridMap
from planners.grid_planner import GridPlanner
from utils.movingai import Scenario, parse_map_file, parse_scen_file
from utils.reporting import BenchmarkResult, print_benchmark_summary


def run_scenarios(grid_map: GridMap, scenarios: List[Scenario], algorithm: str) -> List[BenchmarkResult]:
    """Solves every scenario with one algorithm and records cost and wall time."""
    planner = GridPlanner(grid_map, algorithm=algorithm)
    results = []
    for scenario in scenarios:
        t0 = time.perf_counter()
        route, _ = planner.find_path(scenario.start, scenario.goal)
        elapsed = time.perf_counter() - t0
        results.append(BenchmarkResult(
            algorithm=algorithm,
            start=scenario.start,
            goal=scenario.goal,
            optimal_length=scenario.optimal_length,
            cost=route.total_cost if route else None,
            elapsed_s=elapsed,
        ))
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Benchmark grid path planners on a MovingAI map and scenario file."
    )
    parser.add_argument("map", help="Path to the .map file")
    parser.add_argument(
        "--scen",
        help="Path to the scenario file (defaults to <map>.scen)"
    )
    parser.add_argument(
        "--algorithm",
        choices=list(config.SUPPORTED_ALGORITHMS) + ["all"],
        default=config.DEFAULT_ALGORITHM,
        help="Planner to benchmark"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only run the first N scenarios"
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Runs the benchmark; exits non-zero if any scenario misses its optimal length."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    grid_map = parse_map_file(args.map)
    scenarios = parse_scen_file(args.scen or f"{args.map}.scen")
    if args.limit is not None:
        scenarios = scenarios[:args.limit]

    algorithms = config.SUPPORTED_ALGORITHMS if args.algorithm == "all" else (args.algorithm,)
    all_optimal = True
    for algorithm in algorithms:
        results = run_scenarios(grid_map, scenarios, algorithm)
        print_benchmark_summary(f"{algorithm.upper()} on {len(scenarios)} scenarios", results)
        all_optimal = all_optimal and all(r.matches_optimal for r in results)

    return 0 if all_optimal else 1


if __name__ == "__main__":
    raise SystemExit(main())
