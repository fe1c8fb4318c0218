# FILE: planners/grid_planner.py
import logging
from typing import Optional, Tuple

from config import DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS
from grid_map import GridOracle
from planners.search_components import GridPosition, Route
from utils.a_star import AStarPlanner
from utils.jump_point_search import jps_path


class GridPlanner:
    """
    Point-to-point planning on a single grid.

    Wraps the search algorithms behind the (result, status message) convention
    used by the rest of the project.
    """
    def __init__(self, grid: GridOracle, algorithm: str = DEFAULT_ALGORITHM, max_expansions: Optional[int] = None):
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {SUPPORTED_ALGORITHMS}.")
        self.grid = grid
        self.algorithm = algorithm
        self.max_expansions = max_expansions

    def find_path(self, start: GridPosition, goal: GridPosition) -> Tuple[Optional[Route], str]:
        if not self.grid.is_traversable(start): return None, "Start point is obstructed."
        if not self.grid.is_traversable(goal): return None, "Destination point is obstructed."

        if self.algorithm == "jps":
            route = jps_path(self.grid, start, goal, max_expansions=self.max_expansions)
        else:
            route = AStarPlanner(max_expansions=self.max_expansions).find_path(self.grid, start, goal)

        if route is None:
            logging.info(f"{self.algorithm.upper()}: no path from {start} to {goal}.")
            return None, "No path found between start and goal."
        logging.info(f"{self.algorithm.upper()}: path from {start} to {goal} with {route.steps} steps, cost {route.total_cost:.3f}.")
        return route, "Path found successfully."
