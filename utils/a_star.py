# FILE: utils/a_star.py
import heapq
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple
import numpy as np

from config import A_STAR_MAX_EXPANSIONS
from planners.search_components import GridPosition, Route
from utils.geometry import distance

if TYPE_CHECKING:
    from grid_map import GridOracle

MOVES = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


class AStarPlanner:
    """Plain 8-connected A*, expanding every neighbour. Baseline for Jump Point Search."""
    def __init__(self, max_expansions: Optional[int] = A_STAR_MAX_EXPANSIONS):
        self.max_expansions = max_expansions
        self.expansions = 0

    def find_path(self, oracle: 'GridOracle', start_grid: GridPosition, goal_grid: GridPosition) -> Optional[Route]:
        start_grid, goal_grid = tuple(start_grid), tuple(goal_grid)
        self.expansions = 0
        if not oracle.is_traversable(start_grid) or not oracle.is_traversable(goal_grid):
            return None

        open_set = [(self._heuristic(start_grid, goal_grid), start_grid)]
        came_from: Dict[GridPosition, Optional[GridPosition]] = {start_grid: None}
        g_score: Dict[GridPosition, float] = {start_grid: 0.0}
        closed = set()

        while open_set:
            _, current = heapq.heappop(open_set)

            if current == goal_grid:
                return Route(total_cost=g_score[current], path=self._reconstruct_path(came_from, current))

            if current in closed:
                continue
            closed.add(current)

            if self.max_expansions is not None and self.expansions >= self.max_expansions:
                logging.warning(f"A* search hit max expansions ({self.max_expansions}) before reaching {goal_grid}.")
                return None
            self.expansions += 1

            for neighbor, cost in self._get_neighbors_with_cost(current, oracle):
                tentative_g_score = g_score[current] + cost

                if tentative_g_score < g_score.get(neighbor, float('inf')):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g_score
                    f_score = tentative_g_score + self._heuristic(neighbor, goal_grid)
                    heapq.heappush(open_set, (f_score, neighbor))

        return None

    def _get_neighbors_with_cost(self, pos: GridPosition, oracle: 'GridOracle') -> List[Tuple[GridPosition, float]]:
        """
        Gets all traversable neighbors with their movement cost.
        Straight moves cost 1, diagonal moves sqrt(2).
        """
        neighbors = []
        x, y = pos
        for dx, dy in MOVES:
            neighbor = (x + dx, y + dy)
            if oracle.is_traversable(neighbor):
                neighbors.append((neighbor, float(np.sqrt(dx**2 + dy**2))))
        return neighbors

    def _heuristic(self, a: GridPosition, b: GridPosition) -> float:
        return distance(a, b)

    def _reconstruct_path(self, came_from: dict, current: GridPosition) -> List[GridPosition]:
        path = []
        while current is not None:
            path.append(current)
            current = came_from[current]
        return path[::-1]
