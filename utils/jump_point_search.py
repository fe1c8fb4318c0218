# ==============================================================================
# File: utils/jump_point_search.py
# ==============================================================================
import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, TYPE_CHECKING

from config import JPS_MAX_EXPANSIONS
from planners.search_components import Frontier, GridPosition, Route, SearchNode
from utils.geometry import direction as travel_direction
from utils.geometry import distance, expand_waypoints, rewind

if TYPE_CHECKING:
    from grid_map import GridOracle


class ScanKind(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class Direction(NamedTuple):
    dx: int
    dy: int

    @property
    def kind(self) -> ScanKind:
        if self.dx != 0 and self.dy != 0:
            return ScanKind.DIAGONAL
        if self.dx != 0:
            return ScanKind.HORIZONTAL
        return ScanKind.VERTICAL


def classify_direction(step: tuple) -> Direction:
    """Turns a (dx, dy) step into a scan direction."""
    dx, dy = step
    if dx == 0 and dy == 0:
        raise ValueError("A node whose parent is itself has no travel direction to scan.")
    if abs(dx) > 1 or abs(dy) > 1:
        raise ValueError(f"Scan directions are unit steps, got {step}.")
    return Direction(dx, dy)


def forced_horizontal(oracle: 'GridOracle', check_node: SearchNode, dx: int, goal: GridPosition) -> List[SearchNode]:
    """
    Forced neighbours of a cell scanned along a row.

    A blocked cell directly above (or below) the scanned cell forces a turn
    into the diagonally-forward cell on that side, provided that cell is open.
    """
    x, y = check_node.position
    next_x = x + dx
    nodes = []
    for side_y in (y - 1, y + 1):
        if not oracle.is_traversable((x, side_y)) and oracle.is_traversable((next_x, side_y)):
            nodes.append(SearchNode.from_parent(check_node, (next_x, side_y), goal))
    return nodes


def forced_vertical(oracle: 'GridOracle', check_node: SearchNode, dy: int, goal: GridPosition) -> List[SearchNode]:
    """Column counterpart of `forced_horizontal`, checking the cells to the left and right."""
    x, y = check_node.position
    next_y = y + dy
    nodes = []
    for side_x in (x - 1, x + 1):
        if not oracle.is_traversable((side_x, y)) and oracle.is_traversable((side_x, next_y)):
            nodes.append(SearchNode.from_parent(check_node, (side_x, next_y), goal))
    return nodes


def expand(oracle: 'GridOracle', start_node: SearchNode, scan: Direction, goal: GridPosition) -> List[SearchNode]:
    """
    Scans from `start_node` along `scan` until something worth enqueueing is found.

    Returns the goal node when the scan reaches it, nothing when the scan runs
    into an obstacle, and otherwise the forced neighbours (or, for diagonal
    scans, the results of the row and column sub-scans) together with the
    turning cell and the next cell on the original heading.
    """
    current = start_node
    kind = scan.kind
    while True:
        if current.position == goal:
            return [current]

        if not oracle.is_traversable(current.position):
            return []

        if kind is ScanKind.HORIZONTAL:
            nodes = forced_horizontal(oracle, current, scan.dx, goal)
        elif kind is ScanKind.VERTICAL:
            nodes = forced_vertical(oracle, current, scan.dy, goal)
        else:
            # Diagonal scans never recurse into another diagonal scan
            nodes = expand(oracle, current, Direction(scan.dx, 0), goal)
            nodes.extend(expand(oracle, current, Direction(0, scan.dy), goal))

        next_position = (current.position[0] + scan.dx, current.position[1] + scan.dy)

        if nodes:
            nodes.append(current)
            nodes.append(SearchNode.from_parent(current, next_position, goal))
            return nodes

        # Cost stays relative to the node that entered this scan
        current = SearchNode.from_parent(start_node, next_position, goal)


def check_jump(oracle: 'GridOracle', node: SearchNode, goal: GridPosition) -> List[SearchNode]:
    """Scans onward from `node` in the direction it was entered from its parent."""
    scan = classify_direction(travel_direction(node.parent, node.position))
    return expand(oracle, node, scan, goal)


def _seed_frontier(frontier: Frontier, start_node: SearchNode, goal: GridPosition):
    # The 3x3 block is seeded blindly; obstructed cells are dropped on their first expansion
    x, y = start_node.position
    for nx in range(x - 1, x + 2):
        for ny in range(y - 1, y + 2):
            frontier.push(SearchNode.from_parent(start_node, (nx, ny), goal))


def jps_path(oracle: 'GridOracle', start: GridPosition, goal: GridPosition,
             max_expansions: Optional[int] = JPS_MAX_EXPANSIONS) -> Optional[Route]:
    """
    Finds a shortest 8-connected route from `start` to `goal` with Jump Point Search.

    Returns None when no route exists, when either endpoint is not
    traversable, or when `max_expansions` nodes were expanded without
    reaching the goal. Exceptions raised by the oracle propagate.
    """
    start, goal = tuple(start), tuple(goal)
    if not oracle.is_traversable(start) or not oracle.is_traversable(goal):
        logging.debug(f"JPS: start {start} or goal {goal} is not traversable.")
        return None

    frontier = Frontier()
    closed: Dict[GridPosition, SearchNode] = {}

    start_node = SearchNode.new(0.0, distance(start, goal), start, start)
    if start == goal:
        frontier.push(start_node)
    else:
        _seed_frontier(frontier, start_node, goal)
        closed[start] = start_node

    expansions = 0
    while frontier:
        node = frontier.pop()

        if node.position == goal:
            for remaining in frontier.drain():
                closed.setdefault(remaining.position, remaining)
            jump_points = rewind(node, closed)[::-1]
            logging.debug(f"JPS reached {goal} after {expansions} expansions, cost {node.g:.3f}.")
            return Route(total_cost=node.g, path=expand_waypoints(jump_points), jump_points=jump_points)

        if node.position in closed:
            continue

        if max_expansions is not None and expansions >= max_expansions:
            logging.warning(f"JPS search hit max expansions ({max_expansions}) before reaching {goal}.")
            return None
        expansions += 1

        for successor in check_jump(oracle, node, goal):
            frontier.push(successor)

        closed[node.position] = node

    logging.debug(f"JPS exhausted the frontier after {expansions} expansions; {goal} is unreachable from {start}.")
    return None


find_path = jps_path
