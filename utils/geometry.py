# FILE: utils/geometry.py
from typing import TYPE_CHECKING, List, Mapping, Sequence, Tuple
import numpy as np

# Use TYPE_CHECKING to avoid circular import errors
if TYPE_CHECKING:
    from planners.search_components import SearchNode

GridPosition = Tuple[int, int]


class PathReconstructionError(RuntimeError):
    """Raised when a path cannot be walked back through the closed set."""


def direction(from_pos: GridPosition, to_pos: GridPosition) -> Tuple[int, int]:
    """Returns the (sign(dx), sign(dy)) step that travels from `from_pos` towards `to_pos`."""
    step = np.sign(np.array(to_pos) - np.array(from_pos)).astype(int)
    return int(step[0]), int(step[1])


def distance(a: GridPosition, b: GridPosition) -> float:
    """Calculates the Euclidean distance between two grid cells."""
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))


def octile_distance(a: GridPosition, b: GridPosition) -> float:
    """Length of the shortest 8-connected walk between two cells on an open grid."""
    dx, dy = abs(a[0] - b[0]), abs(a[1] - b[1])
    return float(max(dx, dy) - min(dx, dy) + np.sqrt(2) * min(dx, dy))


def rewind(goal_node: 'SearchNode', closed: Mapping[GridPosition, 'SearchNode']) -> List[GridPosition]:
    """
    Walks parent links from the goal back to the start.

    Parents are looked up by position in the closed set, so every ancestor of
    the goal must have been closed before this is called. Returns the cells
    ordered goal -> start.
    """
    path = [goal_node.position]
    node = goal_node
    while not node.is_root:
        parent = closed.get(node.parent)
        if parent is None:
            raise PathReconstructionError(
                f"Parent {node.parent} of {node.position} is missing from the closed set."
            )
        path.append(parent.position)
        if len(path) > len(closed) + 1:
            raise PathReconstructionError(f"Parent links loop back on themselves at {parent.position}.")
        node = parent
    return path


def segment_cells(p1: GridPosition, p2: GridPosition) -> List[GridPosition]:
    """Lists every cell on the straight or 45-degree segment from p1 to p2, both ends included."""
    dx, dy = p2[0] - p1[0], p2[1] - p1[1]
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        raise ValueError(f"Cells {p1} and {p2} are not on a common row, column or diagonal.")
    step_x, step_y = direction(p1, p2)
    num_steps = max(abs(dx), abs(dy))
    return [(p1[0] + i * step_x, p1[1] + i * step_y) for i in range(num_steps + 1)]


def expand_waypoints(waypoints: Sequence[GridPosition]) -> List[GridPosition]:
    """Turns a list of jump points into the full cell-by-cell path."""
    if not waypoints:
        return []
    path = [waypoints[0]]
    for p1, p2 in zip(waypoints, waypoints[1:]):
        path.extend(segment_cells(p1, p2)[1:])
    return path
