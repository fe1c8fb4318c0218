# FILE: planners/search_components.py
import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import Iterator, List, Optional, Tuple

from utils.geometry import distance

# Type alias for clarity
GridPosition = Tuple[int, int]


@dataclass(frozen=True)
class SearchNode:
    """
    One frontier/closed entry of a grid search.

    Equality and hashing only look at the position, so membership tests
    against the closed set work by cell alone.
    """
    position: GridPosition
    parent: GridPosition = field(compare=False)
    g: float = field(default=0.0, compare=False)
    h: float = field(default=0.0, compare=False)

    @property
    def f(self) -> float:
        return self.g + self.h

    @classmethod
    def new(cls, g: float, h: float, position: GridPosition, parent: GridPosition) -> 'SearchNode':
        return cls(position=position, parent=parent, g=g, h=h)

    @classmethod
    def from_parent(cls, parent_node: 'SearchNode', position: GridPosition, goal: GridPosition) -> 'SearchNode':
        """Creates a node reached from `parent_node`, costing the move with the Euclidean metric."""
        g = parent_node.g + distance(parent_node.position, position)
        return cls(position=position, parent=parent_node.position, g=g, h=distance(position, goal))

    @property
    def is_root(self) -> bool:
        return self.parent == self.position

    def __lt__(self, other: 'SearchNode') -> bool:
        # For priority queue comparison
        return self.f < other.f


@dataclass(frozen=True)
class Route:
    """A found path: its cost and the cells walked from start to goal."""
    total_cost: float
    path: List[GridPosition]
    jump_points: List[GridPosition] = field(default_factory=list)

    @property
    def distance(self) -> float:
        return self.total_cost

    @property
    def steps(self) -> int:
        """Number of moves along the path."""
        return max(len(self.path) - 1, 0)

    @property
    def start(self) -> GridPosition:
        return self.path[0]

    @property
    def goal(self) -> GridPosition:
        return self.path[-1]


class Frontier:
    """
    Min-priority open list keyed on f.

    Ties on f go to the node with the smaller h (closer to the goal), and
    remaining ties to the node pushed first.
    """
    def __init__(self):
        self._heap: List[Tuple[float, float, int, SearchNode]] = []
        self._counter = count()

    def push(self, node: SearchNode):
        heapq.heappush(self._heap, (node.f, node.h, next(self._counter), node))

    def pop(self) -> Optional[SearchNode]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[-1]

    def drain(self) -> Iterator[SearchNode]:
        """Yields the remaining nodes in priority order, emptying the frontier."""
        while self._heap:
            yield heapq.heappop(self._heap)[-1]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
