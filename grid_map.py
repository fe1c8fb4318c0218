# FILE: grid_map.py
from typing import Iterable, Protocol, Sequence, Tuple
import numpy as np

GridPosition = Tuple[int, int]


class GridOracle(Protocol):
    """Anything that can tell the planners whether a cell may be entered."""
    def is_traversable(self, cell: GridPosition) -> bool:
        ...


class GridMap:
    """
    Binary traversability grid backed by a numpy boolean array.

    Cells are addressed as (x, y) with x the column and y the row, so the
    backing array is indexed as grid[y, x]. Queries outside the grid answer
    False instead of raising, which lets the scanners probe one cell past the
    border safely.
    """
    def __init__(self, grid: np.ndarray):
        grid = np.asarray(grid)
        if grid.ndim != 2:
            raise ValueError(f"Grid must be two-dimensional, got shape {grid.shape}.")
        self.grid = grid.astype(bool)

    @classmethod
    def from_array(cls, grid: np.ndarray) -> 'GridMap':
        return cls(grid)

    @classmethod
    def open(cls, width: int, height: int) -> 'GridMap':
        """An obstacle-free grid."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        return cls(np.full((height, width), True))

    @classmethod
    def from_strings(cls, rows: Sequence[str], traversable: Iterable[str] = ".") -> 'GridMap':
        """Builds a grid from text rows; characters in `traversable` are open, anything else blocked."""
        if not rows:
            raise ValueError("At least one row is required.")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same width.")
        open_chars = set(traversable)
        return cls(np.array([[ch in open_chars for ch in row] for row in rows], dtype=bool))

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def obstacle_count(self) -> int:
        return int(np.count_nonzero(~self.grid))

    def in_bounds(self, cell: GridPosition) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_traversable(self, cell: GridPosition) -> bool:
        if not self.in_bounds(cell):
            return False
        x, y = cell
        return bool(self.grid[y, x])

    def set_blocked(self, cells: Iterable[GridPosition]):
        """Marks cells as obstacles while building a map."""
        for x, y in cells:
            self.grid[y, x] = False

    def traversable_cells(self):
        ys, xs = np.nonzero(self.grid)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def __repr__(self) -> str:
        return f"GridMap(width={self.width}, height={self.height}, obstacles={self.obstacle_count})"
