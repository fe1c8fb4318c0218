import pytest
import numpy as np

from planners.search_components import SearchNode
from utils.geometry import (
    PathReconstructionError, direction, distance, expand_waypoints,
    octile_distance, rewind, segment_cells,
)

# --- Geometry Tests ---

def test_direction_is_sign_of_delta():
    assert direction((0, 0), (5, 0)) == (1, 0)
    assert direction((3, 3), (3, 1)) == (0, -1)
    assert direction((4, 1), (0, 7)) == (-1, 1)
    assert direction((2, 2), (2, 2)) == (0, 0)


def test_direction_returns_plain_ints():
    dx, dy = direction((0, 0), (2, -2))
    assert type(dx) is int and type(dy) is int


def test_distance_is_euclidean():
    assert distance((0, 0), (3, 4)) == 5.0
    assert distance((1, 2), (1, 2)) == 0.0
    assert distance((0, 0), (1, 1)) == pytest.approx(np.sqrt(2))
    assert isinstance(distance((0, 0), (1, 0)), float)


def test_octile_distance():
    assert octile_distance((0, 0), (4, 4)) == pytest.approx(4 * np.sqrt(2))
    assert octile_distance((0, 0), (7, 3)) == pytest.approx(4 + 3 * np.sqrt(2))
    assert octile_distance((5, 5), (5, 0)) == pytest.approx(5.0)


# --- Path reconstruction ---

@pytest.fixture
def chain():
    start = SearchNode.new(0.0, 0.0, (0, 0), (0, 0))
    mid = SearchNode.from_parent(start, (2, 2), goal=(2, 5))
    goal = SearchNode.from_parent(mid, (2, 5), goal=(2, 5))
    return start, mid, goal


def test_rewind_walks_back_to_start(chain):
    start, mid, goal = chain
    closed = {start.position: start, mid.position: mid}
    assert rewind(goal, closed) == [(2, 5), (2, 2), (0, 0)]


def test_rewind_of_root_is_single_cell():
    start = SearchNode.new(0.0, 0.0, (3, 3), (3, 3))
    assert rewind(start, {}) == [(3, 3)]


def test_rewind_fails_on_missing_ancestor(chain):
    start, _, goal = chain
    with pytest.raises(PathReconstructionError):
        rewind(goal, {start.position: start})


def test_rewind_fails_on_parent_loop():
    a = SearchNode.new(1.0, 0.0, (0, 0), (1, 0))
    b = SearchNode.new(1.0, 0.0, (1, 0), (0, 0))
    goal = SearchNode.new(2.0, 0.0, (2, 0), (1, 0))
    with pytest.raises(PathReconstructionError):
        rewind(goal, {a.position: a, b.position: b})


# --- Segment interpolation ---

def test_segment_cells_straight_and_diagonal():
    assert segment_cells((0, 0), (3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert segment_cells((2, 2), (0, 0)) == [(2, 2), (1, 1), (0, 0)]
    assert segment_cells((1, 1), (1, 1)) == [(1, 1)]


def test_segment_cells_rejects_knight_moves():
    with pytest.raises(ValueError):
        segment_cells((0, 0), (2, 1))


def test_expand_waypoints():
    path = expand_waypoints([(0, 0), (2, 2), (2, 4)])
    assert path == [(0, 0), (1, 1), (2, 2), (2, 3), (2, 4)]
    assert expand_waypoints([(5, 5)]) == [(5, 5)]
    assert expand_waypoints([]) == []
