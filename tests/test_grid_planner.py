import pytest
import numpy as np
from unittest.mock import patch

from grid_map import GridMap
from planners.grid_planner import GridPlanner


@pytest.fixture
def grid():
    return GridMap.from_strings([
        ".....",
        ".....",
        "####.",
        ".....",
        ".....",
    ])


@pytest.mark.parametrize("algorithm", ["jps", "astar"])
def test_planner_finds_route(grid, algorithm):
    planner = GridPlanner(grid, algorithm=algorithm)
    route, status = planner.find_path((0, 0), (4, 4))
    assert status == "Path found successfully."
    assert route.total_cost == pytest.approx(4 + 2 * np.sqrt(2))


def test_planner_reports_obstructed_endpoints(grid):
    planner = GridPlanner(grid)
    assert planner.find_path((0, 2), (4, 4)) == (None, "Start point is obstructed.")
    assert planner.find_path((0, 0), (9, 9)) == (None, "Destination point is obstructed.")


def test_planner_reports_no_path():
    grid = GridMap.open(5, 5)
    grid.set_blocked([(2, y) for y in range(5)])
    route, status = GridPlanner(grid).find_path((0, 0), (4, 4))
    assert route is None
    assert status == "No path found between start and goal."


def test_planner_rejects_unknown_algorithm(grid):
    with pytest.raises(ValueError):
        GridPlanner(grid, algorithm="dijkstra")


@patch('planners.grid_planner.jps_path')
def test_planner_forwards_budget_to_jps(mock_jps, grid):
    mock_jps.return_value = None
    GridPlanner(grid, max_expansions=10).find_path((0, 0), (4, 4))
    mock_jps.assert_called_once_with(grid, (0, 0), (4, 4), max_expansions=10)
