import pytest
import numpy as np

from grid_map import GridMap
from utils.a_star import AStarPlanner
from utils.geometry import octile_distance
from utils.grid_graph import dijkstra_cost
from utils.jump_point_search import jps_path


@pytest.fixture
def planner():
    return AStarPlanner()


def test_a_star_finds_path_in_open_grid(planner):
    grid = GridMap.open(10, 10)
    start, goal = (1, 1), (8, 6)
    route = planner.find_path(grid, start, goal)
    assert route is not None
    assert route.path[0] == start
    assert route.path[-1] == goal
    assert route.total_cost == pytest.approx(octile_distance(start, goal))


def test_a_star_returns_none_if_no_path(planner):
    grid = np.full((10, 10), True)
    grid[7:10, 7:10] = False
    grid[8, 8] = True
    route = planner.find_path(GridMap(grid), (1, 1), (8, 8))
    assert route is None


def test_a_star_navigates_simple_obstacle(planner):
    grid = np.full((10, 10), True)
    grid[2:9, 5] = False
    grid_map = GridMap(grid)
    route = planner.find_path(grid_map, (1, 5), (8, 5))
    assert route is not None
    for point in route.path:
        assert grid_map.is_traversable(point)


def test_a_star_start_is_goal(planner):
    route = planner.find_path(GridMap.open(3, 3), (1, 1), (1, 1))
    assert route.total_cost == 0.0
    assert route.path == [(1, 1)]


def test_a_star_respects_max_expansions():
    planner = AStarPlanner(max_expansions=2)
    assert planner.find_path(GridMap.open(20, 20), (0, 0), (19, 19)) is None
    assert planner.expansions == 2


def test_a_star_and_jps_agree_on_cost(planner):
    rows = [
        "..........",
        "..#####...",
        "......#...",
        "......#...",
        "..#####...",
        "..........",
    ]
    grid = GridMap.from_strings(rows)
    start, goal = (4, 3), (9, 3)
    a_star_route = planner.find_path(grid, start, goal)
    jps_route = jps_path(grid, start, goal)
    assert a_star_route.total_cost == pytest.approx(dijkstra_cost(grid, start, goal))
    assert jps_route.total_cost == pytest.approx(a_star_route.total_cost)
