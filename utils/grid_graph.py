# FILE: utils/grid_graph.py
from typing import Optional
import networkx as nx
import numpy as np

from grid_map import GridMap
from planners.search_components import GridPosition

# Half of the 8-neighbourhood; the other half is covered from the neighbour's side.
_FORWARD_MOVES = [(1, 0), (0, 1), (1, 1), (1, -1)]


def build_grid_graph(grid_map: GridMap) -> nx.Graph:
    """Builds an undirected graph of traversable cells, 8-connected, weighted by step length."""
    graph = nx.Graph()
    cells = grid_map.traversable_cells()
    graph.add_nodes_from(cells)
    for x, y in cells:
        for dx, dy in _FORWARD_MOVES:
            neighbor = (x + dx, y + dy)
            if grid_map.is_traversable(neighbor):
                graph.add_edge((x, y), neighbor, weight=float(np.sqrt(dx**2 + dy**2)))
    return graph


def dijkstra_cost(grid_map: GridMap, start: GridPosition, goal: GridPosition,
                  graph: Optional[nx.Graph] = None) -> Optional[float]:
    """Exhaustive shortest-path cost between two cells, or None if they are not connected."""
    start, goal = tuple(start), tuple(goal)
    if graph is None:
        graph = build_grid_graph(grid_map)
    if start not in graph or goal not in graph:
        return None
    try:
        return float(nx.dijkstra_path_length(graph, start, goal, weight="weight"))
    except nx.NetworkXNoPath:
        return None
