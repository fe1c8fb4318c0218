# FILE: utils/movingai.py
"""Readers for the MovingAI grid benchmark formats (.map and .map.scen files)."""
import logging
import os
from dataclasses import dataclass
from typing import List

from config import MOVINGAI_SCENARIO_VERSION, MOVINGAI_TRAVERSABLE_TERRAIN
from grid_map import GridMap
from planners.search_components import GridPosition


class MapFormatError(ValueError):
    """Raised when a map or scenario file does not follow the MovingAI layout."""


@dataclass(frozen=True)
class Scenario:
    """One benchmark problem from a scenario file."""
    bucket: int
    map_name: str
    map_width: int
    map_height: int
    start: GridPosition
    goal: GridPosition
    optimal_length: float


def parse_map(text: str) -> GridMap:
    lines = [line.rstrip("\r") for line in text.splitlines()]
    header = {}
    index = 0
    while index < len(lines):
        line = lines[index].strip()
        index += 1
        if not line:
            continue
        if line == "map":
            break
        key, _, value = line.partition(" ")
        header[key] = value.strip()
    else:
        raise MapFormatError("Map header is not terminated by a 'map' line.")

    try:
        height, width = int(header["height"]), int(header["width"])
    except KeyError as e:
        raise MapFormatError(f"Map header is missing {e.args[0]!r}.") from e
    except ValueError as e:
        raise MapFormatError(f"Map dimensions must be integers: {e}") from e

    rows = lines[index:index + height]
    if len(rows) != height:
        raise MapFormatError(f"Expected {height} map rows, found {len(rows)}.")
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapFormatError(f"Row {y} has {len(row)} cells, expected {width}.")

    if header.get("type", "octile") != "octile":
        logging.warning(f"Map type {header['type']!r} is read as octile.")
    return GridMap.from_strings(rows, traversable=MOVINGAI_TRAVERSABLE_TERRAIN)


def parse_map_file(path: str) -> GridMap:
    with open(path, "r") as f:
        grid_map = parse_map(f.read())
    logging.info(f"Loaded map {os.path.basename(path)}: {grid_map}")
    return grid_map


def parse_scen(text: str) -> List[Scenario]:
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return []
    first = lines[0].split()
    if first[0] == "version":
        if len(first) < 2 or first[1].split(".")[0] != MOVINGAI_SCENARIO_VERSION:
            raise MapFormatError(f"Unsupported scenario version line: {lines[0]!r}.")
        lines = lines[1:]

    scenarios = []
    for line_no, line in enumerate(lines, start=1):
        fields = line.split("\t") if "\t" in line else line.split()
        if len(fields) != 9:
            raise MapFormatError(f"Scenario line {line_no} has {len(fields)} fields, expected 9.")
        try:
            bucket, map_name = int(fields[0]), fields[1]
            map_width, map_height = int(fields[2]), int(fields[3])
            start = (int(fields[4]), int(fields[5]))
            goal = (int(fields[6]), int(fields[7]))
            optimal_length = float(fields[8])
        except ValueError as e:
            raise MapFormatError(f"Scenario line {line_no} is malformed: {e}") from e
        scenarios.append(Scenario(bucket, map_name, map_width, map_height, start, goal, optimal_length))
    return scenarios


def parse_scen_file(path: str) -> List[Scenario]:
    with open(path, "r") as f:
        scenarios = parse_scen(f.read())
    logging.info(f"Loaded {len(scenarios)} scenarios from {os.path.basename(path)}.")
    return scenarios
