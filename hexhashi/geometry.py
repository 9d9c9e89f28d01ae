"""Mapping between grid cells and drawing coordinates."""

from __future__ import annotations

import math
from typing import Optional

from hexhashi.hex import HexSystem

LINE_HEIGHT = 50.0
ISLAND_SIZE = 15.0
LEFT_MARGIN = 75.0
BRIDGE_TOLERANCE = 10.0

Point = tuple[float, float]


def point_close_to_line(
    point: Point, start: Point, end: Point, max_distance: float
) -> bool:
    """Whether ``point`` lies closer than ``max_distance`` to the segment ``start``-``end``."""
    dx, dy = end[0] - start[0], end[1] - start[1]
    px, py = point[0] - start[0], point[1] - start[1]
    length_squared = dx * dx + dy * dy
    if abs(length_squared) > 2.220446049250313e-16:
        t = (px * dx + py * dy) / length_squared
    else:
        t = 0.0
    t = min(max(t, 0.0), 1.0)
    closest = (start[0] + t * dx, start[1] + t * dy)
    return math.hypot(point[0] - closest[0], point[1] - closest[1]) < max_distance


def coordinates_from_index(system: HexSystem, index: int) -> Point:
    """Drawing coordinates of the centre of the cell at ``index``."""
    thigh = LINE_HEIGHT / math.sin(60.0 * math.pi / 180.0)
    row, column = system.row_column(index)
    shift = 0.0 if row % 2 == 0 else -thigh * 0.5
    x = LEFT_MARGIN + thigh + column * thigh + shift
    y = LINE_HEIGHT + row * LINE_HEIGHT
    return (x, y)


def bridge_from_coordinates(
    system: HexSystem, x: float, y: float
) -> Optional[tuple[int, int]]:
    """The first possible bridge passing near ``(x, y)``, or None."""
    for low, high in system.bridges:
        start = coordinates_from_index(system, low)
        end = coordinates_from_index(system, high)
        if point_close_to_line((float(x), float(y)), start, end, BRIDGE_TOLERANCE):
            return (low, high)
    return None


def islands_at(system: HexSystem, x: float, y: float) -> list[int]:
    """Indices of cells whose drawn island covers ``(x, y)``."""
    result = []
    for index in range(len(system.islands)):
        cx, cy = coordinates_from_index(system, index)
        if math.hypot(cx - x, cy - y) <= ISLAND_SIZE:
            result.append(index)
    return result