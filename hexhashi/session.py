"""Interaction state of a puzzle being played: pressing bridges and hovering."""

from __future__ import annotations

from typing import Optional

from hexhashi.geometry import (
    BRIDGE_TOLERANCE,
    bridge_from_coordinates,
    coordinates_from_index,
    islands_at,
    point_close_to_line,
)
from hexhashi.hex import BridgeBlocked, BridgeNotFound, HexSystem

ISLAND_COLOR = ("white", "black")
UNFINISHED_ISLAND_COLOR = ("gold", "dimgray")
FINISHED_ISLAND_COLOR = ("green", "white")

BridgeKey = tuple[int, int]


class GameSession:
    """A puzzle together with the pointer state of the player."""

    def __init__(self, system: HexSystem) -> None:
        self.system = system
        self.pressed: Optional[BridgeKey] = None
        self.blocked: Optional[BridgeKey] = None
        self.solved = False
        self.pointer: Optional[tuple[float, float]] = None

    def press(self, x: float, y: float) -> Optional[BridgeKey]:
        """Cycle the bridge under ``(x, y)``; return it, or None if there is none."""
        bridge = bridge_from_coordinates(self.system, x, y)
        if bridge is None:
            return None
        self.pressed = bridge
        try:
            self.solved = self.system.cycle_bridge(*bridge)
        except BridgeBlocked:
            self.blocked = bridge
        except BridgeNotFound:
            pass
        return bridge

    def release(self) -> None:
        """End a press: forget the pressed and the blocked bridge."""
        self.pressed = None
        self.blocked = None

    def hover(self, x: float, y: float) -> None:
        """Record the pointer position."""
        self.pointer = (float(x), float(y))

    def leave(self) -> None:
        """The pointer has left the board."""
        self.pointer = None

    def highlighted_bridges(self) -> list[BridgeKey]:
        """Bridges of the island under the pointer, then bridges near the pointer."""
        if self.pointer is None:
            return []
        x, y = self.pointer
        result: list[BridgeKey] = []
        covered = islands_at(self.system, x, y)
        if covered:
            index = covered[0]
            result = [
                (min(index, other), max(index, other))
                for other in self.system.connected_islands(index)
            ]
        for low, high in self.system.bridges:
            start = coordinates_from_index(self.system, low)
            end = coordinates_from_index(self.system, high)
            if point_close_to_line(self.pointer, start, end, BRIDGE_TOLERANCE):
                result.append((low, high))
        return result

    def highlighted_islands(self) -> list[int]:
        """Cells whose island lies under the pointer."""
        if self.pointer is None:
            return []
        return islands_at(self.system, *self.pointer)

    def island_colors(self, index: int) -> Optional[tuple[str, str]]:
        """Fill and text colour of the island at ``index``; None for a cell without one."""
        island = self.system.islands[index]
        if not island.is_bridged():
            return None
        actual = self.system.actual_bridges(index)
        if actual == 0:
            return ISLAND_COLOR
        if actual != island.target:
            return UNFINISHED_ISLAND_COLOR
        return FINISHED_ISLAND_COLOR