"""Hexagonal grid model for the bridges puzzle: islands, bridges and solution checks.

Islands are stored in a linear space where index 0 is the top left cell.
Even rows hold ``columns`` cells, odd rows hold ``columns + 1`` cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

Neighbours = tuple[
    Optional[int], Optional[int], Optional[int], Optional[int], Optional[int], Optional[int]
]


class BridgeState(Enum):
    """How many lanes of a bridge are built."""

    EMPTY = 0
    PARTIAL = 1
    FULL = 2


class BridgeError(Exception):
    """Base class for errors raised when changing a bridge."""


class BridgeNotFound(BridgeError):
    """There is no possible bridge between the two islands."""

    def __init__(self, message: str = "Bridge is not found.") -> None:
        super().__init__(message)


class BridgeBlocked(BridgeError):
    """Another built bridge crosses the requested one."""

    def __init__(self, message: str = "Bridge is blocked.") -> None:
        super().__init__(message)


class IslandKind(Enum):
    """What occupies a grid cell."""

    EMPTY = "empty"
    BRIDGED = "bridged"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Island:
    """A grid cell; bridged islands carry the target number of bridges."""

    kind: IslandKind = IslandKind.EMPTY
    target: int = 0

    def is_bridged(self) -> bool:
        return self.kind is IslandKind.BRIDGED


@dataclass
class HexBridge:
    """A possible bridge and the empty cells it passes over."""

    state: BridgeState = BridgeState.EMPTY
    gap_indices: list[int] = field(default_factory=list)

    def cycle(self) -> int:
        """Advance to the next state (empty, partial, full, empty) and return its count."""
        self.state = BridgeState((self.state.value + 1) % len(BridgeState))
        return self.state.value

    def count(self) -> int:
        """Number of lanes currently built."""
        return self.state.value


def _key(start: int, end: int) -> tuple[int, int]:
    return (min(start, end), max(start, end))


def connected_indices(columns: int, rows: int, index: int) -> Neighbours:
    """Neighbouring cell indices in the order NW, NE, E, SE, SW, W; None at edges."""
    offset = index % (2 * columns + 1)
    even_row = offset < columns
    first_column = index - offset + (0 if even_row else columns)
    last_column = first_column + columns - 1 + (0 if even_row else 1)
    row_end = last_column + (1 if even_row else 0)

    nw = ne = east = se = sw = west = None
    if index >= columns:
        if even_row or index != first_column:
            nw = index - columns - 1
        if index != row_end:
            ne = index - columns
    if index != first_column:
        west = index - 1
    if index != last_column:
        east = index + 1
    if index <= (rows - 1) * columns + 1:
        if even_row or index != first_column:
            sw = index + columns
        if index != row_end:
            se = index + columns + 1
    return (nw, ne, east, se, sw, west)


def grid_size(columns: int, rows: int) -> int:
    """Number of cells needed to store a ``columns`` x ``rows`` grid."""
    return columns * rows + rows // 2


def fill_bridges(
    islands: list[Island], columns: int, rows: int
) -> dict[tuple[int, int], HexBridge]:
    """Create every empty bridge possible between islands, remembering the gaps crossed."""
    bridges: dict[tuple[int, int], HexBridge] = {}
    for start, island in enumerate(islands):
        if not island.is_bridged():
            continue
        for direction, first in enumerate(connected_indices(columns, rows, start)):
            if first is None:
                continue
            end: Optional[int] = None
            gaps: list[int] = []
            kind = islands[first].kind
            if kind is IslandKind.BLOCKED:
                raise ValueError(f"blocked cell {first} in a finished grid")
            if kind is IslandKind.BRIDGED:
                end = first
            else:
                gaps.append(first)
                current = first
                while (following := connected_indices(columns, rows, current)[direction]) is not None:
                    following_kind = islands[following].kind
                    if following_kind is IslandKind.BRIDGED:
                        end = following
                        break
                    if following_kind is IslandKind.BLOCKED:
                        raise ValueError(f"blocked cell {following} in a finished grid")
                    gaps.append(following)
                    current = following
            if end is not None:
                bridges[_key(start, end)] = HexBridge(BridgeState.EMPTY, gaps)
    return dict(sorted(bridges.items()))


@dataclass
class HexSystem:
    """A puzzle: grid dimensions, islands and the possible bridges between them."""

    columns: int
    rows: int
    islands: list[Island]
    bridges: dict[tuple[int, int], HexBridge] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.bridges = dict(sorted(self.bridges.items()))

    def __str__(self) -> str:
        rule = "\u2501" * (2 * self.columns + 1)
        parts = [f"\u250f{rule}\u2513\n"]
        even_row = True
        last_end = self.columns - 1
        for index, island in enumerate(self.islands):
            if index == last_end + (1 if even_row else 0) - self.columns:
                parts.append("\u2503")
                if even_row:
                    parts.append(" ")
            parts.append(str(island.target) if island.is_bridged() else " ")
            if even_row or index != last_end:
                parts.append(" ")
            if index == last_end:
                parts.append("\u2503\n")
                even_row = not even_row
                last_end += self.columns + (0 if even_row else 1)
        parts.append(f"\u2517{rule}\u251b")
        return "".join(parts)

    def connected_islands(self, index: int) -> list[int]:
        """Islands that share a possible bridge with ``index``."""
        result = []
        for low, high in self.bridges:
            if low == index:
                result.append(high)
            elif high == index:
                result.append(low)
        return result

    def cycle_bridge(self, start: int, end: int) -> bool:
        """Cycle the bridge between two islands and return whether the puzzle is solved.

        Raises BridgeNotFound if no such bridge exists and BridgeBlocked if a built
        bridge crosses it.
        """
        key = _key(start, end)
        bridge = self.bridges.get(key)
        if bridge is None:
            raise BridgeNotFound()
        gaps = set(bridge.gap_indices)
        blocked = any(
            other.state is not BridgeState.EMPTY and not gaps.isdisjoint(other.gap_indices)
            for other_key, other in self.bridges.items()
            if other_key != key
        )
        if blocked:
            raise BridgeBlocked()
        bridge.cycle()
        return self.is_solved()

    def get_bridge(self, start: int, end: int) -> Optional[HexBridge]:
        """The bridge between two islands, or None."""
        return self.bridges.get(_key(start, end))

    def row_column(self, index: int) -> tuple[int, int]:
        """Row and column of the cell at ``index``."""
        width = 2 * self.columns + 1
        offset = index % width
        even_row = offset < self.columns
        row = 2 * (index // width) + (0 if even_row else 1)
        column = offset - (0 if even_row else self.columns)
        return (row, column)

    def actual_bridges(self, index: int) -> int:
        """Number of bridge lanes currently built at island ``index``."""
        return sum(
            self.bridges[_key(index, other)].count()
            for other in self.connected_islands(index)
            if _key(index, other) in self.bridges
        )

    def _built_neighbours(self, index: int) -> list[int]:
        return [
            other
            for other in self.connected_islands(index)
            if self.bridges[_key(index, other)].count() > 0
        ]

    def is_solved(self) -> bool:
        """Whether all islands are connected and satisfied by the built bridges."""
        remaining = {i for i, island in enumerate(self.islands) if island.is_bridged()}
        if not remaining:
            raise ValueError("the puzzle has no islands")
        start = min(remaining)
        visited = {start}
        remaining.discard(start)
        frontier = self._built_neighbours(start)
        while True:
            for island_index in frontier:
                if island_index in visited:
                    continue
                island = self.islands[island_index]
                if not (
                    island.is_bridged()
                    and island.target == self.actual_bridges(island_index)
                ):
                    return False
                remaining.discard(island_index)
                visited.add(island_index)
            frontier = [
                other
                for island_index in frontier
                for other in self._built_neighbours(island_index)
                if other not in visited
            ]
            if not frontier:
                break
        return not remaining