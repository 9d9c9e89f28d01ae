"""Random puzzle generation on the hexagonal grid."""

from __future__ import annotations

import random
from dataclasses import dataclass

from hexhashi.hex import (
    BridgeState,
    HexSystem,
    Island,
    IslandKind,
    connected_indices,
    fill_bridges,
    grid_size,
)

_DIRECTIONS = 6


@dataclass(frozen=True)
class GameParameters:
    """Settings that control the size and shape of a generated puzzle."""

    seed: int
    max_columns: int
    max_rows: int
    num_islands: int
    max_bridge_length: int
    ratio_big_island: float = 0.0
    ratio_long_bridge: float = 0.0


def _walk(
    cells: list[IslandKind],
    params: GameParameters,
    start: int,
    direction: int,
    length: int,
) -> int:
    """Walk from ``start`` in ``direction`` and return the cell where the bridge ends.

    The walk stops at the grid edge, after ``length`` steps, or on a non-empty cell.
    Cells passed over by a bridge longer than one step are marked as blocked.
    """
    current = start
    remaining = length
    while True:
        following = connected_indices(params.max_columns, params.max_rows, current)[direction]
        if following is None:
            return current
        current = following
        remaining -= 1
        if remaining == 0 or cells[current] is not IslandKind.EMPTY:
            return current
        if length > 1:
            cells[current] = IslandKind.BLOCKED


def _islands_from_bridges(
    size: int, widths: dict[tuple[int, int], BridgeState]
) -> list[Island]:
    targets = [0] * size
    for (low, high), state in widths.items():
        targets[low] += state.value
        targets[high] += state.value
    return [
        Island(IslandKind.BRIDGED, target) if index in _ends(widths) else Island()
        for index, target in enumerate(targets)
    ]


def _ends(widths: dict[tuple[int, int], BridgeState]) -> set[int]:
    return {end for key in widths for end in key}


def generate(params: GameParameters) -> HexSystem:
    """Generate a new, unsolved puzzle from ``params``.

    A random tour is walked over the grid, choosing direction, length and width of
    each bridge. The islands it visits, with the number of bridges the tour built at
    each, become the puzzle; every possible bridge between them starts out empty.
    """
    if params.max_bridge_length < 1:
        raise ValueError("max_bridge_length must be at least 1")
    size = grid_size(params.max_columns, params.max_rows)
    if size < 1:
        raise ValueError("the grid must hold at least one cell")

    rng = random.Random(params.seed)
    cells = [IslandKind.EMPTY] * size
    start = rng.randrange(size)
    cells[start] = IslandKind.BRIDGED
    widths: dict[tuple[int, int], BridgeState] = {}

    attempts_left = 50
    while (
        sum(kind is IslandKind.BRIDGED for kind in cells) < params.num_islands
        and attempts_left > 0
    ):
        direction = rng.randrange(_DIRECTIONS)
        length = rng.randint(1, params.max_bridge_length)
        width = rng.randint(1, 2)

        end = _walk(cells, params, start, direction, length)
        if start != end and cells[end] is not IslandKind.BLOCKED:
            key = (min(start, end), max(start, end))
            if key in widths:
                widths[key] = BridgeState.FULL
            else:
                widths[key] = BridgeState.PARTIAL if width == 1 else BridgeState.FULL
            cells[end] = IslandKind.BRIDGED
            start = end
        else:
            attempts_left -= 1

    islands = _islands_from_bridges(size, dict(sorted(widths.items())))
    bridges = fill_bridges(islands, params.max_columns, params.max_rows)
    return HexSystem(params.max_columns, params.max_rows, islands, bridges)