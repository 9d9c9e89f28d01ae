import pytest

from hexhashi.geometry import coordinates_from_index
from hexhashi.hex import BridgeState, HexSystem, Island, IslandKind, fill_bridges
from hexhashi.session import (
    FINISHED_ISLAND_COLOR,
    ISLAND_COLOR,
    UNFINISHED_ISLAND_COLOR,
    GameSession,
)


def _system(targets):
    islands = [Island()] * 22
    for index, target in targets.items():
        islands[index] = Island(IslandKind.BRIDGED, target)
    return HexSystem(4, 5, islands, fill_bridges(islands, 4, 5))


def _along(system, start, end, fraction):
    sx, sy = coordinates_from_index(system, start)
    ex, ey = coordinates_from_index(system, end)
    return (sx + (ex - sx) * fraction, sy + (ey - sy) * fraction)


@pytest.fixture
def simple():
    return GameSession(_system({0: 1, 2: 1, 3: 1, 15: 1}))


def test_press_cycles_bridge(simple):
    point = _along(simple.system, 0, 2, 0.5)
    assert simple.press(*point) == (0, 2)
    assert simple.pressed == (0, 2)
    assert simple.system.get_bridge(0, 2).state is BridgeState.PARTIAL
    assert simple.solved is False


def test_press_twice_makes_full_bridge(simple):
    point = _along(simple.system, 0, 2, 0.5)
    simple.press(*point)
    simple.release()
    simple.press(*point)
    assert simple.system.get_bridge(0, 2).count() == 2


def test_press_away_from_bridges(simple):
    assert simple.press(0, 0) is None
    assert simple.pressed is None
    assert all(b.state is BridgeState.EMPTY for b in simple.system.bridges.values())


def test_blocked_press_is_recorded_and_released():
    session = GameSession(_system({0: 1, 4: 1, 6: 1, 15: 1}))
    session.system.cycle_bridge(0, 15)
    point = _along(session.system, 4, 6, 0.25)
    assert session.press(*point) == (4, 6)
    assert session.blocked == (4, 6)
    assert session.system.get_bridge(4, 6).state is BridgeState.EMPTY
    session.release()
    assert session.blocked is None
    assert session.pressed is None


def test_press_solves_puzzle():
    session = GameSession(_system({0: 1, 1: 1}))
    session.press(*_along(session.system, 0, 1, 0.5))
    assert session.solved is True


def test_hover_over_island(simple):
    simple.hover(*coordinates_from_index(simple.system, 0))
    assert simple.highlighted_islands() == [0]
    highlighted = simple.highlighted_bridges()
    for other in simple.system.connected_islands(0):
        assert (min(0, other), max(0, other)) in highlighted


def test_hover_near_bridge(simple):
    simple.hover(*_along(simple.system, 2, 3, 0.5))
    assert simple.highlighted_islands() == []
    assert simple.highlighted_bridges() == [(2, 3)]


def test_leave_clears_highlights(simple):
    simple.hover(*coordinates_from_index(simple.system, 0))
    simple.leave()
    assert simple.highlighted_islands() == []
    assert simple.highlighted_bridges() == []


def test_island_colors():
    session = GameSession(_system({0: 1, 2: 2, 3: 1, 15: 1}))
    assert session.island_colors(0) == ISLAND_COLOR
    assert session.island_colors(1) is None
    session.system.cycle_bridge(0, 2)
    assert session.island_colors(0) == FINISHED_ISLAND_COLOR
    assert session.island_colors(2) == UNFINISHED_ISLAND_COLOR