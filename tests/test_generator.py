import pytest

from hexhashi.generator import GameParameters, generate
from hexhashi.hex import BridgeState, grid_size

PARAMS = [
    GameParameters(seed=1, max_columns=4, max_rows=5, num_islands=5, max_bridge_length=2),
    GameParameters(seed=1, max_columns=4, max_rows=5, num_islands=8, max_bridge_length=3),
    GameParameters(seed=1, max_columns=15, max_rows=15, num_islands=28, max_bridge_length=7),
    GameParameters(seed=63, max_columns=10, max_rows=10, num_islands=40, max_bridge_length=10),
]


def _bridged_targets(system):
    return {
        index: island.target
        for index, island in enumerate(system.islands)
        if island.is_bridged()
    }


@pytest.mark.parametrize("params", PARAMS)
def test_grid_dimensions(params):
    system = generate(params)
    assert system.columns == params.max_columns
    assert system.rows == params.max_rows
    assert len(system.islands) == grid_size(params.max_columns, params.max_rows)


@pytest.mark.parametrize("params", PARAMS)
def test_island_count_within_limit(params):
    system = generate(params)
    count = sum(island.is_bridged() for island in system.islands)
    assert 2 <= count <= params.num_islands


@pytest.mark.parametrize("params", PARAMS)
def test_targets_are_positive_and_sum_even(params):
    system = generate(params)
    targets = [island.target for island in system.islands if island.is_bridged()]
    assert all(target >= 1 for target in targets)
    assert sum(targets) % 2 == 0


@pytest.mark.parametrize("params", PARAMS)
def test_bridges_start_empty_between_islands(params):
    system = generate(params)
    assert system.bridges
    for (low, high), bridge in system.bridges.items():
        assert low < high
        assert system.islands[low].is_bridged()
        assert system.islands[high].is_bridged()
        assert bridge.state is BridgeState.EMPTY
        assert all(not system.islands[gap].is_bridged() for gap in bridge.gap_indices)


@pytest.mark.parametrize("params", PARAMS)
def test_generated_puzzle_is_unsolved(params):
    assert generate(params).is_solved() is False


@pytest.mark.parametrize("params", PARAMS)
def test_generation_is_deterministic(params):
    first = generate(params)
    second = generate(params)
    first_targets = _bridged_targets(first)
    assert len(first_targets) >= 2
    assert first_targets == _bridged_targets(second)
    assert sorted(first.bridges) == sorted(second.bridges)
    for index in first_targets:
        assert first.actual_bridges(index) == 0


def test_rendering_has_frame():
    text = str(generate(PARAMS[0]))
    lines = text.split("\n")
    assert lines[0].startswith("\u250f")
    assert lines[-1].endswith("\u251b")
    assert len(lines) == 5 + 2


def test_zero_bridge_length_rejected():
    params = GameParameters(seed=1, max_columns=4, max_rows=5, num_islands=5, max_bridge_length=0)
    with pytest.raises(ValueError):
        generate(params)