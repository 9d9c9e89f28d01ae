import pytest

from hexhashi.difficulty import Difficulty
from hexhashi.gui import parse_args


def test_defaults():
    args = parse_args([])
    assert args.difficulty is None
    assert args.seed is None


def test_difficulty_and_seed():
    args = parse_args(["--difficulty", "Hard", "--seed", "5"])
    assert args.difficulty is Difficulty.HARD
    assert args.seed == 5


@pytest.mark.parametrize("level", list(Difficulty))
def test_every_difficulty_is_accepted(level):
    assert parse_args(["--difficulty", level.value]).difficulty is level


def test_unknown_difficulty_is_rejected():
    with pytest.raises(SystemExit) as info:
        parse_args(["--difficulty", "impossible"])
    assert info.value.code == 2


def test_seed_must_be_integer():
    with pytest.raises(SystemExit) as info:
        parse_args(["--seed", "abc"])
    assert info.value.code == 2