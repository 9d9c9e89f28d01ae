"""Difficulty levels and the puzzle settings that belong to each."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from hexhashi.generator import GameParameters

_COLUMNS = 10
_ROWS = 10


class Difficulty(Enum):
    """How hard a generated puzzle is."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"

    @classmethod
    def parse(cls, text: str) -> Difficulty:
        """Read a difficulty name, ignoring case."""
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"Cannot convert to difficulty: {text!r}") from None

    def __str__(self) -> str:
        return self.value


# (number of islands, longest bridge) for each level
_SETTINGS: dict[Difficulty, tuple[int, int]] = {
    Difficulty.EASY: (10, 1),
    Difficulty.MEDIUM: (20, 3),
    Difficulty.HARD: (25, 5),
    Difficulty.EXTREME: (50, 7),
}


def game_parameters(difficulty: Optional[Difficulty], seed: int) -> GameParameters:
    """Generator settings for ``difficulty``; an unknown level plays as easy."""
    num_islands, max_bridge_length = _SETTINGS.get(difficulty, _SETTINGS[Difficulty.EASY])
    return GameParameters(
        seed=seed,
        max_columns=_COLUMNS,
        max_rows=_ROWS,
        num_islands=num_islands,
        max_bridge_length=max_bridge_length,
        ratio_big_island=0.0,
        ratio_long_bridge=0.0,
    )