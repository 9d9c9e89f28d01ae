# hexhashi

A bridges puzzle (Hashiwokakero) played on a hexagonal grid.

Every numbered island says how many bridges must end at it. Islands are
joined by straight bridges along the six grid directions. A connection
holds no bridge, one bridge or two. Bridges may not cross. In the finished
puzzle every island is satisfied and all islands form one connected group.

## Installing

```
pip install .
```

The window uses `tkinter` from the standard library. Some Python
installations ship it as a separate system package.

## Playing

```
hexhashi
```

opens a window with the start screen. Pick Easy, Medium, Hard or Extreme
to generate a puzzle. Harder levels have more islands and allow longer
bridges.

Options:

- `--difficulty LEVEL` skips the start screen and begins a game at once.
  LEVEL is `easy`, `medium`, `hard` or `extreme`, in any letter case.
- `--seed N` fixes the generator seed, so the same puzzle comes back each
  time. Without it the seed comes from the clock. The window title shows
  the seed in use.

Controls:

- Click a connection to cycle it from empty, to single, to double, and
  back to empty.
- Hovering over an island highlights every connection that leaves it.
  Hovering near a connection highlights that connection.
- A connection that would cross a bridge already placed stays unchanged.
  It is marked in red while the mouse button is held down.
- An island with no bridges is white. It turns gold while its count is not
  met and green once its count is met.
- When the puzzle is solved, a "Congratulations!" message appears and the
  window returns to the start screen. The Back button returns there at any
  time.

## Using the library

```python
from hexhashi.difficulty import Difficulty, game_parameters
from hexhashi.generator import generate
from hexhashi.hex import BridgeBlocked, BridgeNotFound

params = game_parameters(Difficulty.parse("medium"), 42)
system = generate(params)
print(system)

start, end = next(iter(system.bridges))
try:
    solved = system.cycle_bridge(start, end)
except BridgeBlocked:
    print("another bridge is in the way")
except BridgeNotFound:
    print("these islands cannot be joined")
else:
    print("solved!" if solved else "keep going")
```

The modules:

- `hexhashi.hex` holds the grid model:
  - `HexSystem` stores the puzzle. `is_solved()` checks a position,
    `actual_bridges(index)` counts the bridges built at an island,
    `connected_islands(index)` lists the islands it can be joined to,
    `get_bridge(start, end)` returns one connection, and `row_column(index)`
    gives the grid position. Calling `str()` on a `HexSystem` draws it as text.
  - `HexBridge` cycles through the `BridgeState` values.
  - `Island` and `IslandKind` describe the grid cells.
  - `connected_indices`, `grid_size` and `fill_bridges` are helpers for the
    grid.
  - `BridgeNotFound` and `BridgeBlocked` both derive from `BridgeError`.
- `hexhashi.generator`: `generate(params)` builds an unsolved puzzle from
  `GameParameters`. The same seed always gives the same puzzle.
  `ratio_big_island` and `ratio_long_bridge` are accepted but do not affect
  the result.
- `hexhashi.difficulty`: `Difficulty` and `game_parameters(difficulty, seed)`.
  The grid is always 10 × 10. An unknown level (`None`) plays as easy.
- `hexhashi.geometry`: drawing coordinates of cells, `point_close_to_line`,
  and hit tests with `bridge_from_coordinates` and `islands_at`.
- `hexhashi.session`: `GameSession` tracks presses, hovering, highlighting
  and island colours, with no window needed.
- `hexhashi.gui`: the Tk window (`GameWindow`), `parse_args` and `main`.

## What it does not do

Games are not saved or restored. Generated puzzles always use the full
10 × 10 grid and are not cropped to the islands they contain. The package
does not check that a generated puzzle has only one solution.

## Running the tests

```
pip install .[test]
pytest
```