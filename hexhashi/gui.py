"""Desktop window for playing the puzzle."""

from __future__ import annotations

import argparse
import math
import time
from functools import partial
from typing import Optional, Sequence

from hexhashi.difficulty import Difficulty, game_parameters
from hexhashi.generator import generate
from hexhashi.geometry import ISLAND_SIZE, coordinates_from_index
from hexhashi.hex import BridgeState, connected_indices
from hexhashi.session import GameSession

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
BRIDGE_COLOR = "dodgerblue"
GRID_COLOR = "dimgrey"
HOVER_COLOR = "darkseagreen"
BLOCKED_COLOR = "red"
FONT = ("Arial", 12)


def _new_seed() -> int:
    return time.time_ns() // 1_000_000


class GameWindow:
    """Start screen with the difficulty choice and the board of a running game."""

    def __init__(
        self, root, difficulty: Optional[Difficulty] = None, seed: Optional[int] = None
    ) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.root = root
        self.seed = seed
        self.session: Optional[GameSession] = None

        self._start = tk.Frame(root)
        tk.Label(self._start, text="hexhashi", font=("Arial", 24)).pack(pady=10)
        tk.Label(self._start, text="Select difficulty level to start game.").pack(pady=5)
        for level in Difficulty:
            tk.Button(
                self._start,
                text=level.value.capitalize(),
                width=12,
                command=partial(self.start_game, level),
            ).pack(pady=2)

        self._game = tk.Frame(root)
        menu = tk.Frame(self._game)
        menu.pack(fill=tk.X)
        tk.Label(menu, text="hexhashi").pack(side=tk.LEFT, padx=5)
        tk.Button(menu, text="Back", command=self.show_start).pack(side=tk.LEFT)
        self.canvas = tk.Canvas(
            self._game, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, highlightthickness=0
        )
        self.canvas.pack(fill=tk.X, expand=True)
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<Leave>", self._on_leave)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())

        if difficulty is None:
            self.show_start()
        else:
            self.start_game(difficulty)

    def show_start(self) -> None:
        """Leave any running game and show the difficulty choice."""
        self.session = None
        self._game.pack_forget()
        self._start.pack(fill=self._tk.BOTH, expand=True)
        self.root.title("hexhashi")

    def start_game(self, difficulty: Difficulty) -> None:
        """Generate a puzzle of ``difficulty`` and show the board."""
        seed = self.seed if self.seed is not None else _new_seed()
        self.session = GameSession(generate(game_parameters(difficulty, seed)))
        self.root.title(f"hexhashi - {difficulty.value} (seed {seed})")
        self._start.pack_forget()
        self._game.pack(fill=self._tk.BOTH, expand=True)
        self.redraw()

    def _on_press(self, event) -> None:
        if self.session is None:
            return
        self.session.press(event.x, event.y)
        self.redraw()
        if self.session.solved:
            self._messagebox.showinfo("hexhashi", "Congratulations!")
            self.show_start()

    def _on_release(self, _event) -> None:
        if self.session is not None:
            self.session.release()
            self.redraw()

    def _on_motion(self, event) -> None:
        if self.session is not None:
            self.session.hover(event.x, event.y)
            self.redraw()

    def _on_leave(self, _event) -> None:
        if self.session is not None:
            self.session.leave()
            self.redraw()

    def redraw(self) -> None:
        """Draw the grid, the bridges and the islands of the running game."""
        canvas = self.canvas
        canvas.delete("all")
        if self.session is None:
            return
        self._draw_grid()
        self._draw_bridges()
        self._draw_islands()

    def _line(self, start, end, **options) -> None:
        self.canvas.create_line(start[0], start[1], end[0], end[1], **options)

    def _draw_grid(self) -> None:
        system = self.session.system
        for index in range(len(system.islands)):
            start = coordinates_from_index(system, index)
            for other in connected_indices(system.columns, system.rows, index):
                if other is not None:
                    end = coordinates_from_index(system, other)
                    self._line(start, end, fill=GRID_COLOR, width=0.5)

    def _draw_bridges(self) -> None:
        session = self.session
        system = session.system
        background = self.canvas.cget("background")
        for (low, high), bridge in system.bridges.items():
            start = coordinates_from_index(system, low)
            end = coordinates_from_index(system, high)
            if bridge.state is BridgeState.PARTIAL:
                self._line(start, end, fill=BRIDGE_COLOR, width=4)
            elif bridge.state is BridgeState.FULL:
                self._line(start, end, fill=BRIDGE_COLOR, width=10)
                self._line(start, end, fill=background, width=4)
                self._line(start, end, fill=GRID_COLOR, width=0.5)

        highlighted = session.highlighted_bridges()
        for key in system.bridges:
            start = coordinates_from_index(system, key[0])
            end = coordinates_from_index(system, key[1])
            if session.pressed != key and key in highlighted:
                self._line(start, end, fill=HOVER_COLOR, width=10, stipple="gray25")
            if session.blocked == key:
                self._line(start, end, fill=BLOCKED_COLOR, width=6)

    def _draw_islands(self) -> None:
        session = self.session
        system = session.system
        highlighted = session.highlighted_islands()
        for index, island in enumerate(system.islands):
            colors = session.island_colors(index)
            if colors is None:
                continue
            fill, text_color = colors
            x, y = coordinates_from_index(system, index)
            self.canvas.create_oval(
                x - ISLAND_SIZE, y - ISLAND_SIZE, x + ISLAND_SIZE, y + ISLAND_SIZE,
                fill=fill, outline="",
            )
            if index in highlighted:
                ring = ISLAND_SIZE + 5
                self.canvas.create_oval(
                    x - ring, y - ring, x + ring, y + ring,
                    outline=HOVER_COLOR, width=3,
                )
            self.canvas.create_text(
                x, y, text=str(island.target), fill=text_color, font=FONT, anchor="center"
            )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Read the command line: an optional difficulty to start with and a fixed seed."""
    parser = argparse.ArgumentParser(
        prog="hexhashi", description="Connect the islands of a hexagonal bridges puzzle."
    )

    def difficulty(text: str) -> Difficulty:
        try:
            return Difficulty.parse(text)
        except ValueError as error:
            raise argparse.ArgumentTypeError(str(error)) from None

    parser.add_argument(
        "--difficulty",
        type=difficulty,
        default=None,
        help="start a game right away: easy, medium, hard or extreme",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the puzzle generator"
    )
    args = parser.parse_args(argv)
    if args.seed is not None and not math.isfinite(args.seed):
        parser.error("seed must be finite")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window."""
    args = parse_args(argv)
    import tkinter as tk

    root = tk.Tk()
    root.title("hexhashi")
    GameWindow(root, args.difficulty, args.seed)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())