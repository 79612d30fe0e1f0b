"""Interactive GeeseSpotter game played over text streams."""

from __future__ import annotations

import random
import sys
from typing import Optional, Protocol, TextIO

from geesespotter.board import Board, MarkResult, RevealResult

X_DIM_MAX = 60
Y_DIM_MAX = 20


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Game:
    """A game session reading commands from one stream and writing to another."""

    def __init__(
        self,
        input_stream: TextIO,
        output_stream: TextIO,
        rng: Optional[_RandomSource] = None,
    ) -> None:
        self.input = input_stream
        self.output = output_stream
        self.rng = rng if rng is not None else random.Random()
        self.board: Optional[Board] = None
        self.num_geese = 0
        self._pending = ""

    # -- input helpers -------------------------------------------------

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _skip_whitespace(self) -> None:
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                return
            line = self.input.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending = line

    def _read_char(self) -> str:
        self._skip_whitespace()
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def _read_int(self) -> Optional[int]:
        """Read the next whitespace-separated token as an integer, or None."""
        self._skip_whitespace()
        parts = self._pending.split(None, 1)
        token = parts[0]
        self._pending = parts[1] if len(parts) > 1 else ""
        try:
            return int(token)
        except ValueError:
            return None

    def _print_board(self) -> None:
        assert self.board is not None
        self._write(self.board.render())

    # -- game actions --------------------------------------------------

    def start(self) -> None:
        """Ask for the board's size and number of geese, then set up a new board."""
        self._write("Welcome to GeeseSpotter!\n")
        while True:
            self._write(f"Please enter the x dimension (max {X_DIM_MAX}): ")
            width = self._read_int()
            if width is not None and 1 <= width <= X_DIM_MAX:
                break
        while True:
            self._write(f"Please enter the y dimension (max {Y_DIM_MAX}): ")
            height = self._read_int()
            if height is not None and 1 <= height <= Y_DIM_MAX:
                break

        self._write("Please enter the number of geese: ")
        geese = self._read_int()
        while geese is None or not 0 <= geese <= width * height:
            self._write("That's too many geese!\n")
            self._write("Please enter the number of geese: ")
            geese = self._read_int()

        board = Board(width, height)
        board.spread_geese(geese, self.rng)
        board.compute_neighbours()
        board.hide()
        self.board = board
        self.num_geese = geese

    def get_action(self) -> str:
        """Prompt for an action and return it as an upper-case letter."""
        self._write("Please enter the action ([S]how, [M]ark, [R]estart, [Q]uit): ")
        return self._read_char().upper()

    def _read_location(self, verb: str) -> Optional[tuple[int, int]]:
        self._write(f"Please enter the x location to {verb}: ")
        x = self._read_int()
        self._write(f"Please enter the y location to {verb}: ")
        y = self._read_int()
        assert self.board is not None
        if x is None or y is None or not self.board.contains(x, y):
            self._write("Location entered is not on the board.\n")
            return None
        return x, y

    def show(self) -> None:
        """Ask for a location and reveal it."""
        location = self._read_location("show")
        if location is None:
            return
        assert self.board is not None
        if self.board.is_marked(*location):
            self._write("Location is marked, and therefore cannot be revealed.\n")
            self._write("Use Mark on location to unmark.\n")
        elif self.board.reveal(*location) is RevealResult.GOOSE:
            self._write("You disturbed a goose! Your game has ended.\n")
            self._print_board()
            self._write("Starting a new game.\n")
            self.start()

    def mark(self) -> None:
        """Ask for a location and toggle its mark."""
        location = self._read_location("mark")
        if location is None:
            return
        assert self.board is not None
        if self.board.mark(*location) is MarkResult.ALREADY_REVEALED:
            self._write("Position already revealed, so cannot be marked.\n")

    def _play(self) -> None:
        self.start()
        action = ""
        while action != "Q":
            if action == "S":
                self.show()
            elif action == "M":
                self.mark()
            elif action == "R":
                self._write("Restarting the game.\n")
                self.start()

            self._print_board()

            assert self.board is not None
            if self.board.is_won():
                self._write(
                    "You have revealed all the fields without disturbing a goose!\n"
                )
                self._write("YOU WON!!!\n")
                self.board.reveal_all()
                self._print_board()
                self._write("Resetting the game board.\n")
                self.start()
                self._print_board()

            action = self.get_action()

    def run(self) -> bool:
        """Play until the player quits or the input runs out."""
        try:
            self._play()
        except EOFError:
            pass
        return True


def main(argv: Optional[list[str]] = None) -> int:
    """Play GeeseSpotter on the terminal."""
    Game(sys.stdin, sys.stdout, random.Random()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())