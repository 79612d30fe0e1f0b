"""The GeeseSpotter playing field and the rules that act on it."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

MARKED_MASK = 0x10
HIDDEN_MASK = 0x20
VALUE_MASK = 0x0F
GOOSE = 9


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class MarkResult(IntEnum):
    """Outcome of marking a field."""

    TOGGLED = 0
    ALREADY_REVEALED = 2


class RevealResult(IntEnum):
    """Outcome of revealing a field."""

    REVEALED = 0
    MARKED = 1
    ALREADY_REVEALED = 2
    GOOSE = 9


class Board:
    """A grid of fields stored row by row.

    Each field keeps its value (0-8 neighbouring geese, or 9 for a goose)
    in the low four bits, plus a marked bit and a hidden bit.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells: list[int] = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"location ({x}, {y}) is not on the board")
        return y * self.width + x

    def _neighbours(self, x: int, y: int):
        for ny in range(y - 1, y + 2):
            for nx in range(x - 1, x + 2):
                if (nx, ny) != (x, y) and self.contains(nx, ny):
                    yield ny * self.width + nx

    def contains(self, x: int, y: int) -> bool:
        """Return whether (x, y) lies on the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_marked(self, x: int, y: int) -> bool:
        """Return whether the field at (x, y) is marked."""
        return bool(self.cells[self._index(x, y)] & MARKED_MASK)

    def spread_geese(self, count: int, rng: _RandomSource) -> None:
        """Place `count` geese on distinct empty fields chosen by `rng`."""
        size = len(self.cells)
        if count < 0 or count > sum(1 for cell in self.cells if cell == 0):
            raise ValueError(f"cannot place {count} geese on a board of {size} fields")
        for _ in range(count):
            while True:
                position = rng.randrange(size)
                if self.cells[position] == 0:
                    break
            self.cells[position] = GOOSE

    def compute_neighbours(self) -> None:
        """Set every field without a goose to the number of adjacent geese."""
        for y in range(self.height):
            for x in range(self.width):
                index = y * self.width + x
                if self.cells[index] & VALUE_MASK == GOOSE:
                    continue
                self.cells[index] = sum(
                    1
                    for neighbour in self._neighbours(x, y)
                    if self.cells[neighbour] & VALUE_MASK == GOOSE
                )

    def hide(self) -> None:
        """Hide every field."""
        self.cells = [cell | HIDDEN_MASK for cell in self.cells]

    def mark(self, x: int, y: int) -> MarkResult:
        """Toggle the mark on a hidden field."""
        index = self._index(x, y)
        if not self.cells[index] & HIDDEN_MASK:
            return MarkResult.ALREADY_REVEALED
        self.cells[index] ^= MARKED_MASK
        return MarkResult.TOGGLED

    def reveal(self, x: int, y: int) -> RevealResult:
        """Reveal a hidden, unmarked field.

        An empty field also reveals its unmarked neighbours, without
        spreading further.
        """
        index = self._index(x, y)
        cell = self.cells[index]
        if cell & MARKED_MASK:
            return RevealResult.MARKED
        if not cell & HIDDEN_MASK:
            return RevealResult.ALREADY_REVEALED
        self.cells[index] = cell & ~HIDDEN_MASK
        if cell & VALUE_MASK == GOOSE:
            return RevealResult.GOOSE
        if cell & VALUE_MASK == 0:
            for neighbour in self._neighbours(x, y):
                if not self.cells[neighbour] & MARKED_MASK:
                    self.cells[neighbour] &= ~HIDDEN_MASK
        return RevealResult.REVEALED

    def reveal_all(self) -> None:
        """Clear every mark and hide bit, exposing all values."""
        self.cells = [cell & VALUE_MASK for cell in self.cells]

    def is_won(self) -> bool:
        """Return whether every field without a goose has been revealed."""
        return not any(
            cell & HIDDEN_MASK and cell & VALUE_MASK != GOOSE for cell in self.cells
        )

    def render(self) -> str:
        """Return the board as text, one line per row."""

        def symbol(cell: int) -> str:
            if cell & MARKED_MASK:
                return "M"
            if cell & HIDDEN_MASK:
                return "*"
            return str(cell & VALUE_MASK)

        rows = (
            self.cells[row * self.width:(row + 1) * self.width]
            for row in range(self.height)
        )
        return "".join("".join(symbol(cell) for cell in row) + "\n" for row in rows)