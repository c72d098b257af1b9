"""The 2048 board: moves, win and loss checks, and a text dump."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from tiles2048.events import BoardEvent, inverted_rotation_count, rotation_count
from tiles2048.generator import TilesGenerator, default_tiles_generator
from tiles2048.merge import Tiles, collapse_to_right, rotate_tiles_to_right

__all__ = ["Size", "InvalidMoveError", "Board"]

WINNING_TILE = 2048
_MOVES = (BoardEvent.RIGHT, BoardEvent.DOWN, BoardEvent.LEFT, BoardEvent.UP)


@dataclass(frozen=True)
class Size:
    """Board dimensions in cells."""

    width: int
    height: int


class InvalidMoveError(ValueError):
    """Raised when a board is asked to move in something that is not a direction."""


class Board:
    """A 2048 board that slides, merges and spawns tiles."""

    def __init__(
        self,
        size: Size = Size(4, 4),
        generator: Optional[TilesGenerator] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._size = size
        self._generator = generator or default_tiles_generator
        self._out = out
        self._tiles: Tiles = tuple(
            (0,) * size.width for _ in range(size.height)
        )
        self._step = 1

    @property
    def step(self) -> int:
        """Number of the current step, starting at 1."""
        return self._step

    @property
    def size(self) -> Size:
        return self._size

    @property
    def tiles(self) -> Tiles:
        return self._tiles

    def is_won(self) -> bool:
        """True once any tile has reached 2048."""
        return any(WINNING_TILE in row for row in self._tiles)

    def is_lost(self) -> bool:
        """True when the board is full and no move changes it."""
        if any(0 in row for row in self._tiles):
            return False
        return all(self._slide(event) == self._tiles for event in _MOVES)

    def initialize(self) -> None:
        """Place the tiles for the first step and print the board."""
        self._tiles = self._generate()
        self.pretty_print(BoardEvent.INIT)

    def pretty_print(self, event: BoardEvent | str) -> None:
        """Write the event, the step and the grid to the output stream."""
        out = self._out if self._out is not None else sys.stdout
        name = event.value if isinstance(event, BoardEvent) else str(event)
        out.write(f"EVENT - {name}, STEP - {self._step}\n")
        for row in self._tiles:
            out.write("".join(f"{cell:5d}" for cell in row) + "\n")

    def move(self, event: BoardEvent | str) -> bool:
        """Slide the board in a direction.

        If anything changed, the step advances, a new tile is generated and
        the board is printed. Returns whether the board changed.
        """
        tiles = self._slide(event)
        if tiles == self._tiles:
            return False
        self._tiles = tiles
        self._step += 1
        self._tiles = self._generate()
        self.pretty_print(BoardEvent(event))
        return True

    def _slide(self, event: BoardEvent | str) -> Tiles:
        try:
            turns = rotation_count(event)
            back = inverted_rotation_count(event)
        except ValueError as error:
            raise InvalidMoveError(str(error)) from None
        rotated = rotate_tiles_to_right(self._tiles, self._size, turns)
        collapsed = collapse_to_right(rotated, self._size)
        return rotate_tiles_to_right(collapsed, self._size, back)

    def _generate(self) -> Tiles:
        result = self._generator(self._step, self._tiles, self._size)
        return tuple(tuple(row) for row in result)