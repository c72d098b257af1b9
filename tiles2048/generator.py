"""Placement of new tiles on the board."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable, Optional

from tiles2048.merge import Tiles

if TYPE_CHECKING:
    from tiles2048.board import Size

__all__ = ["TilesGenerator", "default_tiles_generator"]

TilesGenerator = Callable[[int, Tiles, "Size"], Tiles]

_START_VALUES = (2, 4)
_LATER_VALUES = (2, 4, 8)
_START_ATTEMPTS = 3


def default_tiles_generator(
    step: int,
    tiles: Tiles,
    size: Size,
    rng: Optional[random.Random] = None,
) -> Tiles:
    """Return ``tiles`` with new tiles added for the given step.

    On the first step up to three tiles of 2 or 4 are dropped on random
    cells (a cell picked twice keeps its first tile). On later steps one
    tile of 2, 4 or 8 goes on a random free cell, if there is one.
    """
    source = random if rng is None else rng
    cells = [list(row) for row in tiles]

    if step == 1:
        for _ in range(_START_ATTEMPTS):
            row = source.randrange(size.height)
            col = source.randrange(size.width)
            if cells[row][col] == 0:
                cells[row][col] = source.choice(_START_VALUES)
    else:
        free = [
            (row_index, col_index)
            for row_index, row in enumerate(cells)
            for col_index, value in enumerate(row)
            if value == 0
        ]
        if free:
            row, col = source.choice(free)
            cells[row][col] = source.choice(_LATER_VALUES)

    return tuple(tuple(row) for row in cells)