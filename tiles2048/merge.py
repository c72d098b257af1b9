"""Rotation and right-hand collapse of a tile grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tiles2048.board import Size

__all__ = ["Tiles", "rotate_tiles_to_right", "collapse_to_right"]

Tiles = tuple[tuple[int, ...], ...]


def _check_shape(tiles: Tiles, size: Size) -> None:
    if len(tiles) != size.height or any(len(row) != size.width for row in tiles):
        raise ValueError(
            f"tiles do not match a {size.width}x{size.height} board"
        )


def rotate_tiles_to_right(tiles: Tiles, size: Size, rotation_count: int) -> Tiles:
    """Rotate the grid clockwise by a quarter turn ``rotation_count`` times."""
    _check_shape(tiles, size)
    result = tuple(tuple(row) for row in tiles)
    for _ in range(rotation_count):
        result = tuple(zip(*reversed(result)))
    return result


def _push_right(cells: list[int], col: int, last: int) -> None:
    """Slide the tile at ``col`` right, merging it with an equal neighbour."""
    while col < last:
        value, following = cells[col], cells[col + 1]
        if following == 0:
            cells[col + 1], cells[col] = value, 0
            col += 1
        elif following == value:
            cells[col + 1], cells[col] = value + following, 0
            return
        else:
            return


def _collapse_row(row: tuple[int, ...], last: int) -> tuple[int, ...]:
    cells = list(row)
    for col in range(last - 1, -1, -1):
        if cells[col]:
            _push_right(cells, col, last)
    return tuple(cells)


def collapse_to_right(tiles: Tiles, size: Size) -> Tiles:
    """Slide and merge every row towards its right end."""
    _check_shape(tiles, size)
    return tuple(_collapse_row(row, size.width - 1) for row in tiles)