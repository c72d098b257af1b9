import random

import pytest

from tiles2048.board import Size
from tiles2048.generator import default_tiles_generator

SIZE = Size(width=4, height=4)
EMPTY = tuple((0, 0, 0, 0) for _ in range(4))


def _filled(tiles):
    return [
        (r, c, value)
        for r, row in enumerate(tiles)
        for c, value in enumerate(row)
        if value
    ]


@pytest.mark.parametrize("seed", range(25))
def test_first_step_places_up_to_three_small_tiles(seed):
    result = default_tiles_generator(1, EMPTY, SIZE, random.Random(seed))
    filled = _filled(result)
    assert 1 <= len(filled) <= 3
    assert {value for _, _, value in filled} <= {2, 4}


@pytest.mark.parametrize("seed", range(25))
def test_later_step_adds_one_tile_on_free_cell(seed):
    tiles = (
        (2, 0, 0, 0),
        (0, 4, 0, 0),
        (0, 0, 0, 0),
        (0, 0, 0, 8),
    )
    result = default_tiles_generator(2, tiles, SIZE, random.Random(seed))
    before = set(_filled(tiles))
    after = set(_filled(result))
    assert before <= after
    added = after - before
    assert len(added) == 1
    (_, _, value), = added
    assert value in {2, 4, 8}


def test_full_board_is_left_alone():
    full = tuple((2, 4, 2, 4) if r % 2 == 0 else (4, 2, 4, 2) for r in range(4))
    assert default_tiles_generator(5, full, SIZE, random.Random(1)) == full


def test_first_step_keeps_existing_tiles():
    tiles = tuple((16, 16, 16, 16) for _ in range(4))
    assert default_tiles_generator(1, tiles, SIZE, random.Random(3)) == tiles


def test_same_seed_gives_same_tiles():
    first = default_tiles_generator(1, EMPTY, SIZE, random.Random(42))
    second = default_tiles_generator(1, EMPTY, SIZE, random.Random(42))
    assert first == second


def test_input_is_not_changed_and_shape_is_kept():
    tiles = [[0, 0, 0, 0] for _ in range(4)]
    result = default_tiles_generator(3, tiles, SIZE, random.Random(7))
    assert tiles == [[0, 0, 0, 0] for _ in range(4)]
    assert len(result) == 4
    assert all(len(row) == 4 for row in result)
    assert len(_filled(result)) == 1


def test_works_without_explicit_rng():
    result = default_tiles_generator(2, EMPTY, SIZE)
    assert len(_filled(result)) == 1