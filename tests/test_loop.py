import io

import pytest

from tiles2048.board import Board, InvalidMoveError, Size
from tiles2048.loop import decode_key, main, play, read_key


def _fixed_generator(start):
    def generate(step, tiles, size):
        if step == 1:
            return start
        return tiles

    return generate


def _board(start):
    board = Board(Size(4, 4), _fixed_generator(start), io.StringIO())
    board.initialize()
    return board


NEAR_WIN = (
    (1024, 1024, 0, 0),
    (0, 0, 0, 0),
    (0, 0, 0, 0),
    (0, 0, 0, 0),
)

STUCK = (
    (2, 4, 2, 4),
    (4, 2, 4, 2),
    (2, 4, 2, 4),
    (4, 2, 4, 2),
)

OPEN = (
    (2, 0, 0, 0),
    (0, 0, 0, 0),
    (0, 0, 0, 0),
    (0, 0, 0, 4),
)


@pytest.mark.parametrize(
    "sequence, name",
    [
        ("\x1b[A", "up"),
        ("\x1b[B", "down"),
        ("\x1b[C", "right"),
        ("\x1b[D", "left"),
        ("\x1bOA", "up"),
        (b"\x1b[D", "left"),
    ],
)
def test_decode_key_arrows(sequence, name):
    assert decode_key(sequence) == name


def test_decode_key_passes_other_keys_through():
    assert decode_key("q") == "q"
    assert decode_key(b"x") == "x"


def test_read_key_text_stream():
    stream = io.StringIO("\x1b[B\x1b[Cq")
    assert read_key(stream) == "down"
    assert read_key(stream) == "right"
    assert read_key(stream) == "q"


def test_read_key_byte_stream():
    assert read_key(io.BytesIO(b"\x1b[A")) == "up"


def test_read_key_empty_stream_raises():
    with pytest.raises(EOFError):
        read_key(io.StringIO(""))


def test_play_reports_win():
    board = _board(NEAR_WIN)
    assert play(board, ["right"]) == "won"
    assert board.is_won()


def test_play_reports_loss():
    board = _board(STUCK)
    assert play(board, ["left"]) == "lost"
    assert board.tiles == STUCK


def test_play_returns_none_when_keys_run_out():
    board = _board(OPEN)
    assert play(board, ["right", "left"]) is None
    assert board.step == 3


def test_play_without_keys_leaves_board_alone():
    board = _board(OPEN)
    assert play(board, []) is None
    assert board.tiles == OPEN
    assert board.step == 1


def test_play_rejects_non_arrow_key():
    board = _board(OPEN)
    with pytest.raises(InvalidMoveError):
        play(board, ["x"])
    assert board.tiles == OPEN


def test_main_prints_initial_board_and_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("EVENT - init, STEP - 1\n")
    assert len(captured.out.splitlines()) == 5


def test_main_fails_on_non_arrow_key(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))
    assert main([]) == 1
    assert "invalid event: other" in capsys.readouterr().err