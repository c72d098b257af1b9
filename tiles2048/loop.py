"""Terminal game loop driven by arrow keys."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
from typing import IO, Iterable, Iterator, Optional, Union

from tiles2048.board import Board, InvalidMoveError, Size
from tiles2048.events import key_to_event

__all__ = ["decode_key", "read_key", "play", "main"]

WON = "won"
LOST = "lost"

_ESCAPE = "\x1b"

_ARROW_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}

_MESSAGES = {
    WON: "You won game!",
    LOST: "You lost.",
}


def _as_text(data: Union[str, bytes]) -> str:
    if isinstance(data, bytes):
        return data.decode("latin-1")
    return data


def decode_key(sequence: Union[str, bytes]) -> str:
    """Name the key behind a terminal input sequence.

    Arrow escape sequences become "up", "down", "left" or "right"; any
    other sequence is returned unchanged as text.
    """
    text = _as_text(sequence)
    return _ARROW_SEQUENCES.get(text, text)


def read_key(stream: IO) -> str:
    """Read one key press from ``stream`` and return its name.

    Raises EOFError when the stream has nothing more to give.
    """
    first = _as_text(stream.read(1))
    if not first:
        raise EOFError("no more keys")
    sequence = first
    if first == _ESCAPE:
        second = _as_text(stream.read(1))
        sequence += second
        if second in ("[", "O"):
            sequence += _as_text(stream.read(1))
    return decode_key(sequence)


def play(board: Board, keys: Iterable[str]) -> Optional[str]:
    """Apply key presses to ``board`` until the game is decided.

    Returns "won" or "lost" once the game ends, or None when the keys run
    out first. A key that is not an arrow raises InvalidMoveError.
    """
    for key in keys:
        board.move(key_to_event(key))
        if board.is_won():
            return WON
        if board.is_lost():
            return LOST
    return None


def _keys(stream: IO) -> Iterator[str]:
    while True:
        try:
            yield read_key(stream)
        except EOFError:
            return


@contextlib.contextmanager
def _key_input(stream: IO) -> Iterator[IO]:
    """Yield a stream that delivers key presses one at a time."""
    if not stream.isatty():
        yield stream
        return
    try:
        import termios
        import tty
    except ImportError:
        yield stream
        return
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        with os.fdopen(fd, "rb", buffering=0, closefd=False) as raw:
            yield raw
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: Optional[list[str]] = None) -> int:
    """Play 2048 in the terminal with the arrow keys."""
    parser = argparse.ArgumentParser(
        prog="tiles2048", description="Play 2048 with the arrow keys."
    )
    parser.parse_args(argv)

    board = Board(Size(4, 4))
    board.initialize()
    try:
        with _key_input(sys.stdin) as keys:
            outcome = play(board, _keys(keys))
    except InvalidMoveError as error:
        print(error, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    if outcome is None:
        return 0
    print(_MESSAGES[outcome], file=sys.stderr)
    return 0 if outcome == WON else 1


if __name__ == "__main__":
    sys.exit(main())