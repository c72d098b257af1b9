"""Board events and the rotations that reduce every move to a right-hand merge."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "BoardEvent",
    "key_to_event",
    "rotation_count",
    "inverted_rotation_count",
]


class BoardEvent(str, Enum):
    """Something that happens to a board."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    OTHER = "other"
    INIT = "init"

    def __str__(self) -> str:
        return self.value


_KEY_EVENTS = {
    "up": BoardEvent.UP,
    "down": BoardEvent.DOWN,
    "left": BoardEvent.LEFT,
    "right": BoardEvent.RIGHT,
}

# Clockwise quarter turns that bring the move direction to the right.
_ROTATIONS = {
    BoardEvent.RIGHT: 0,
    BoardEvent.UP: 1,
    BoardEvent.LEFT: 2,
    BoardEvent.DOWN: 3,
}

# Clockwise quarter turns that undo the rotation above.
_INVERTED_ROTATIONS = {
    BoardEvent.RIGHT: 0,
    BoardEvent.DOWN: 1,
    BoardEvent.LEFT: 2,
    BoardEvent.UP: 3,
}


def key_to_event(key: str) -> BoardEvent:
    """Map an arrow key name ("up", "down", "left", "right") to an event.

    Any other key prints a hint and gives ``BoardEvent.OTHER``.
    """
    event = _KEY_EVENTS.get(str(key).lower())
    if event is None:
        print("Please, use only arrows.")
        return BoardEvent.OTHER
    return event


def _lookup(table: dict[BoardEvent, int], event: BoardEvent | str) -> int:
    try:
        return table[BoardEvent(event)]
    except (KeyError, ValueError):
        raise ValueError(f"invalid event: {event}") from None


def rotation_count(event: BoardEvent | str) -> int:
    """Quarter turns needed before collapsing the board to the right."""
    return _lookup(_ROTATIONS, event)


def inverted_rotation_count(event: BoardEvent | str) -> int:
    """Quarter turns needed after collapsing to restore the orientation."""
    return _lookup(_INVERTED_ROTATIONS, event)