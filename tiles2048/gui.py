"""Windowed 2048 game."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from tiles2048.board import Board, InvalidMoveError, Size
from tiles2048.events import BoardEvent

__all__ = ["pick_tile_color", "main"]

Color = tuple[int, int, int, int]

_TILE_COLORS: dict[int, Color] = {
    0: (205, 193, 180, 255),
    2: (238, 228, 218, 255),
    4: (237, 224, 200, 255),
    8: (242, 177, 121, 255),
    16: (245, 149, 99, 255),
    32: (246, 124, 95, 255),
    64: (246, 94, 59, 255),
    128: (237, 207, 114, 255),
    256: (237, 204, 97, 255),
    512: (237, 200, 80, 255),
    1024: (237, 197, 63, 255),
    2048: (237, 194, 46, 255),
}

_DEFAULT_COLOR: Color = (60, 58, 50, 255)

_BUTTONS = (
    ("Up", BoardEvent.UP),
    ("Down", BoardEvent.DOWN),
    ("Left", BoardEvent.LEFT),
    ("Right", BoardEvent.RIGHT),
)


def pick_tile_color(value: int) -> Color:
    """RGBA background colour for a tile value."""
    return _TILE_COLORS.get(value, _DEFAULT_COLOR)


def _hex(color: Color) -> str:
    red, green, blue, _alpha = color
    return f"#{red:02x}{green:02x}{blue:02x}"


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="tiles2048-gui", description="Play 2048 in a window."
    )
    parser.parse_args(argv)

    import tkinter as tk
    from tkinter import messagebox

    size = Size(width=4, height=4)
    board = Board(size)
    board.initialize()

    root = tk.Tk()
    root.title("2048 Game")
    root.geometry("300x300")

    grid = tk.Frame(root)
    grid.pack(padx=4, pady=4)
    cells = [
        [
            tk.Label(
                grid,
                width=4,
                height=2,
                font=("Helvetica", 24, "bold"),
                fg="black",
            )
            for _ in range(size.width)
        ]
        for _ in range(size.height)
    ]
    for row_index, row in enumerate(cells):
        for col_index, label in enumerate(row):
            label.grid(row=row_index, column=col_index, padx=2, pady=2)

    def update_grid() -> None:
        for labels, values in zip(cells, board.tiles):
            for label, value in zip(labels, values):
                label.configure(text=f"{value}", bg=_hex(pick_tile_color(value)))

    def check_game_state() -> None:
        if board.is_won():
            messagebox.showinfo(
                "You Win!", "Congratulations! You won the game!", parent=root
            )
        elif board.is_lost():
            messagebox.showinfo(
                "Game Over", "The game is over. You lost.", parent=root
            )

    def move_and_update(event: BoardEvent) -> None:
        try:
            board.move(event)
        except InvalidMoveError as error:
            print("Move error:", error, file=sys.stderr)
        update_grid()
        check_game_state()

    controls = tk.Frame(root)
    controls.pack(fill="x", padx=4, pady=4)
    for column, (text, event) in enumerate(_BUTTONS):
        button = tk.Button(
            controls, text=text, command=lambda e=event: move_and_update(e)
        )
        button.grid(row=0, column=column, sticky="ew")
        controls.grid_columnconfigure(column, weight=1)
        root.bind(f"<{text}>", lambda _key, e=event: move_and_update(e))

    update_grid()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())