"""The chequered board and its square highlighting."""

from __future__ import annotations

from typing import Iterator

Position = tuple[int, int]
Color = tuple[int, int, int, int]

NO_SQUARE: Position = (-1, -1)

LIGHT_COLOR: Color = (240, 217, 181, 255)
DARK_COLOR: Color = (181, 136, 99, 255)
HIGHLIGHT_COLOR: Color = (255, 255, 30, 150)

BOARD_SIZE = 8


class Board:
    """Geometry and colours of the 8x8 board, with selection and last-move marks."""

    def __init__(self, square_size: float = 64.0):
        self.square_size = square_size
        self.selected_square: Position = NO_SQUARE
        self.last_from: Position = NO_SQUARE
        self.last_to: Position = NO_SQUARE

    def set_selected_square(self, pos: Position) -> None:
        self.selected_square = tuple(pos)

    def set_last_move(self, src: Position, dst: Position) -> None:
        self.last_from = tuple(src)
        self.last_to = tuple(dst)

    def square_rect(self, pos: Position) -> tuple[float, float, float, float]:
        """Return ``(left, top, width, height)`` of a square in pixels."""
        col, row = pos
        size = self.square_size
        return (col * size, row * size, size, size)

    def is_highlighted(self, pos: Position) -> bool:
        pos = tuple(pos)
        return pos in (self.last_from, self.last_to, self.selected_square)

    def square_color(self, pos: Position) -> Color:
        """Return the RGBA fill of a square, taking highlights into account."""
        if self.is_highlighted(pos):
            return HIGHLIGHT_COLOR
        col, row = pos
        return LIGHT_COLOR if (row + col) % 2 == 0 else DARK_COLOR

    def squares(self) -> Iterator[tuple[Position, tuple[float, float, float, float], Color]]:
        """Yield ``(position, rect, color)`` for every square, row by row."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                pos = (col, row)
                yield pos, self.square_rect(pos), self.square_color(pos)