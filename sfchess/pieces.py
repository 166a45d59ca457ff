"""Chess pieces, their placement on the board and the movement rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional

Position = tuple[int, int]

NO_POSITION: Position = (-1, -1)

PIECE_NAMES = (
    "white_pawn", "white_rook", "white_knight", "white_bishop", "white_queen", "white_king",
    "black_pawn", "black_rook", "black_knight", "black_bishop", "black_queen", "black_king",
)

_BACK_RANK = ("rook", "knight", "bishop", "queen", "king", "bishop", "knight", "rook")

_LAYOUT: tuple[tuple[str, ...], ...] = (
    tuple(f"black_{kind}" for kind in _BACK_RANK),
    ("black_pawn",) * 8,
    ("",) * 8,
    ("",) * 8,
    ("",) * 8,
    ("",) * 8,
    ("white_pawn",) * 8,
    tuple(f"white_{kind}" for kind in _BACK_RANK),
)

KNIGHT_OFFSETS: frozenset[Position] = frozenset(
    {(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)}
)


@dataclass
class Piece:
    """A piece such as ``white_queen`` standing on a board square (column, row)."""

    name: str
    position: Position

    def is_white(self) -> bool:
        return self.name.startswith("white")

    def color(self) -> str:
        """Return ``"white"`` or ``"black"``."""
        return self.name[:5]


def starting_layout() -> list[Piece]:
    """Return the pieces of a new game, row by row from the top of the board."""
    return [
        Piece(name, (col, row))
        for row, names in enumerate(_LAYOUT)
        for col, name in enumerate(names)
        if name
    ]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Pieces:
    """The set of pieces on the board, with move validation."""

    def __init__(self, square_size: float = 64.0, pieces: Optional[Iterable[Piece]] = None):
        self.square_size = square_size
        if pieces is None:
            self._pieces = starting_layout()
        else:
            self._pieces = [replace(piece, position=tuple(piece.position)) for piece in pieces]

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def copy(self) -> "Pieces":
        """Return an independent copy of this position."""
        return Pieces(self.square_size, self._pieces)

    def has_piece_at(self, pos: Position) -> bool:
        return self.get_piece_at(pos) is not None

    def get_piece_at(self, pos: Position) -> Optional[Piece]:
        pos = tuple(pos)
        return next((piece for piece in self._pieces if piece.position == pos), None)

    def is_same_color(self, src: Position, dst: Position) -> bool:
        a = self.get_piece_at(src)
        b = self.get_piece_at(dst)
        if a is None or b is None:
            return False
        return a.color() == b.color()

    def _diagonal_clear(self, src: Position, dst: Position) -> bool:
        step_x = 1 if dst[0] - src[0] > 0 else -1
        step_y = 1 if dst[1] - src[1] > 0 else -1
        x, y = src[0] + step_x, src[1] + step_y
        while x != dst[0] and y != dst[1]:
            if self.has_piece_at((x, y)):
                return False
            x += step_x
            y += step_y
        return True

    def _straight_clear(self, src: Position, dst: Position) -> bool:
        step_x = _sign(dst[0] - src[0])
        step_y = _sign(dst[1] - src[1])
        x, y = src[0] + step_x, src[1] + step_y
        while (x, y) != dst:
            if self.has_piece_at((x, y)):
                return False
            x += step_x
            y += step_y
        return True

    def _pawn_move_ok(self, piece: Piece, src: Position, dst: Position) -> bool:
        dx = dst[0] - src[0]
        dy = dst[1] - src[1]
        forward = -1 if piece.is_white() else 1
        start_row = 6 if piece.is_white() else 1
        if dx == 0 and dy == forward and not self.has_piece_at(dst):
            return True
        if (
            dx == 0
            and dy == 2 * forward
            and src[1] == start_row
            and not self.has_piece_at((src[0], src[1] + forward))
            and not self.has_piece_at(dst)
        ):
            return True
        return abs(dx) == 1 and dy == forward and self.has_piece_at(dst)

    def is_valid_move(self, src: Position, dst: Position) -> bool:
        """Check the piece's movement pattern and path; king safety is not checked."""
        src, dst = tuple(src), tuple(dst)
        piece = self.get_piece_at(src)
        if piece is None or self.is_same_color(src, dst):
            return False

        name = piece.name
        dx = dst[0] - src[0]
        dy = dst[1] - src[1]

        if "pawn" in name:
            return self._pawn_move_ok(piece, src, dst)
        if "bishop" in name:
            return abs(dx) == abs(dy) and self._diagonal_clear(src, dst)
        if "rook" in name:
            return (dx == 0 or dy == 0) and self._straight_clear(src, dst)
        if "queen" in name:
            if abs(dx) == abs(dy):
                return self._diagonal_clear(src, dst)
            if dx == 0 or dy == 0:
                return self._straight_clear(src, dst)
            return False
        if "knight" in name:
            return (dx, dy) in KNIGHT_OFFSETS
        if "king" in name:
            return abs(dx) <= 1 and abs(dy) <= 1
        return False

    def move_piece(self, src: Position, dst: Position) -> None:
        """Move the piece at ``src`` to ``dst``, removing whatever stood at ``dst``."""
        src, dst = tuple(src), tuple(dst)
        self._pieces = [piece for piece in self._pieces if piece.position != dst]
        piece = self.get_piece_at(src)
        if piece is not None:
            piece.position = dst

    def is_king_in_check(self, is_white: bool) -> bool:
        king_name = "white_king" if is_white else "black_king"
        king_pos = next(
            (piece.position for piece in self._pieces if piece.name == king_name), NO_POSITION
        )
        enemy = "black" if is_white else "white"
        return any(
            self.is_valid_move(piece.position, king_pos)
            for piece in self._pieces
            if piece.color() == enemy
        )

    def is_move_safe(self, src: Position, dst: Position, is_white: bool) -> bool:
        """Return whether the move leaves the mover's king out of check."""
        trial = self.copy()
        trial.move_piece(src, dst)
        return not trial.is_king_in_check(is_white)

    def sprite_position(self, pos: Position) -> tuple[float, float]:
        """Pixel position at which a piece on ``pos`` is drawn."""
        return (pos[0] * self.square_size + 2.0, pos[1] * self.square_size + 2.0)