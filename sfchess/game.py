"""Turn handling and game-end detection driven by board clicks."""

from __future__ import annotations

from itertools import product

from .board import BOARD_SIZE, NO_SQUARE, Board, Position
from .pieces import Pieces


def _all_squares():
    return ((col, row) for row, col in product(range(BOARD_SIZE), repeat=2))


class Game:
    """A two-player game: select a piece with one click, move it with the next."""

    def __init__(self, square_size: float = 64.0):
        self.board = Board(square_size)
        self.pieces = Pieces(square_size)
        self.white_turn = True
        self.selected_square: Position = NO_SQUARE
        self.game_over = False
        self.game_result = ""

    def handle_click(self, board_pos: Position) -> None:
        if self.game_over:
            return
        board_pos = tuple(board_pos)

        if self.selected_square == NO_SQUARE:
            if self.pieces.has_piece_at(board_pos) and self.is_current_player_piece(board_pos):
                self.selected_square = board_pos
                self.board.set_selected_square(board_pos)
            return

        src = self.selected_square
        if self.pieces.is_valid_move(src, board_pos) and self.pieces.is_move_safe(
            src, board_pos, self.white_turn
        ):
            self.pieces.move_piece(src, board_pos)
            self.board.set_last_move(src, board_pos)
            self.white_turn = not self.white_turn

            if not self.has_any_legal_move(self.white_turn):
                in_check = self.pieces.is_king_in_check(self.white_turn)
                self.game_over = True
                if not in_check:
                    self.game_result = "Stalemate"
                elif self.white_turn:
                    self.game_result = "Black wins by checkmate"
                else:
                    self.game_result = "White wins by checkmate"

        self.selected_square = NO_SQUARE
        self.board.set_selected_square(NO_SQUARE)

    def is_current_player_piece(self, pos: Position) -> bool:
        piece = self.pieces.get_piece_at(pos)
        if piece is None:
            return False
        return piece.name.startswith("white" if self.white_turn else "black")

    def has_any_legal_move(self, is_white: bool) -> bool:
        color = "white" if is_white else "black"
        for src in _all_squares():
            piece = self.pieces.get_piece_at(src)
            if piece is None or color not in piece.name:
                continue
            for dst in _all_squares():
                if dst == src:
                    continue
                if self.pieces.is_valid_move(src, dst) and self.pieces.is_move_safe(
                    src, dst, is_white
                ):
                    return True
        return False