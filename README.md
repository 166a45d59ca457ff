# sfchess

A small chess game for two players sharing one screen. The window is 512×512
pixels and shows an 8×8 board of 64-pixel squares. Players take turns clicking
one of their own pieces and then a destination square. The move goes ahead
only if it suits the piece and does not leave that player's own king in check.
The selected square and the squares of the last move are tinted yellow.

The game ends when the player to move has no legal move left. The result is
then shown in the middle of the window: "White wins by checkmate",
"Black wins by checkmate" or "Stalemate". After that, clicks are ignored.

## Installing

```
pip install .
```

## Playing

```
sfchess
sfchess --assets path/to/assets
```

The program reads its images and font from the directory given with
`--assets`, by default `assets` in the current working directory. It needs one
PNG image per piece, named `white_pawn.png`, `black_king.png` and so on for
all twelve pieces, and `arial.ttf` for the result text.

- If a piece image cannot be loaded, the program prints
  `Failed to load: <name>.png` to standard error for each one, then lists the
  missing images and exits with status 1.
- If the font cannot be loaded, it prints `Failed to load font.` to standard
  error and keeps running, but the result is not shown when the game ends.

Click with the left mouse button. Clicking a piece of the side to move selects
it; any other first click does nothing. If the second click is not a legal
destination, the selection is cleared and you pick again. Close the window to
quit.

## Rules that apply

- Pawns move one square forward. From their starting rank they may move two
  squares if both squares are empty. They capture one square diagonally
  forward.
- Rooks, bishops and queens slide along their lines and cannot pass through
  other pieces.
- Knights jump in an L shape.
- Kings move one square in any direction.
- No piece may capture a piece of its own colour.

## What it does not do

There is no castling, no en passant and no pawn promotion. There is no draw by
repetition or by the fifty-move rule, no undo, no clock, no saving of games
and no computer opponent.

## Using the rules from code

Board coordinates are `(column, row)`. Row 0 is black's back rank and row 7 is
white's.

```python
from sfchess.pieces import Pieces
from sfchess.game import Game

pieces = Pieces()
pieces.is_valid_move((4, 6), (4, 4))        # True: white pawn, two squares forward
pieces.is_move_safe((4, 6), (4, 4), True)   # True: the white king stays safe

game = Game()
game.handle_click((4, 6))  # select the white king's pawn
game.handle_click((4, 4))  # move it
game.white_turn            # False: black to move
game.game_over, game.game_result
```

The modules:

- `sfchess.pieces`: `Piece` (a name such as `white_queen` and a position),
  `Pieces` (the pieces on the board, with `is_valid_move`, `move_piece`,
  `is_king_in_check`, `is_move_safe` and `copy`) and `starting_layout()`.
- `sfchess.board`: `Board`, which gives each square's rectangle and colour and
  keeps the selected square and the last move for highlighting.
- `sfchess.game`: `Game`, which turns clicks into selections and moves,
  alternates turns and detects checkmate and stalemate.
- `sfchess.app`: the window and event loop (`main`), plus `pixel_to_board`,
  `load_textures` and `draw_game`.

## Running the tests

```
pip install .[test]
pytest
```