"""Window, drawing and event loop for the chess game."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

import pygame

from .game import Game
from .pieces import PIECE_NAMES

SQUARE_SIZE = 64
WINDOW_SIZE = (512, 512)
TEXT_COLOR = (248, 248, 255)
FONT_SIZE = 28


def pixel_to_board(x: int, y: int, square_size: float) -> tuple[int, int]:
    """Convert a pixel position inside the window to a board square."""
    return (int(x / square_size), int(y / square_size))


def load_textures(asset_dir) -> dict:
    """Load piece images named like ``white_pawn.png``; report and skip missing ones."""
    textures = {}
    for name in PIECE_NAMES:
        path = Path(asset_dir) / f"{name}.png"
        try:
            textures[name] = pygame.image.load(str(path))
        except (pygame.error, OSError):
            print(f"Failed to load: {name}.png", file=sys.stderr)
    return textures


def draw_game(surface, game: Game, textures: dict, font) -> None:
    """Draw the board, the pieces and, once the game is over, its result."""
    for _, rect, color in game.board.squares():
        left, top, width, height = (int(value) for value in rect)
        if color[3] < 255:
            tile = pygame.Surface((width, height), pygame.SRCALPHA)
            tile.fill(color)
            surface.blit(tile, (left, top))
        else:
            surface.fill(color[:3], pygame.Rect(left, top, width, height))

    for piece in game.pieces:
        texture = textures.get(piece.name)
        if texture is not None:
            surface.blit(texture, game.pieces.sprite_position(piece.position))

    if game.game_over and font is not None:
        text = font.render(game.game_result, True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=surface.get_rect().center))


def _load_font(asset_dir) -> Optional["pygame.font.Font"]:
    try:
        font = pygame.font.Font(str(Path(asset_dir) / "arial.ttf"), FONT_SIZE)
    except (pygame.error, OSError):
        print("Failed to load font.", file=sys.stderr)
        return None
    font.set_bold(True)
    return font


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="sfchess", description="Two-player chess.")
    parser.add_argument("--assets", default="assets", help="directory holding images and font")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Chess")
        textures = load_textures(args.assets)
        missing = [name for name in PIECE_NAMES if name not in textures]
        if missing:
            print(f"Missing piece images: {', '.join(missing)}", file=sys.stderr)
            return 1
        font = _load_font(args.assets)
        game = Game(float(SQUARE_SIZE))
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.handle_click(pixel_to_board(*event.pos, SQUARE_SIZE))

            window.fill((0, 0, 0))
            draw_game(window, game, textures, font)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())