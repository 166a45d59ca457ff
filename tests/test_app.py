import pygame
import pytest

from sfchess.app import draw_game, load_textures, pixel_to_board
from sfchess.game import Game


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, (0, 0)),
        (63, 63, (0, 0)),
        (64, 0, (1, 0)),
        (511, 511, (7, 7)),
    ],
)
def test_pixel_to_board(x, y, expected):
    assert pixel_to_board(x, y, 64) == expected


def test_load_textures_reports_missing(tmp_path, capsys):
    textures = load_textures(tmp_path)
    assert textures == {}
    err = capsys.readouterr().err
    assert "Failed to load: white_pawn.png" in err
    assert "Failed to load: black_king.png" in err


def test_load_textures_reads_png(tmp_path):
    image = pygame.Surface((8, 8))
    image.fill((10, 20, 30))
    pygame.image.save(image, str(tmp_path / "white_pawn.png"))
    textures = load_textures(tmp_path)
    assert set(textures) == {"white_pawn"}
    assert textures["white_pawn"].get_size() == (8, 8)


def test_draw_game_paints_board():
    surface = pygame.Surface((512, 512))
    game = Game(64.0)
    draw_game(surface, game, {}, None)
    assert tuple(surface.get_at((10, 10)))[:3] == (240, 217, 181)
    assert tuple(surface.get_at((74, 10)))[:3] == (181, 136, 99)


def test_draw_game_highlights_selection():
    surface = pygame.Surface((512, 512))
    game = Game(64.0)
    draw_game(surface, game, {}, None)
    before = tuple(surface.get_at((4 * 64 + 30, 6 * 64 + 30)))
    game.handle_click((4, 6))
    surface.fill((0, 0, 0))
    draw_game(surface, game, {}, None)
    after = tuple(surface.get_at((4 * 64 + 30, 6 * 64 + 30)))
    assert after != before
    assert after[0] == after[1]


def test_draw_game_blits_piece_textures():
    surface = pygame.Surface((512, 512))
    game = Game(64.0)
    pawn = pygame.Surface((4, 4))
    pawn.fill((1, 2, 3))
    draw_game(surface, game, {"white_pawn": pawn}, None)
    x, y = game.pieces.sprite_position((0, 6))
    assert tuple(surface.get_at((int(x), int(y))))[:3] == (1, 2, 3)
    x, y = game.pieces.sprite_position((0, 1))
    assert tuple(surface.get_at((int(x), int(y))))[:3] != (1, 2, 3)