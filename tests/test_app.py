import random

import pygame
import pytest

from snakegame.app import (
    APPLE_COLOR,
    BODY_COLOR,
    HEAD_COLOR,
    draw_board,
    game_over_layout,
    key_to_direction,
    run_game_over,
)
from snakegame.game import CELL_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH, Direction, Game
from snakegame.segments import Segment, SegmentList


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ],
)
def test_arrow_keys(key, direction):
    assert key_to_direction(key) is direction


def test_other_key_has_no_direction():
    assert key_to_direction(pygame.K_p) is None


def test_layout_centres_title():
    layout = game_over_layout((200, 50), (150, 25), (30, 25))
    x, y, w, h = layout.title
    assert x + w / 2 == SCREEN_WIDTH / 2
    assert y == SCREEN_HEIGHT / 2 - 2 * CELL_SIZE
    assert (w, h) == (200, 50)


def test_layout_score_follows_label():
    layout = game_over_layout((200, 50), (150, 25), (30, 25))
    lx, ly, lw, _ = layout.label
    sx, sy, sw, _ = layout.score
    assert ly == sy == SCREEN_HEIGHT / 2 + CELL_SIZE
    assert sx == lx + lw
    assert sw == 30


def test_draw_board_colours():
    game = Game(random.Random(0))
    game.apples = SegmentList([Segment(0, 0)])
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    draw_board(surface, game)
    head = game.snake.head
    body = list(game.snake)[1]
    assert surface.get_at((head.x, head.y))[:3] == HEAD_COLOR
    assert surface.get_at((body.x + CELL_SIZE - 1, body.y))[:3] == BODY_COLOR
    assert surface.get_at((0, 0))[:3] == APPLE_COLOR
    assert surface.get_at((SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1))[:3] == (0, 0, 0)


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    fonts = (pygame.font.Font(None, 24), pygame.font.Font(None, 48))
    yield screen, pygame.time.Clock(), fonts
    pygame.quit()


def test_game_over_return_continues(display):
    screen, clock, fonts = display
    game = Game(random.Random(0))
    game.game_over = True
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    assert run_game_over(screen, clock, fonts, game) is True
    assert game.game_over is False


def test_game_over_quit_stops(display):
    screen, clock, fonts = display
    game = Game(random.Random(0))
    game.game_over = True
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert run_game_over(screen, clock, fonts, game) is False
    assert game.game_over is False