"""Window, drawing and main loop of the snake game."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

import pygame

from .game import CELL_SIZE, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, Direction, Game

BACKGROUND = (0, 0, 0)
HEAD_COLOR = (252, 253, 0)
BODY_COLOR = (10, 105, 6)
APPLE_COLOR = (255, 0, 0)
TEXT_COLOR = (200, 194, 188)

_KEYS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class Layout:
    """Rectangles (x, y, width, height) of the game-over texts."""

    title: Rect
    label: Rect
    score: Rect


def key_to_direction(key: int) -> Direction | None:
    """The direction an arrow key asks for, or None for other keys."""
    return _KEYS.get(key)


def game_over_layout(title_size, label_size, score_size) -> Layout:
    """Place the title centred above a centred "label score" line."""
    tw, th = title_size
    lw, lh = label_size
    sw, sh = score_size
    cx = SCREEN_WIDTH / 2.0
    cy = SCREEN_HEIGHT / 2.0
    title = (cx - tw / 2, cy - 2 * CELL_SIZE, float(tw), float(th))
    label = (cx - lw / 2 - CELL_SIZE / 2.0, cy + CELL_SIZE, float(lw), float(lh))
    score = (cx + lw / 2 - CELL_SIZE / 2.0, cy + CELL_SIZE, float(sw), float(sh))
    return Layout(title, label, score)


def draw_board(surface: pygame.Surface, game: Game) -> None:
    """Draw the snake, then the apples."""
    head = game.snake.head
    for seg in game.snake:
        color = HEAD_COLOR if seg is head else BODY_COLOR
        surface.fill(color, pygame.Rect(seg.x, seg.y, CELL_SIZE, CELL_SIZE))
    for apple in game.apples:
        surface.fill(APPLE_COLOR, pygame.Rect(apple.x, apple.y, CELL_SIZE, CELL_SIZE))


def run_game_over(screen, clock, fonts, game: Game) -> bool:
    """Show the final score until Return is pressed.

    fonts is a (small, large) pair. Returns False if the window was closed.
    """
    small, large = fonts
    title = large.render("GAME OVER", False, TEXT_COLOR)
    label = small.render("FINAL SCORE: ", False, TEXT_COLOR)
    score = small.render(str(game.score), False, TEXT_COLOR)
    layout = game_over_layout(title.get_size(), label.get_size(), score.get_size())
    placed = ((title, layout.title), (label, layout.label), (score, layout.score))

    while game.game_over:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.game_over = False
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                game.game_over = False
        screen.fill(BACKGROUND)
        for text, (x, y, _w, _h) in placed:
            screen.blit(text, (x, y))
        pygame.display.flip()
        clock.tick(FPS)
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="snakegame", description="Play snake.")
    parser.add_argument(
        "--font", help="TrueType font for messages (default: built-in font)"
    )
    parser.add_argument("--seed", type=int, help="seed for apple placement")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Snake")
        fonts = (pygame.font.Font(args.font, 24), pygame.font.Font(args.font, 48))
        clock = pygame.time.Clock()
        game = Game(random.Random(args.seed))

        running = True
        while running:
            screen.fill(BACKGROUND)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    direction = key_to_direction(event.key)
                    if direction is not None:
                        game.turn(direction)

            game.step()
            if game.game_over:
                if running:
                    running = run_game_over(screen, clock, fonts, game)
                game.reset()
            else:
                draw_board(screen, game)

            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())