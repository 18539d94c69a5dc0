"""Snake game rules, independent of any display."""

from __future__ import annotations

import random
from enum import IntEnum

from .segments import Segment, SegmentList

FPS = 8
GRID_WIDTH = 30
GRID_HEIGHT = 20
CELL_SIZE = 24
SNAKE_LENGTH = 4
SCREEN_WIDTH = GRID_WIDTH * CELL_SIZE
SCREEN_HEIGHT = GRID_HEIGHT * CELL_SIZE
APPLE_POINTS = 5


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Game:
    """State of one snake game: the snake, the apples and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = SegmentList()
        self.apples = SegmentList()
        self.score = 0
        self.moved = True
        self.game_over = False
        self.reset()

    def reset(self) -> None:
        """Start a new round with a fresh snake and fresh apples."""
        self.snake.clear()
        self.apples.clear()
        self.game_over = False
        self.score = 0
        x = SCREEN_WIDTH // 2 - CELL_SIZE
        y = SCREEN_HEIGHT // 2 - CELL_SIZE
        for _ in range(SNAKE_LENGTH):
            self.snake.push_back(Segment(x, y, Direction.RIGHT))
            x -= CELL_SIZE
            apple_x, apple_y = self.random_cell()
            self.apples.push_back(Segment(apple_x, apple_y, Direction.UP))

    def random_cell(self) -> tuple[int, int]:
        """Pixel position of a random grid cell."""
        x = self.rng.randrange(GRID_WIDTH) * CELL_SIZE
        y = self.rng.randrange(GRID_HEIGHT) * CELL_SIZE
        return x, y

    def turn(self, direction: Direction) -> bool:
        """Steer the head; at most one turn per step and never straight back."""
        head = self.snake.head
        if self.moved or Direction(head.direction) == direction.opposite():
            return False
        head.direction = direction
        self.moved = True
        return True

    def step(self) -> None:
        """Play one frame: move, eat, then look for a collision."""
        self.advance()
        self.moved = False
        self.eat_apples()
        self.check_collision()

    def advance(self) -> None:
        """Move the snake one cell by carrying its tail in front of its head."""
        head = self.snake.head
        direction = Direction(head.direction)
        dx, dy = _STEPS[direction]
        new_x = head.x + dx * CELL_SIZE
        new_y = head.y + dy * CELL_SIZE
        moving = self.snake.pop_back()
        if self.snake:
            self.snake.tail.direction = direction
        moving.x, moving.y = new_x, new_y
        moving.direction = direction
        self.snake.push_front(moving)

    def eat_apples(self) -> int:
        """Eat every apple under the head; return how many were eaten."""
        head = self.snake.head
        eaten = 0
        for apple in self.apples:
            if apple.x == head.x and apple.y == head.y:
                apple.x, apple.y = self.random_cell()
                tail = self.snake.tail
                self.snake.push_back(Segment(tail.x, tail.y, head.direction))
                self.score += APPLE_POINTS
                eaten += 1
        return eaten

    def check_collision(self) -> bool:
        """Set game_over if the head hits the body or leaves the board."""
        head = self.snake.head
        body = list(self.snake)[1:]
        if any(seg.x == head.x and seg.y == head.y for seg in body):
            self.game_over = True
        if (
            head.x + CELL_SIZE > SCREEN_WIDTH
            or head.y + CELL_SIZE > SCREEN_HEIGHT
            or head.x < 0
            or head.y < 0
        ):
            self.game_over = True
        return self.game_over