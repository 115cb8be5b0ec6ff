"""Snake on a 40x30 grid, steered with the board's KEY1 and KEY2 buttons."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence

from de1games.board import (
    DEFAULT_DEVICE,
    VISIBLE_HEIGHT,
    VISIBLE_WIDTH,
    Board,
    BoardError,
)
from de1games.graphics import Canvas

GRID_SIZE = 8
GRID_WIDTH = VISIBLE_WIDTH // GRID_SIZE
GRID_HEIGHT = VISIBLE_HEIGHT // GRID_SIZE
MAX_SNAKE_LENGTH = GRID_WIDTH * GRID_HEIGHT
INITIAL_SNAKE_LENGTH = 5
INITIAL_SPEED_DELAY = 100000
MIN_SPEED_DELAY = 40000
DELAY_PER_POINT = 200
POINTS_PER_FOOD = 10

BLACK = 0x0000
WHITE = 0xFFFF
RED = 0xF800
GREEN = 0x07E0
LIME_GREEN = 0xAFE5
BG_COLOR = 0x10A2
TEXT_BG_COLOR = 0x4208

KEY_QUIT = 0b0001
KEY_LEFT = 0b0010
KEY_RIGHT = 0b0100
KEY_START = KEY_LEFT | KEY_RIGHT


class Direction(IntEnum):
    """Heading of the snake, in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


_MOVES = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Point:
    """A cell of the grid."""

    x: int
    y: int


class SnakeState(Enum):
    """States of the game loop."""

    START_SCREEN = "start"
    RUNNING = "running"
    GAME_OVER = "over"


def _cell(canvas: Canvas, gx: int, gy: int, color: int) -> None:
    left = gx * GRID_SIZE
    top = gy * GRID_SIZE
    canvas.fill_rect(left, top, left + GRID_SIZE - 1, top + GRID_SIZE - 1, color)


class SnakeGame:
    """Snake game state, advanced one frame at a time by :meth:`step`.

    Console messages produced by the game are appended to ``messages``.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.state = SnakeState.START_SCREEN
        self.body: List[Point] = []
        self.direction = Direction.RIGHT
        self.food = Point(0, 0)
        self.score = 0
        self.prev_keys = 0
        self.messages: List[str] = []

    @property
    def head(self) -> Point:
        return self.body[0]

    def start(self) -> None:
        """Begin a round with a five-cell snake in the centre heading right."""
        self.state = SnakeState.RUNNING
        self.direction = Direction.RIGHT
        self.score = 0
        cx, cy = GRID_WIDTH // 2, GRID_HEIGHT // 2
        self.body = [Point(cx - i, cy) for i in range(INITIAL_SNAKE_LENGTH)]
        self.place_food()
        self.messages.append("Jogo iniciado! Pontuacao: 0")

    def place_food(self) -> None:
        """Put the food on a random cell not covered by the snake."""
        while True:
            x = self.rng.randrange(GRID_WIDTH)
            y = self.rng.randrange(GRID_HEIGHT)
            candidate = Point(x, y)
            if candidate not in self.body:
                self.food = candidate
                return

    def turn_left(self) -> None:
        """Rotate the heading a quarter turn counter-clockwise."""
        self.direction = Direction((self.direction - 1) % 4)

    def turn_right(self) -> None:
        """Rotate the heading a quarter turn clockwise."""
        self.direction = Direction((self.direction + 1) % 4)

    def advance(self) -> None:
        """Move one cell, then check walls, the body and the food."""
        dx, dy = _MOVES[self.direction]
        head = Point(self.head.x + dx, self.head.y + dy)
        self.body = [head] + self.body[:-1]

        if not (0 <= head.x < GRID_WIDTH and 0 <= head.y < GRID_HEIGHT):
            self.state = SnakeState.GAME_OVER
            return
        if head in self.body[1:]:
            self.state = SnakeState.GAME_OVER
            return
        if head == self.food:
            if len(self.body) < MAX_SNAKE_LENGTH:
                self.body.append(self.body[-1])
            self.score += POINTS_PER_FOOD
            self.messages.append(f"Comeu! Pontuacao: {self.score}")
            self.place_food()

    def delay(self) -> float:
        """Seconds to wait before the next frame; shrinks as the score grows."""
        micros = max(INITIAL_SPEED_DELAY - self.score * DELAY_PER_POINT, MIN_SPEED_DELAY)
        return micros / 1_000_000

    def step(self, keys: int) -> bool:
        """Process one frame of key input; return False when KEY0 asks to quit."""
        if keys & KEY_QUIT:
            return False
        start_edge = bool(keys & KEY_START) and not self.prev_keys & KEY_START

        if self.state is SnakeState.START_SCREEN:
            if start_edge:
                self.start()
        elif self.state is SnakeState.RUNNING:
            if keys & KEY_LEFT and not self.prev_keys & KEY_LEFT:
                self.turn_left()
            if keys & KEY_RIGHT and not self.prev_keys & KEY_RIGHT:
                self.turn_right()
            self.advance()
        else:
            self.messages.append(
                f"FIM DE JOGO! Pontuacao final: {self.score}. "
                "Pressione KEY1 ou KEY2 para jogar novamente."
            )
            if start_edge:
                self.state = SnakeState.START_SCREEN

        self.prev_keys = keys
        return True

    def draw(self, canvas: Canvas) -> None:
        """Draw the background, the food and the snake."""
        canvas.fill(BG_COLOR)
        _cell(canvas, self.food.x, self.food.y, RED)
        for index, segment in enumerate(self.body):
            _cell(canvas, segment.x, segment.y, LIME_GREEN if index == 0 else GREEN)

    def draw_start_screen(self, canvas: Canvas) -> None:
        """Draw the title screen: a small snake and a start marker."""
        canvas.fill(BG_COLOR)
        cx, cy = GRID_WIDTH // 2, GRID_HEIGHT // 2
        _cell(canvas, cx - 2, cy - 2, LIME_GREEN)
        for dx in range(-1, 3):
            _cell(canvas, cx + dx, cy - 2, GREEN)
        _cell(canvas, cx, cy, WHITE)

    def draw_game_over(self, canvas: Canvas) -> None:
        """Draw the game-over banner over the current picture."""
        cx, cy = GRID_WIDTH // 2, GRID_HEIGHT // 2
        for row in range(5):
            for col in range(12):
                _cell(canvas, cx - 6 + col, cy - 2 + row, TEXT_BG_COLOR)
        for dx in (-4, -2, 0, 2, 4):
            _cell(canvas, cx + dx, cy - 1, RED)


def run(board: Board, rng: Optional[random.Random] = None) -> None:
    """Play until KEY0 is pressed, drawing straight onto the board's screen."""
    if board.screen is None:
        raise BoardError("the board has no screen")
    canvas = Canvas(board.screen)
    game = SnakeGame(rng)

    while True:
        before = game.state
        running = game.step(board.keys())
        for message in game.messages:
            print(message, flush=True)
        game.messages.clear()
        if not running:
            break

        if before is SnakeState.START_SCREEN:
            if game.state is SnakeState.RUNNING:
                canvas.fill(BG_COLOR)
            else:
                game.draw_start_screen(canvas)
        elif before is SnakeState.RUNNING:
            if game.state is SnakeState.RUNNING:
                game.draw(canvas)
        else:
            game.draw_game_over(canvas)

        time.sleep(game.delay())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board and play; return the process exit status."""
    parser = argparse.ArgumentParser(description="Snake steered with KEY1 and KEY2.")
    parser.add_argument("--device", default=DEFAULT_DEVICE, help="physical memory device")
    args = parser.parse_args(argv)

    try:
        board = Board.open(args.device)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        return 1

    with board:
        run(board, random.Random())
    print("\nRecursos liberados. Saindo do jogo.")
    return 0