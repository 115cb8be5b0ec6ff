"""Drawing and main loop for the Flappy Bird game on the DE1-SoC board."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Optional, Sequence

from de1games.board import (
    DEFAULT_DEVICE,
    FRAME_SIZE,
    VISIBLE_HEIGHT,
    VISIBLE_WIDTH,
    Board,
    BoardError,
    Framebuffer,
)
from de1games.flappy import (
    NUM_PIPES_EASY,
    OBSTACLE_WIDTH,
    P1_X_POS,
    P2_X_POS,
    SPACING_EASY,
    SW_TWO_PLAYER,
    Difficulty,
    FlappyGame,
)
from de1games.graphics import Canvas
from de1games.sevenseg import encode_two_digits

WHITE = 0xFFFF
GREEN = 0x07E0
P1_COLOR = 0xFFE0
P2_COLOR = 0xF800
BEAK_COLOR = 0xFC00
SKY_BLUE = 0x841F
BLACK = 0x0000

INITIAL_GAP = 90
FRAME_SECONDS = 0.016666
SCORE_RIGHT = VISIBLE_WIDTH - 10
SCORE_TOP = 10

_PAUSE_BARS = ((145, 100, 155, 140), (165, 100, 175, 140))


def draw_bird(canvas: Canvas, x: int, y: int, color: int, radius: int) -> None:
    """Draw a bird centred on (x, y): body, eye, pupil, beak and wing."""
    eye_x = x + radius // 2
    eye_y = y - radius // 3
    canvas.fill_circle(x, y, radius, color)
    canvas.fill_circle(eye_x, eye_y, radius // 4, WHITE)
    canvas.set_pix(eye_x, eye_y, BLACK)
    canvas.fill_rect(x + radius, y - 2, x + radius + 5, y + 2, BEAK_COLOR)
    canvas.fill_rect(x - radius // 2, y, x, y + 5, WHITE)


def render_frame(game: FlappyGame, canvas: Canvas, difficulty: Difficulty, paused: bool) -> None:
    """Draw the sky, pipes, live birds, the pause icon and the combined score."""
    canvas.fill(SKY_BLUE)
    gap = difficulty.gap_height
    for obstacle in game.obstacles[:difficulty.num_obstacles]:
        right = obstacle.x + OBSTACLE_WIDTH
        canvas.fill_rect(obstacle.x, 0, right, obstacle.gap_y, GREEN)
        canvas.fill_rect(obstacle.x, obstacle.gap_y + gap, right, VISIBLE_HEIGHT, GREEN)

    for bird, bird_x, color in ((game.player1, P1_X_POS, P1_COLOR), (game.player2, P2_X_POS, P2_COLOR)):
        if bird.alive:
            draw_bird(canvas, bird_x, int(bird.y), color, difficulty.radius)

    if paused:
        for bar in _PAUSE_BARS:
            canvas.fill_rect(*bar, WHITE)

    canvas.draw_number(game.score_p1 + game.score_p2, SCORE_RIGHT, SCORE_TOP, WHITE)


def _show_high_scores(board: Board, game: FlappyGame) -> None:
    board.set_hex(encode_two_digits(game.high_score_p1), encode_two_digits(game.high_score_p2))


def run(board: Board, rng: Optional[random.Random] = None) -> None:
    """Play until KEY0 is pressed, drawing through a back buffer onto the board's screen."""
    game = FlappyGame(rng)
    back = Framebuffer(bytearray(FRAME_SIZE))
    canvas = Canvas(back)

    two_player = bool(board.switches() & SW_TWO_PLAYER)
    game.reset(two_player, NUM_PIPES_EASY, SPACING_EASY, INITIAL_GAP)
    print(game.last_banner, flush=True)
    _show_high_scores(board, game)
    resets_seen = game.reset_count

    while True:
        if not game.step(board.keys(), board.switches()):
            break
        if game.reset_count != resets_seen:
            resets_seen = game.reset_count
            print(game.last_banner, flush=True)
        if game.frame_ready:
            render_frame(game, canvas, game.difficulty, game.difficulty.paused)
            if board.screen is not None:
                board.screen.copy_from(back)
            _show_high_scores(board, game)
        time.sleep(FRAME_SECONDS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board and play; return the process exit status."""
    parser = argparse.ArgumentParser(description="Flappy Bird for one or two players.")
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