import random

import pytest

from de1games.board import VISIBLE_HEIGHT, VISIBLE_WIDTH
from de1games.flappy import (
    GAP_MARGIN,
    KEY_P1,
    KEY_P2,
    KEY_QUIT,
    OBSTACLE_WIDTH,
    P1_X_POS,
    SW_PAUSE,
    SW_TWO_PLAYER,
    Bird,
    Difficulty,
    FlappyGame,
    GameState,
    Obstacle,
    collides,
)


def new_game(switches=0, seed=1):
    game = FlappyGame(random.Random(seed))
    d = Difficulty.from_switches(switches)
    game.reset(d.two_player, d.num_obstacles, d.spacing, d.gap_height)
    return game


def test_difficulty_all_off():
    d = Difficulty.from_switches(0)
    assert (d.speed, d.gap_height, d.num_obstacles, d.spacing) == (2, 100, 2, 220)
    assert (d.gravity, d.jump_velocity, d.radius) == (0.5, -5.5, 10)
    assert not d.two_player and not d.paused


def test_difficulty_all_on():
    d = Difficulty.from_switches(0x3FF)
    assert (d.speed, d.gap_height, d.num_obstacles, d.spacing) == (5, 70, 3, 130)
    assert (d.gravity, d.jump_velocity, d.radius) == (0.35, -7.0, 13)
    assert d.two_player and d.paused


@pytest.mark.parametrize("bits,speed", [(0, 2), (1, 3), (2, 4), (3, 5)])
def test_speed_levels(bits, speed):
    assert Difficulty.from_switches(bits).speed == speed


@pytest.mark.parametrize("bits,gap", [(0, 100), (1, 90), (2, 80), (3, 70)])
def test_gap_levels(bits, gap):
    assert Difficulty.from_switches(bits << 2).gap_height == gap


def test_collides_with_ceiling_and_floor():
    far = Obstacle(x=VISIBLE_WIDTH)
    assert collides(Bird(y=5), P1_X_POS, far, 10, 100)
    assert collides(Bird(y=VISIBLE_HEIGHT - 5), P1_X_POS, far, 10, 100)
    assert not collides(Bird(y=VISIBLE_HEIGHT / 2), P1_X_POS, far, 10, 100)


def test_collides_with_pipes_only_outside_gap():
    pipe = Obstacle(x=P1_X_POS - 10, gap_y=100)
    assert not collides(Bird(y=150), P1_X_POS, pipe, 10, 100)
    assert collides(Bird(y=105), P1_X_POS, pipe, 10, 100)
    assert collides(Bird(y=195), P1_X_POS, pipe, 10, 100)


def test_no_collision_without_horizontal_overlap():
    pipe = Obstacle(x=P1_X_POS + 10, gap_y=100)
    assert not collides(Bird(y=50), P1_X_POS, pipe, 10, 100)
    assert collides(Bird(y=50), P1_X_POS, pipe, 11, 100)


def test_reset_lines_up_obstacles():
    game = new_game()
    first, second, third = game.obstacles
    assert first.x == VISIBLE_WIDTH + 150
    assert second.x - first.x == 220
    assert third.x == -OBSTACLE_WIDTH - 10
    for obstacle in (first, second):
        assert GAP_MARGIN <= obstacle.gap_y < VISIBLE_HEIGHT - 100 - GAP_MARGIN
        assert not obstacle.scored


def test_reset_two_player_mode():
    game = new_game(SW_TWO_PLAYER)
    assert game.player1.alive and game.player2.alive
    assert game.player2.y == VISIBLE_HEIGHT / 2.0
    one = new_game(0)
    assert not one.player2.alive
    assert "KEY2" in game.last_banner and "KEY2" not in one.last_banner


def test_quit_key_stops():
    game = new_game()
    assert game.step(KEY_QUIT, 0) is False
    assert game.step(0, 0) is True


def test_jump_on_press_edge_only():
    game = new_game()
    d = Difficulty.from_switches(0)
    game.step(KEY_P1, 0)
    assert game.player1.velocity_y == pytest.approx(d.jump_velocity + d.gravity)
    game.step(KEY_P1, 0)
    assert game.player1.velocity_y == pytest.approx(d.jump_velocity + 2 * d.gravity)


def test_pause_freezes_but_renders():
    game = new_game()
    y = game.player1.y
    xs = [o.x for o in game.obstacles]
    assert game.step(KEY_P1, SW_PAUSE)
    assert game.player1.y == y
    assert [o.x for o in game.obstacles] == xs
    assert game.frame_ready and game.difficulty.paused


def test_falling_bird_ends_game_and_records_high_score():
    game = new_game()
    for _ in range(200):
        game.step(0, 0)
        if game.state is GameState.OVER:
            break
    assert game.state is GameState.OVER
    assert not game.player1.alive
    assert game.high_score_p1 == game.score_p1
    game.step(0, 0)
    assert not game.frame_ready


def test_restart_after_game_over():
    game = new_game()
    while game.state is GameState.RUNNING:
        game.step(0, 0)
    count = game.reset_count
    game.step(KEY_P2, 0)
    assert game.state is GameState.RUNNING
    assert game.reset_count == count + 1
    assert game.score_p1 == 0 and game.player1.alive


def test_scoring_when_pipe_passes():
    game = new_game()
    game.obstacles[0] = Obstacle(x=11, gap_y=100, scored=False)
    game.step(0, 0)
    assert game.obstacles[0].scored
    assert game.score_p1 == 1
    assert game.score_p2 == 0
    game.step(0, 0)
    assert game.score_p1 == 1


def test_recycled_pipe_goes_after_rightmost():
    game = new_game()
    game.obstacles[0] = Obstacle(x=-49, gap_y=100, scored=True)
    rightmost = max(o.x for o in game.obstacles[:2])
    game.step(0, 0)
    recycled = game.obstacles[0]
    assert recycled.x == rightmost + 220
    assert not recycled.scored
    assert GAP_MARGIN <= recycled.gap_y < VISIBLE_HEIGHT - 100 - GAP_MARGIN


def test_two_player_game_continues_while_one_alive():
    game = new_game(SW_TWO_PLAYER)
    for _ in range(5):
        game.step(0, SW_TWO_PLAYER)
    game.player1.alive = False
    game.player2.y = VISIBLE_HEIGHT / 2
    game.player2.velocity_y = 0
    game.step(0, SW_TWO_PLAYER)
    assert game.state is GameState.RUNNING
    game.player2.y = 2
    game.step(0, SW_TWO_PLAYER)
    assert game.state is GameState.OVER