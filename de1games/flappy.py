"""Game logic for a one- or two-player Flappy Bird driven by the board's keys and switches."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from de1games.board import VISIBLE_HEIGHT, VISIBLE_WIDTH

P1_X_POS = 60
P2_X_POS = 90
OBSTACLE_WIDTH = 50
MAX_OBSTACLES = 3
GAP_MARGIN = 30

SPEED_LEVELS = (2, 3, 4, 5)
GAP_LEVELS = (100, 90, 80, 70)

NUM_PIPES_EASY = 2
NUM_PIPES_HARD = 3
SPACING_EASY = 220
SPACING_HARD = 130

GRAVITY_EASY = 0.5
GRAVITY_HARD = 0.35
JUMP_EASY = -5.5
JUMP_HARD = -7.0
RADIUS_EASY = 10
RADIUS_HARD = 13

KEY_QUIT = 0b0001
KEY_P1 = 0b0010
KEY_P2 = 0b0100
KEY_RESTART = KEY_P1 | KEY_P2

SW_PIPES = 1 << 4
SW_GRAVITY = 1 << 5
SW_JUMP = 1 << 6
SW_RADIUS = 1 << 7
SW_TWO_PLAYER = 1 << 8
SW_PAUSE = 1 << 9


class GameState(Enum):
    """States of the main game loop."""

    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Difficulty:
    """Game parameters selected by the slide switches."""

    speed: int
    gap_height: int
    num_obstacles: int
    spacing: int
    gravity: float
    jump_velocity: float
    radius: int
    two_player: bool
    paused: bool

    @classmethod
    def from_switches(cls, switches: int) -> "Difficulty":
        """Decode SW0-SW9 into game parameters."""
        hard_pipes = bool(switches & SW_PIPES)
        return cls(
            speed=SPEED_LEVELS[switches & 0b11],
            gap_height=GAP_LEVELS[(switches >> 2) & 0b11],
            num_obstacles=NUM_PIPES_HARD if hard_pipes else NUM_PIPES_EASY,
            spacing=SPACING_HARD if hard_pipes else SPACING_EASY,
            gravity=GRAVITY_HARD if switches & SW_GRAVITY else GRAVITY_EASY,
            jump_velocity=JUMP_HARD if switches & SW_JUMP else JUMP_EASY,
            radius=RADIUS_HARD if switches & SW_RADIUS else RADIUS_EASY,
            two_player=bool(switches & SW_TWO_PLAYER),
            paused=bool(switches & SW_PAUSE),
        )


@dataclass
class Bird:
    """A player's bird: vertical position, vertical speed and whether it is alive."""

    y: float = VISIBLE_HEIGHT / 2.0
    velocity_y: float = 0.0
    alive: bool = True

    def apply_physics(self, gravity: float) -> None:
        self.velocity_y += gravity
        self.y += self.velocity_y


@dataclass
class Obstacle:
    """A pair of pipes at horizontal position ``x`` with a gap starting at ``gap_y``."""

    x: int
    gap_y: int = GAP_MARGIN
    scored: bool = False


def collides(bird: Bird, bird_x: int, obstacle: Obstacle, radius: int, gap_height: int) -> bool:
    """Return True if the bird leaves the screen vertically or touches the obstacle's pipes."""
    top = bird.y - radius
    bottom = bird.y + radius
    if top < 0 or bottom > VISIBLE_HEIGHT:
        return True
    overlaps_x = bird_x + radius > obstacle.x and bird_x - radius < obstacle.x + OBSTACLE_WIDTH
    if overlaps_x and (top < obstacle.gap_y or bottom > obstacle.gap_y + gap_height):
        return True
    return False


def _banner(two_player: bool) -> str:
    parts = ["Iniciando Jogo! P1 (Amarelo) usa KEY1."]
    if two_player:
        parts.append("P2 (Vermelho) usa KEY2.")
    parts.append("KEY0 para Sair.")
    return " ".join(parts)


@dataclass
class FlappyGame:
    """The full game state, advanced one frame at a time by :meth:`step`."""

    rng: Optional[random.Random] = None
    player1: Bird = field(default_factory=Bird)
    player2: Bird = field(default_factory=lambda: Bird(alive=False))
    obstacles: List[Obstacle] = field(
        default_factory=lambda: [Obstacle(x=-OBSTACLE_WIDTH - 10) for _ in range(MAX_OBSTACLES)]
    )
    state: GameState = GameState.RUNNING
    score_p1: int = 0
    score_p2: int = 0
    high_score_p1: int = 0
    high_score_p2: int = 0
    prev_keys: int = 0
    difficulty: Difficulty = field(default_factory=lambda: Difficulty.from_switches(0))
    frame_ready: bool = False
    reset_count: int = 0
    last_banner: str = ""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.player1 = Bird()
        self.player2 = Bird(alive=False)
        self.obstacles = [Obstacle(x=-OBSTACLE_WIDTH - 10) for _ in range(MAX_OBSTACLES)]
        self.state = GameState.RUNNING
        self.score_p1 = 0
        self.score_p2 = 0
        self.high_score_p1 = 0
        self.high_score_p2 = 0
        self.prev_keys = 0
        self.difficulty = Difficulty.from_switches(0)
        self.frame_ready = False
        self.reset_count = 0
        self.last_banner = ""

    def _random_gap(self, gap_height: int) -> int:
        return self.rng.randrange(VISIBLE_HEIGHT - gap_height - 2 * GAP_MARGIN) + GAP_MARGIN

    def reset(self, two_player: bool, num_obstacles: int, spacing: int, gap_height: int) -> None:
        """Start a new round: centre the birds, zero the scores and line up the pipes."""
        self.player1 = Bird()
        self.player2 = Bird() if two_player else Bird(alive=False)
        self.score_p1 = 0
        self.score_p2 = 0
        for i, obstacle in enumerate(self.obstacles[:num_obstacles]):
            obstacle.x = VISIBLE_WIDTH + 150 + i * spacing
            obstacle.gap_y = self._random_gap(gap_height)
            obstacle.scored = False
        if num_obstacles < MAX_OBSTACLES:
            self.obstacles[MAX_OBSTACLES - 1].x = -OBSTACLE_WIDTH - 10
        self.state = GameState.RUNNING
        self.reset_count += 1
        self.last_banner = _banner(two_player)

    def _birds(self):
        return ((self.player1, P1_X_POS, KEY_P1), (self.player2, P2_X_POS, KEY_P2))

    def _update(self, keys: int, d: Difficulty) -> None:
        for bird, _, key in self._birds():
            if bird.alive and keys & key and not self.prev_keys & key:
                bird.velocity_y = d.jump_velocity
        for bird, _, _ in self._birds():
            if bird.alive:
                bird.apply_physics(d.gravity)

        active = self.obstacles[:d.num_obstacles]
        for obstacle in active:
            obstacle.x -= d.speed
            if not obstacle.scored and obstacle.x + OBSTACLE_WIDTH < P1_X_POS:
                obstacle.scored = True
                if self.player1.alive:
                    self.score_p1 += 1
                if self.player2.alive:
                    self.score_p2 += 1
            if obstacle.x + OBSTACLE_WIDTH < 0:
                max_x = max([0] + [other.x for other in active])
                obstacle.x = max_x + d.spacing
                obstacle.gap_y = self._random_gap(d.gap_height)
                obstacle.scored = False

        for obstacle in active:
            for bird, bird_x, _ in self._birds():
                if bird.alive and collides(bird, bird_x, obstacle, d.radius, d.gap_height):
                    bird.alive = False

        if d.two_player:
            over = not self.player1.alive and not self.player2.alive
        else:
            over = not self.player1.alive
        if over:
            self.state = GameState.OVER
            self.high_score_p1 = max(self.high_score_p1, self.score_p1)
            self.high_score_p2 = max(self.high_score_p2, self.score_p2)

    def step(self, keys: int, switches: int) -> bool:
        """Advance one frame; return False when KEY0 asks to quit.

        After the call, ``difficulty`` holds the decoded switches and
        ``frame_ready`` tells whether this frame should be drawn.
        """
        d = Difficulty.from_switches(switches)
        self.difficulty = d
        self.frame_ready = False
        if keys & KEY_QUIT:
            return False

        if self.state is GameState.RUNNING:
            if not d.paused:
                self._update(keys, d)
            self.frame_ready = True
        elif keys & KEY_RESTART and not self.prev_keys & KEY_RESTART:
            self.reset(d.two_player, d.num_obstacles, d.spacing, d.gap_height)

        self.prev_keys = keys
        return True