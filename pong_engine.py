"""
Pong simulation core.

All game state lives in a single GameState value. Every operation takes the
state, mutates it and hands it back, so the loop can be driven by a pygame
window, a streamlit page or a test without any drawing surface.

Randomness (serve direction and angle) comes from an injected source with
`choice` and `uniform`, a random.Random by default.
"""
import random
from dataclasses import dataclass, field
from typing import Optional


SERVE_SPEED = 6      # horizontal ball speed after a serve
SERVE_SPREAD = 4     # vertical serve speed drawn from [-SERVE_SPREAD, SERVE_SPREAD]
SPIN = 5             # vertical speed at the very edge of a paddle
AI_STEP = 5          # opponent paddle speed per tick
AI_DEAD_ZONE = 10    # opponent holds still while this close to the ball


def limit(v, a, b):
    return max(a, min(b, v))


@dataclass
class Arena:
    width: float = 800
    height: float = 500


@dataclass
class Paddle:
    y: float
    width: float
    height: float

    @property
    def center(self):
        return self.y + self.height / 2


@dataclass
class Ball:
    x: float
    y: float
    size: float
    vx: float = 0.0
    vy: float = 0.0

    @property
    def center(self):
        return self.y + self.size / 2


@dataclass
class Score:
    player: int = 0
    opponent: int = 0


@dataclass
class GameState:
    arena: Arena
    player: Paddle
    opponent: Paddle
    ball: Ball
    score: Score = field(default_factory=Score)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    ticks: int = 0


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame, everything a renderer needs."""
    width: float
    height: float
    paddle_w: float
    paddle_h: float
    ball_size: float
    player_y: float
    opponent_y: float
    ball_x: float
    ball_y: float
    player_score: int
    opponent_score: int


@dataclass
class Config:
    width: float = 800
    height: float = 500
    paddle_w: float = 12
    paddle_h: float = 80
    ball_size: float = 16
    fps: int = 60
    seed: Optional[int] = None
    show_score: bool = True


def new_game(cfg: Config, rng=None) -> GameState:
    return initialize(Arena(cfg.width, cfg.height), cfg.paddle_w, cfg.paddle_h,
                      cfg.ball_size, rng=rng, seed=cfg.seed)


def initialize(arena: Arena, paddle_w: float, paddle_h: float, ball_size: float,
               rng=None, seed: Optional[int] = None) -> GameState:
    if rng is None:
        rng = random.Random(seed)
    paddle_y = (arena.height - paddle_h) / 2
    state = GameState(
        arena=arena,
        player=Paddle(paddle_y, paddle_w, paddle_h),
        opponent=Paddle(paddle_y, paddle_w, paddle_h),
        ball=Ball(0.0, 0.0, ball_size),
        rng=rng,
    )
    return reset_ball(state, rng.choice([-1, 1]))


def reset_ball(state: GameState, direction: int) -> GameState:
    """Serve: recenter the ball and send it towards `direction` (-1 left, +1 right)."""
    ball, arena = state.ball, state.arena
    ball.x = arena.width / 2 - ball.size / 2
    ball.y = arena.height / 2 - ball.size / 2
    ball.vx = SERVE_SPEED * direction
    ball.vy = state.rng.uniform(-SERVE_SPREAD, SERVE_SPREAD)
    return state


def set_player_target(state: GameState, y: float) -> GameState:
    # y is where the pointer wants the paddle center to be
    paddle = state.player
    paddle.y = limit(y - paddle.height / 2, 0, state.arena.height - paddle.height)
    return state


def opponent_step(paddle_center: float, ball_center: float) -> float:
    if paddle_center < ball_center - AI_DEAD_ZONE:
        return AI_STEP
    if paddle_center > ball_center + AI_DEAD_ZONE:
        return -AI_STEP
    return 0


def follow_ball(state: GameState) -> float:
    """Player center one tracker step towards the ball, a stand-in for pointer input."""
    center = state.player.center
    return center + opponent_step(center, state.ball.center)


def _overlaps(ball: Ball, paddle: Paddle) -> bool:
    return ball.y + ball.size >= paddle.y and ball.y <= paddle.y + paddle.height


def _spin(ball: Ball, paddle: Paddle) -> float:
    # impact is -1 at the paddle's top edge, 0 at its center, 1 at the bottom
    impact = (ball.center - paddle.center) / (paddle.height / 2)
    return SPIN * impact


def tick(state: GameState) -> GameState:
    arena, ball = state.arena, state.ball
    player, opponent = state.player, state.opponent

    # Ball movement
    ball.x += ball.vx
    ball.y += ball.vy

    # Top and bottom walls
    if ball.y <= 0 or ball.y + ball.size >= arena.height:
        ball.vy = -ball.vy
        ball.y = limit(ball.y, 0, arena.height - ball.size)

    # Player paddle (left)
    if ball.x <= player.width and _overlaps(ball, player):
        ball.vx = abs(ball.vx)
        ball.vy = _spin(ball, player)
        ball.x = player.width

    # Opponent paddle (right)
    if ball.x + ball.size >= arena.width - opponent.width and _overlaps(ball, opponent):
        ball.vx = -abs(ball.vx)
        ball.vy = _spin(ball, opponent)
        ball.x = arena.width - opponent.width - ball.size

    # Side walls, checked independently
    if ball.x < 0:
        state.score.opponent += 1
        reset_ball(state, -1)
    if ball.x + ball.size > arena.width:
        state.score.player += 1
        reset_ball(state, 1)

    # Opponent tracks the ball
    opponent.y += opponent_step(opponent.center, ball.center)
    opponent.y = limit(opponent.y, 0, arena.height - opponent.height)

    state.ticks += 1
    return state


def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        width=state.arena.width,
        height=state.arena.height,
        paddle_w=state.player.width,
        paddle_h=state.player.height,
        ball_size=state.ball.size,
        player_y=state.player.y,
        opponent_y=state.opponent.y,
        ball_x=state.ball.x,
        ball_y=state.ball.y,
        player_score=state.score.player,
        opponent_score=state.score.opponent,
    )
