"""
Collision detection and response for Duel Pong

Detection only reads a game state and reports the collisions active in that frame.
Response computes the new ball trajectory from the detected collisions.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import replace
from enum import Enum

from duel_pong.core.entities import Ball, GameState, Vector2D
from duel_pong.utils.config import game_config


class WallSide(Enum):
    LEFT = "left"
    RIGHT = "right"


class GoalSide(Enum):
    TOP = "top"  # Goal of the top paddle, scores for the bottom one
    BOTTOM = "bottom"


@dataclass(frozen=True)
class BallWallCollision:
    wall: WallSide


@dataclass(frozen=True)
class BallPaddleCollision:
    paddle: int


@dataclass(frozen=True)
class BallGoalCollision:
    goal: GoalSide


Collision = BallWallCollision | BallPaddleCollision | BallGoalCollision


def detect_ball_wall_collision(state: GameState) -> BallWallCollision | None:
    """See if the ball is bouncing off either of the side walls"""
    ball, boundaries = state.ball, state.boundaries
    radius = game_config.BALL_RADIUS

    if ball.position.x - radius < boundaries.x_min:
        return BallWallCollision(WallSide.LEFT)
    if ball.position.x + radius > boundaries.x_max:
        return BallWallCollision(WallSide.RIGHT)
    return None


def detect_ball_goal_collision(state: GameState) -> BallGoalCollision | None:
    """See if the ball reaches the top or bottom goal line, the top one is checked first"""
    ball, boundaries = state.ball, state.boundaries
    radius = game_config.BALL_RADIUS

    if ball.position.y - radius < boundaries.y_min:
        return BallGoalCollision(GoalSide.TOP)
    if ball.position.y + radius > boundaries.y_max:
        return BallGoalCollision(GoalSide.BOTTOM)
    return None


def detect_ball_paddle_collisions(state: GameState) -> list[BallPaddleCollision]:
    """Returns a collision for every paddle whose rectangle contains the ball centre"""
    return [
        BallPaddleCollision(index)
        for index, paddle in enumerate(state.paddles)
        if paddle.contains(state.ball.position, game_config.PADDLE_WIDTH, game_config.PADDLE_HEIGHT)
    ]


def detect_collisions(state: GameState) -> tuple[Collision, ...]:
    """Runs every detector on the state, in wall, goal, paddle order"""
    collisions: list[Collision] = []

    wall_collision = detect_ball_wall_collision(state)
    if wall_collision is not None:
        collisions.append(wall_collision)

    goal_collision = detect_ball_goal_collision(state)
    if goal_collision is not None:
        collisions.append(goal_collision)

    collisions.extend(detect_ball_paddle_collisions(state))

    return tuple(collisions)


def handle_ball_wall_collision(ball: Ball, old_ball: Ball) -> Ball:
    """Reflects the ball off a vertical wall

    The reflection of an angle across a wall at angle w is 2w - angle, with the wall
    at π/2 this gives π - angle. The x position is recomputed from the previous frame
    so the ball does not step twice.
    """
    angle = math.pi - old_ball.angle
    x = old_ball.position.x + old_ball.speed * math.cos(angle)
    return replace(ball, angle=angle, position=Vector2D(x, ball.position.y))


def get_paddle_tilt(ball_x: float, paddle_x: float) -> float:
    """Maps the horizontal impact offset on a paddle to an angular deflection"""
    return math.pi * (ball_x - paddle_x) / (game_config.PADDLE_WIDTH + game_config.TILT_MARGIN)


def handle_ball_paddle_collision(
    collision: BallPaddleCollision, ball: Ball, state: GameState, old_ball: Ball
) -> Ball:
    """Bounces the ball off a paddle, more horizontally the further from its centre"""
    paddle = state.paddles[collision.paddle]
    tilt = get_paddle_tilt(ball.position.x, paddle.position.x)

    # Vertical direction of travel before the hit
    if math.asin(math.sin(old_ball.angle)) > 0:
        angle = -math.pi / 2 + tilt
    else:
        angle = math.pi / 2 - tilt

    y = old_ball.position.y + old_ball.speed * math.sin(angle)
    return replace(ball, angle=angle, position=Vector2D(ball.position.x, y))


def handle_collisions(
    collisions: Iterable[Collision], state: GameState, old_state: GameState
) -> Ball:
    """
    Computes the ball after every wall and paddle collision of the frame

    Every collision is applied in order, each handler receiving the ball produced by
    the previous one. Goal collisions are left to the score tracker.

    Args:
        collisions: Collisions detected on the tentative state
        state: Tentative state of the current frame
        old_state: Committed state of the previous frame

    Returns:
        Ball: The ball with its new angle and corrected position
    """
    ball = state.ball
    old_ball = old_state.ball

    for collision in collisions:
        if isinstance(collision, BallWallCollision):
            ball = handle_ball_wall_collision(ball, old_ball)
        elif isinstance(collision, BallPaddleCollision):
            ball = handle_ball_paddle_collision(collision, ball, state, old_ball)

    return ball
