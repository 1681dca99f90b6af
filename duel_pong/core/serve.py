"""
Serve state machine and score tracking for Duel Pong
"""

import logging
import math
from collections.abc import Container
from collections.abc import Iterable

from duel_pong.core.collision import BallGoalCollision
from duel_pong.core.collision import Collision
from duel_pong.core.collision import GoalSide
from duel_pong.core.entities import Ball
from duel_pong.core.entities import InputAction
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import Score
from duel_pong.core.entities import ServingPaddle
from duel_pong.core.entities import Vector2D
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def update_serving_paddle(
    old_serving_paddle: ServingPaddle, inputs: Container[InputAction]
) -> ServingPaddle:
    """Releases a held ball when the serve input is active, otherwise nothing changes"""
    if old_serving_paddle.is_serving and InputAction.RELEASE_SERVE in inputs:
        logger.debug("Paddle %s serves", old_serving_paddle.index)
        return ServingPaddle.NONE
    return old_serving_paddle


def get_serve_offset() -> float:
    """Distance between the centre of a serving paddle and the centre of its ball"""
    return game_config.SERVE_OFFSET


def serve_position(paddle: Paddle, serving_paddle: ServingPaddle) -> Vector2D:
    """Release point of a held ball, on the side of the paddle facing the opponent"""
    offset = get_serve_offset()
    if serving_paddle is ServingPaddle.PADDLE_0:
        # Top paddle, the ball sits under it
        return Vector2D(paddle.position.x, paddle.position.y + offset)
    return Vector2D(paddle.position.x, paddle.position.y - offset)


def serve_angle(serving_paddle: ServingPaddle) -> float:
    """Launch angle of a served ball, straight toward the opponent"""
    if serving_paddle is ServingPaddle.PADDLE_0:
        return math.pi / 2
    return -math.pi / 2


def update_ball(
    serving_paddle: ServingPaddle,
    paddles: tuple[Paddle, Paddle],
    old_ball: Ball,
    old_serving_paddle: ServingPaddle,
) -> Ball:
    """
    Moves the ball one frame ahead, before any collision is taken into account

    Args:
        serving_paddle: Serve state of the current frame
        paddles: Paddles of the current frame
        old_ball: Ball of the previous frame
        old_serving_paddle: Serve state of the previous frame

    Returns:
        Ball: Held at the serving paddle, just served, or advanced along its trajectory
    """
    if serving_paddle.is_serving:
        # The held ball is completely determined by the paddle position
        paddle = paddles[serving_paddle.index]
        return Ball(serve_position(paddle, serving_paddle), speed=0.0, angle=0.0)

    if old_serving_paddle.is_serving:
        # Released in this frame
        old_ball = Ball(
            old_ball.position,
            speed=game_config.BALL_SPEED,
            angle=serve_angle(old_serving_paddle),
        )

    return old_ball.advanced()


def on_goal(goal: GoalSide, score: Score) -> tuple[Score, ServingPaddle]:
    """Gives the point to the opponent of the goal's owner, who then serves"""
    if goal is GoalSide.TOP:
        # Bottom paddle scores, the ball goes back to the top paddle
        return score.incremented(1), ServingPaddle.PADDLE_0
    return score.incremented(0), ServingPaddle.PADDLE_1


def handle_goal_collisions(
    collisions: Iterable[Collision], score: Score, serving_paddle: ServingPaddle
) -> tuple[Score, ServingPaddle]:
    """Applies at most one goal per frame, the top goal taking precedence"""
    goals = {c.goal for c in collisions if isinstance(c, BallGoalCollision)}

    for side in (GoalSide.TOP, GoalSide.BOTTOM):
        if side in goals:
            new_score, next_server = on_goal(side, score)
            logger.debug("Goal %s, score is now %s", side.value, tuple(new_score))
            return new_score, next_server

    return score, serving_paddle
