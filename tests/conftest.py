"""
Shared fixtures for the Duel Pong tests
"""

import pytest

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Boundaries
from duel_pong.core.entities import GameState
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import Score
from duel_pong.core.entities import ServingPaddle
from duel_pong.core.entities import Vector2D


@pytest.fixture
def make_state():
    """Factory building a 500x500 game state with the ball in free flight by default"""

    def _make_state(
        ball_x: float = 250.0,
        ball_y: float = 250.0,
        speed: float = 3.0,
        angle: float = 0.0,
        paddle_x: tuple[float, float] = (250.0, 250.0),
        serving_paddle: ServingPaddle = ServingPaddle.NONE,
        score: tuple[int, int] = (0, 0),
    ) -> GameState:
        return GameState(
            boundaries=Boundaries(0, 500, 0, 500),
            ball=Ball(Vector2D(ball_x, ball_y), speed, angle),
            paddles=(
                Paddle(Vector2D(paddle_x[0], 20.0)),
                Paddle(Vector2D(paddle_x[1], 480.0)),
            ),
            serving_paddle=serving_paddle,
            score=Score(*score),
        )

    return _make_state
