"""
Simulation step for Duel Pong
"""

import logging
from collections.abc import Container
from dataclasses import dataclass
from typing import Any

from duel_pong.core.collision import Collision
from duel_pong.core.collision import detect_collisions
from duel_pong.core.collision import handle_collisions
from duel_pong.core.entities import Ball
from duel_pong.core.entities import Boundaries
from duel_pong.core.entities import GameState
from duel_pong.core.entities import InputAction
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import Score
from duel_pong.core.entities import ServingPaddle
from duel_pong.core.entities import Vector2D
from duel_pong.core.serve import handle_goal_collisions
from duel_pong.core.serve import serve_position
from duel_pong.core.serve import update_ball
from duel_pong.core.serve import update_serving_paddle
from duel_pong.utils.config import game_config

logger = logging.getLogger(__name__)

Inputs = Container[InputAction]

# (move left, move right) inputs of each paddle
PADDLE_CONTROLS = (
    (InputAction.MOVE_TOP_LEFT, InputAction.MOVE_TOP_RIGHT),
    (InputAction.MOVE_BOTTOM_LEFT, InputAction.MOVE_BOTTOM_RIGHT),
)


@dataclass(frozen=True)
class StepResult:
    """New state of a frame, with what happened during it"""

    state: GameState
    collisions: tuple[Collision, ...] = ()
    served: bool = False  # The ball left a paddle in this frame


def get_paddle_x_limits(boundaries: Boundaries) -> tuple[float, float]:
    """Range of the paddle centre keeping the whole paddle on the board"""
    half_width = game_config.PADDLE_WIDTH / 2
    return boundaries.x_min + half_width, boundaries.x_max - half_width


def create_game_state(board_width: float, board_height: float) -> GameState:
    """
    Creates the starting state of a game: top paddle serving, score at zero

    Raises:
        ValueError: If the board is not large enough for the paddles and a held ball
    """
    if board_width <= 0 or board_height <= 0:
        raise ValueError(f"Board dimensions must be positive, got {board_width}x{board_height}")

    boundaries = Boundaries(0, board_width, 0, board_height)
    x_min, x_max = get_paddle_x_limits(boundaries)
    if x_min > x_max:
        raise ValueError(
            f"Board width {board_width} is too small for paddles of width "
            f"{game_config.PADDLE_WIDTH}"
        )
    if board_height < game_config.MIN_BOARD_HEIGHT:
        raise ValueError(
            f"Board height {board_height} is too short for a held ball, "
            f"at least {game_config.MIN_BOARD_HEIGHT} is needed"
        )

    center_x = board_width / 2
    paddles = (
        Paddle(Vector2D(center_x, boundaries.y_min + game_config.PADDLE_OFFSET_Y)),
        Paddle(Vector2D(center_x, boundaries.y_max - game_config.PADDLE_OFFSET_Y)),
    )
    serving_paddle = ServingPaddle.PADDLE_0

    return GameState(
        boundaries=boundaries,
        ball=Ball(serve_position(paddles[0], serving_paddle)),
        paddles=paddles,
        serving_paddle=serving_paddle,
        score=Score(0, 0),
    )


def update_paddles(
    paddles: tuple[Paddle, Paddle], boundaries: Boundaries, inputs: Inputs
) -> tuple[Paddle, Paddle]:
    """
    Moves the paddles according to the inputs, keeping them on the board

    Each move starts from the previous position, so when both keys of a paddle are
    held the right move wins.
    """
    x_min, x_max = get_paddle_x_limits(boundaries)
    new_paddles = []

    for paddle, (left, right) in zip(paddles, PADDLE_CONTROLS):
        x = paddle.position.x
        if left in inputs:
            x = max(x_min, min(x_max, paddle.position.x - game_config.PADDLE_SPEED))
        if right in inputs:
            x = max(x_min, min(x_max, paddle.position.x + game_config.PADDLE_SPEED))

        new_paddles.append(paddle.moved_to(x))

    return new_paddles[0], new_paddles[1]


def advance(old_state: GameState, inputs: Inputs) -> StepResult:
    """
    Computes the next frame of the game

    The serve input and the paddles are resolved first so that a ball served in this
    frame leaves with its launch angle and a held ball follows its paddle. Collisions
    are then detected on this tentative state. A goal hands the serve to a paddle,
    overriding the tentative serve state, and the ball is placed again so it goes
    straight to the new server.

    Args:
        old_state: Committed state of the previous frame
        inputs: Snapshot of the actions held down during this frame

    Returns:
        StepResult: The new state, the detected collisions and whether the ball was served
    """
    serving_paddle = update_serving_paddle(old_state.serving_paddle, inputs)
    paddles = update_paddles(old_state.paddles, old_state.boundaries, inputs)
    ball = update_ball(serving_paddle, paddles, old_state.ball, old_state.serving_paddle)

    tentative = GameState(
        boundaries=old_state.boundaries,
        ball=ball,
        paddles=paddles,
        serving_paddle=serving_paddle,
        score=old_state.score,
    )
    collisions = detect_collisions(tentative)

    # A held ball only follows its paddle
    if not serving_paddle.is_serving:
        ball = handle_collisions(collisions, tentative, old_state)

    score, final_serving_paddle = handle_goal_collisions(
        collisions, old_state.score, serving_paddle
    )
    if score != old_state.score:
        ball = update_ball(final_serving_paddle, paddles, old_state.ball, old_state.serving_paddle)

    state = GameState(
        boundaries=old_state.boundaries,
        ball=ball,
        paddles=paddles,
        serving_paddle=final_serving_paddle,
        score=score,
    )
    served = old_state.serving_paddle.is_serving and not final_serving_paddle.is_serving

    return StepResult(state=state, collisions=collisions, served=served)


def step(old_state: GameState, inputs: Inputs) -> GameState:
    """Computes the next committed state of the game"""
    return advance(old_state, inputs).state


class PhysicsEngine:
    """Owns the current game state and moves it forward once per frame"""

    def __init__(self, board_width: float, board_height: float):
        self.board_width = board_width
        self.board_height = board_height
        self.reset_game()

    @property
    def score(self) -> Score:
        return self.state.score

    def reset_game(self) -> None:
        """Resets the game to zero"""
        self.state = create_game_state(self.board_width, self.board_height)
        self.last_result = StepResult(self.state)
        self.frame_count = 0

    def update(self, inputs: Inputs) -> StepResult:
        """Updates the game by one frame"""
        old_score = self.state.score
        self.last_result = advance(self.state, inputs)
        self.state = self.last_result.state
        self.frame_count += 1

        if self.state.score != old_score:
            logger.debug("Score: %d - %d", *self.state.score)

        return self.last_result

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state as plain values"""
        state = self.state
        return {
            "ball_position": state.ball.position.to_tuple(),
            "ball_speed": state.ball.speed,
            "ball_angle": state.ball.angle,
            "paddle_positions": [paddle.position.to_tuple() for paddle in state.paddles],
            "serving_paddle": state.serving_paddle.index,
            "score": list(state.score),
            "frame_count": self.frame_count,
            "board_bounds": state.boundaries.to_tuple(),
        }
