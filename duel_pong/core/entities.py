"""
Duel Pong game entities: board, ball, paddles, score and game state
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np


@dataclass(frozen=True)
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Boundaries:
    """The playable rectangle: walls on the left and right, goals on top and bottom"""

    x_min: float
    x_max: float
    y_min: float  # Goal of the top paddle
    y_max: float  # Goal of the bottom paddle

    def __post_init__(self) -> None:
        if not self.x_min < self.x_max:
            raise ValueError(f"x_min ({self.x_min}) must be lower than x_max ({self.x_max})")
        if not self.y_min < self.y_max:
            raise ValueError(f"y_min ({self.y_min}) must be lower than y_max ({self.y_max})")

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, point: Vector2D) -> bool:
        """Checks if a point is inside the board"""
        return self.x_min <= point.x <= self.x_max and self.y_min <= point.y <= self.y_max

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x_min, self.x_max, self.y_min, self.y_max)


@dataclass(frozen=True)
class Ball:
    """Game ball

    The speed is in distance per frame. An angle of 0 points toward increasing x,
    and increasing the angle rotates toward increasing y (down on screen).
    """

    position: Vector2D
    speed: float = 0.0
    angle: float = 0.0

    @property
    def is_held(self) -> bool:
        return self.speed == 0

    @property
    def velocity(self) -> Vector2D:
        return Vector2D(self.speed * math.cos(self.angle), self.speed * math.sin(self.angle))

    def advanced(self) -> "Ball":
        """Returns the ball one frame further along its trajectory"""
        return Ball(self.position + self.velocity, self.speed, self.angle)


@dataclass(frozen=True)
class Paddle:
    """Player paddle, positioned by its centre"""

    position: Vector2D

    def get_rect(self, width: float, height: float) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.position.x - width / 2, self.position.y - height / 2, width, height)

    def contains(self, point: Vector2D, width: float, height: float) -> bool:
        """Checks if a point lies strictly inside the paddle rectangle"""
        return (
            abs(point.x - self.position.x) < width / 2
            and abs(point.y - self.position.y) < height / 2
        )

    def moved_to(self, x: float) -> "Paddle":
        return Paddle(Vector2D(x, self.position.y))


class ServingPaddle(Enum):
    """Which paddle holds the ball, NONE while the ball is in free flight"""

    PADDLE_0 = 0
    PADDLE_1 = 1
    NONE = None

    @property
    def index(self) -> int | None:
        return self.value

    @property
    def is_serving(self) -> bool:
        return self is not ServingPaddle.NONE


class Score(NamedTuple):
    """Points of the top (player 1) and bottom (player 2) paddles"""

    player1: int = 0
    player2: int = 0

    def incremented(self, index: int) -> "Score":
        """Returns the score with one more point for the given paddle index"""
        if index == 0:
            return Score(self.player1 + 1, self.player2)
        return Score(self.player1, self.player2 + 1)


class InputAction(Enum):
    """Logical actions read by the simulation"""

    MOVE_TOP_LEFT = "move_top_left"
    MOVE_TOP_RIGHT = "move_top_right"
    MOVE_BOTTOM_LEFT = "move_bottom_left"
    MOVE_BOTTOM_RIGHT = "move_bottom_right"
    RELEASE_SERVE = "release_serve"


@dataclass(frozen=True)
class GameState:
    """Complete snapshot of one frame of the game"""

    boundaries: Boundaries
    ball: Ball
    paddles: tuple[Paddle, Paddle]  # 0 is the top paddle, 1 the bottom one
    serving_paddle: ServingPaddle
    score: Score
