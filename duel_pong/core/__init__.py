"""
Core module of Duel Pong game
"""

from duel_pong.core.entities import Ball
from duel_pong.core.entities import Boundaries
from duel_pong.core.entities import GameState
from duel_pong.core.entities import InputAction
from duel_pong.core.entities import Paddle
from duel_pong.core.entities import Score
from duel_pong.core.entities import ServingPaddle
from duel_pong.core.entities import Vector2D
from duel_pong.core.physics import PhysicsEngine
from duel_pong.core.physics import StepResult
from duel_pong.core.physics import advance
from duel_pong.core.physics import create_game_state
from duel_pong.core.physics import step

__all__ = [
    "Ball",
    "Boundaries",
    "Paddle",
    "Score",
    "ServingPaddle",
    "GameState",
    "InputAction",
    "Vector2D",
    "PhysicsEngine",
    "StepResult",
    "advance",
    "create_game_state",
    "step",
]
