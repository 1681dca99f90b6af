"""
Duel Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Key bindings for the two paddles and the serve release"""

    name: str
    top_keys: dict[str, int]
    bottom_keys: dict[str, int]
    serve_key: int
    display_names: dict[str, str]


# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        top_keys={"left": pygame.K_a, "right": pygame.K_d},
        bottom_keys={"left": pygame.K_LEFT, "right": pygame.K_RIGHT},
        serve_key=pygame.K_SPACE,
        display_names={"left": "A", "right": "D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        top_keys={"left": pygame.K_q, "right": pygame.K_d},  # Q instead of A
        bottom_keys={"left": pygame.K_LEFT, "right": pygame.K_RIGHT},
        serve_key=pygame.K_SPACE,
        display_names={"left": "Q", "right": "D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        top_keys={"left": pygame.K_a, "right": pygame.K_d},
        bottom_keys={"left": pygame.K_LEFT, "right": pygame.K_RIGHT},
        serve_key=pygame.K_SPACE,
        display_names={"left": "A", "right": "D"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with game_config_tmp
    model_config = {"validate_assignment": True}

    # Board dimensions
    BOARD_WIDTH: int = Field(default=500, gt=0, description="Board width in pixels")
    BOARD_HEIGHT: int = Field(default=500, gt=0, description="Board height in pixels")

    # Ball physics
    BALL_RADIUS: float = Field(default=7.5, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=3.0, gt=0, description="Serve speed in pixels per frame")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=80.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=15.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=2.0, gt=0, description="Paddle speed in pixels per frame")
    PADDLE_OFFSET_Y: float = Field(
        default=20.0, ge=0, description="Distance from the goal line to the paddle centre"
    )

    # Serve and bounce tuning
    SERVE_CLEARANCE: float = Field(
        default=1.0, ge=0, description="Gap between a held ball and its paddle"
    )
    TILT_MARGIN: float = Field(
        default=20.0, ge=0, description="Extra width added to the paddle in the tilt formula"
    )

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display and sound
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    SOUND_ENABLED: bool = Field(default=False, description="Play sounds at start-up")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(170, 205, 255), description="RGB")
    BALL_COLOR: tuple[int, int, int] = Field(default=(235, 205, 95), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 170, 200), description="RGB color")
    LINE_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    SCORE_COLOR: tuple[int, int, int] = Field(default=(235, 240, 255), description="RGB color")

    @property
    def SCORE_MARGIN(self) -> float:
        """Distance from the goal line to the score digits"""
        return self.PADDLE_OFFSET_Y + self.PADDLE_HEIGHT + 20

    @property
    def SERVE_OFFSET(self) -> float:
        """Distance between the centre of a serving paddle and the centre of its ball"""
        return self.PADDLE_HEIGHT / 2 + self.BALL_RADIUS + self.SERVE_CLEARANCE

    @property
    def MIN_BOARD_HEIGHT(self) -> float:
        """Smallest board height keeping a held ball clear of both goals"""
        return 2 * (self.PADDLE_OFFSET_Y + self.SERVE_OFFSET + self.BALL_RADIUS)

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_board_dimensions(self) -> "GameConfig":
        """Validate the board is large enough for the paddles and a held ball"""
        min_width = self.PADDLE_WIDTH + 2 * self.BALL_RADIUS
        if self.BOARD_WIDTH < min_width:
            raise ValueError(f"BOARD_WIDTH must be at least {min_width} pixels")

        if self.BOARD_HEIGHT < self.MIN_BOARD_HEIGHT:
            raise ValueError(f"BOARD_HEIGHT must be at least {self.MIN_BOARD_HEIGHT} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "duel_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "duel_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    # Board checks run on every assignment, so bypass them while copying a
    # configuration that was already validated as a whole.
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording the previous ones"""
    for name, new_value in kwargs.items():
        old_values.setdefault(name, getattr(obj, name))
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # Restore in reverse order so every intermediate config stays valid
        for name in reversed(list(old_values)):
            setattr(game_config, name, old_values[name])
