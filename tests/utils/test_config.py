"""
Unit tests for configuration validation

Tests the configuration validation system including:
- Field constraints and board size validation
- Context manager for temporary config changes
- Saving and loading JSON configuration files
"""

import json

import pytest
from pydantic import ValidationError

from duel_pong.utils.config import (
    KEYBOARD_LAYOUTS,
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        """Default values are the classic game constants"""
        config = GameConfig()

        assert config.BOARD_WIDTH == 500
        assert config.BOARD_HEIGHT == 500
        assert config.BALL_RADIUS == 7.5
        assert config.BALL_SPEED == 3
        assert config.PADDLE_WIDTH == 80
        assert config.PADDLE_HEIGHT == 15
        assert config.PADDLE_SPEED == 2
        assert config.PADDLE_OFFSET_Y == 20

    def test_score_margin(self):
        assert GameConfig().SCORE_MARGIN == 20 + 15 + 20

    def test_serve_offset_and_min_board_height(self):
        config = GameConfig()
        assert config.SERVE_OFFSET == 7.5 + 7.5 + 1
        assert config.MIN_BOARD_HEIGHT == 2 * (20 + 16 + 7.5)

    def test_min_board_height_accepted(self):
        assert GameConfig(BOARD_HEIGHT=87).BOARD_HEIGHT == 87

    @pytest.mark.parametrize(
        "field,value",
        [
            ("BOARD_WIDTH", 0),
            ("BOARD_HEIGHT", -600),
            ("BALL_RADIUS", 0),
            ("BALL_SPEED", -3),
            ("PADDLE_WIDTH", 0),
            ("PADDLE_HEIGHT", -15),
            ("PADDLE_OFFSET_Y", -1),
            ("FPS", 0),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_assignment_is_validated(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.BALL_RADIUS = -1

    def test_board_narrower_than_paddle(self):
        """The paddle clamp range would be inverted"""
        with pytest.raises(ValidationError, match="BOARD_WIDTH"):
            GameConfig(BOARD_WIDTH=60)

    def test_board_too_short(self):
        """A held ball must sit clear of both goals"""
        with pytest.raises(ValidationError, match="BOARD_HEIGHT"):
            GameConfig(BOARD_HEIGHT=80)

    def test_unknown_keyboard_layout(self):
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    @pytest.mark.parametrize("layout", list(KEYBOARD_LAYOUTS))
    def test_get_keyboard_layout(self, layout):
        config = GameConfig(KEYBOARD_LAYOUT=layout)
        assert config.get_keyboard_layout() is KEYBOARD_LAYOUTS[layout]


class TestConfigContextManager:
    """Test temporary configuration changes"""

    def test_values_restored(self):
        original = game_config.BALL_SPEED

        with game_config_tmp(BALL_SPEED=6.0, PADDLE_SPEED=4.0):
            assert game_config.BALL_SPEED == 6.0
            assert game_config.PADDLE_SPEED == 4.0

        assert game_config.BALL_SPEED == original
        assert game_config.PADDLE_SPEED == 2.0

    def test_values_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with game_config_tmp(BALL_SPEED=6.0):
                raise RuntimeError("boom")

        assert game_config.BALL_SPEED == 3.0

    def test_invalid_value_rejected_and_restored(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(BALL_SPEED=5.0, BOARD_WIDTH=10):
                pass

        assert game_config.BALL_SPEED == 3.0
        assert game_config.BOARD_WIDTH == 500

    def test_dependent_values_restored_in_order(self):
        """Shrinking the paddle first allows a narrower board"""
        with game_config_tmp(PADDLE_WIDTH=20.0, BOARD_WIDTH=50):
            assert game_config.BOARD_WIDTH == 50

        assert game_config.BOARD_WIDTH == 500
        assert game_config.PADDLE_WIDTH == 80


class TestConfigFiles:
    """Test JSON save and load"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = GameConfig(BALL_SPEED=4.5, KEYBOARD_LAYOUT="azerty")

        config.save_to_file(str(path))
        loaded = GameConfig.load_from_file(str(path))

        assert loaded == config
        assert json.loads(path.read_text())["BALL_SPEED"] == 4.5

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(BOARD_WIDTH=300, PADDLE_WIDTH=50).save_to_file(str(path))

        with game_config_tmp(BOARD_WIDTH=500, PADDLE_WIDTH=80):
            assert load_config_from_file(str(path))
            assert game_config.BOARD_WIDTH == 300
            assert game_config.PADDLE_WIDTH == 50

        assert game_config.BOARD_WIDTH == 500
        assert game_config.PADDLE_WIDTH == 80

    def test_load_into_global_config_missing_file(self, tmp_path):
        assert not load_config_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config_invalid_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"BALL_RADIUS": -1}))

        assert not load_config_from_file(str(path))
        assert game_config.BALL_RADIUS == 7.5

    def test_reset_to_defaults(self):
        config = GameConfig(BALL_SPEED=5.0)
        config.reset_to_defaults()
        assert config == GameConfig()
