"""
Tests for sound selection and tone synthesis
"""

import numpy as np
import pytest

from duel_pong.core.collision import (
    BallGoalCollision,
    BallPaddleCollision,
    BallWallCollision,
    GoalSide,
    WallSide,
)
from duel_pong.core.physics import StepResult, create_game_state
from duel_pong.gui.sound import (
    SAMPLE_RATE,
    SOUND_BUILDERS,
    ramp_envelope,
    select_sounds,
    square_wave,
    time_axis,
)


@pytest.fixture
def state():
    return create_game_state(500, 500)


class TestSelectSounds:
    def test_quiet_frame(self, state):
        assert select_sounds(StepResult(state)) == []

    def test_one_sound_per_collision(self, state):
        result = StepResult(
            state,
            collisions=(
                BallWallCollision(WallSide.LEFT),
                BallGoalCollision(GoalSide.TOP),
                BallPaddleCollision(0),
            ),
        )
        assert select_sounds(result) == ["wall", "goal", "paddle"]

    def test_serve(self, state):
        assert select_sounds(StepResult(state, served=True)) == ["serve"]


class TestEnvelope:
    def test_starts_at_initial_value(self):
        t = time_axis(0.5)
        values = ramp_envelope(t, 0.2, [(0.0, 0.3, 0.3)])
        assert values[0] == pytest.approx(0.2)

    def test_approaches_target(self):
        t = time_axis(2.0)
        values = ramp_envelope(t, 0.0, [(0.0, 1.0, 0.1)])
        assert values[-1] == pytest.approx(1.0, abs=1e-3)
        assert np.all(np.diff(values) >= 0)

    def test_second_ramp_continues_from_first(self):
        t = time_axis(1.0)
        values = ramp_envelope(t, 0.0, [(0.0, 1.0, 0.1), (0.5, 0.0, 0.1)])
        before = values[int(0.5 * SAMPLE_RATE) - 1]
        after = values[int(0.5 * SAMPLE_RATE)]
        assert after == pytest.approx(before, abs=1e-3)
        assert values[-1] < 0.01


class TestTones:
    def test_square_wave_levels(self):
        t = time_axis(0.1)
        wave = square_wave(440, t)
        assert set(np.unique(wave)) == {-1.0, 1.0}

    @pytest.mark.parametrize(
        "name,duration", [("wall", 0.5), ("paddle", 0.5), ("goal", 0.6), ("serve", 0.6)]
    )
    def test_tone_format(self, name, duration):
        samples = SOUND_BUILDERS[name]()
        assert samples.dtype == np.int16
        assert samples.shape == (int(duration * SAMPLE_RATE),)
        assert np.abs(samples).max() > 0
