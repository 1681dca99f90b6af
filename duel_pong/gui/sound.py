"""
Synthesized sound effects for Duel Pong

Square-wave tones are generated with numpy and played through pygame.sndarray, so
the game needs no audio files.
"""

import logging

import numpy as np
import pygame

from duel_pong.core.collision import BallGoalCollision
from duel_pong.core.collision import BallPaddleCollision
from duel_pong.core.collision import BallWallCollision
from duel_pong.core.physics import StepResult

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# (start time, target value, time constant) of an exponential ramp
Ramp = tuple[float, float, float]


def time_axis(duration: float, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    return np.arange(int(duration * sample_rate)) / sample_rate


def ramp_envelope(t: np.ndarray, initial: float, ramps: list[Ramp]) -> np.ndarray:
    """
    Builds a curve made of successive exponential approaches to target values

    Each ramp starts from the value reached when the previous one is interrupted.
    """
    values = np.full_like(t, initial, dtype=float)
    value = initial

    for i, (start, target, tau) in enumerate(ramps):
        end = ramps[i + 1][0] if i + 1 < len(ramps) else t[-1] + 1.0
        mask = (t >= start) & (t < end)
        values[mask] = target + (value - target) * np.exp(-(t[mask] - start) / tau)
        value = target + (value - target) * np.exp(-(end - start) / tau)

    return values


def square_wave(frequency: np.ndarray | float, t: np.ndarray) -> np.ndarray:
    """Square wave following a constant or time-varying frequency"""
    frequency = np.broadcast_to(np.asarray(frequency, dtype=float), t.shape)
    phase = 2 * np.pi * np.cumsum(frequency) / SAMPLE_RATE
    return np.where(np.sin(phase) >= 0, 1.0, -1.0)


def to_pcm(samples: np.ndarray) -> np.ndarray:
    """Converts samples in [-1, 1] to signed 16 bits"""
    return np.int16(np.clip(samples, -1.0, 1.0) * 32767)


def hit_tone(frequency: float) -> np.ndarray:
    """Short beep used for wall and paddle hits"""
    t = time_axis(0.5)
    gain = ramp_envelope(t, 0.2, [(0.0, 0.3, 0.3), (0.3, 0.0, 0.5)])
    return to_pcm(square_wave(frequency, t) * gain)


def goal_tone() -> np.ndarray:
    """High pitched tone with a fast vibrato"""
    length = 0.6
    t = time_axis(length)
    frequency = 2093 + 2 * np.sin(2 * np.pi * 20 * t)
    gain = ramp_envelope(t, 0.0, [(0.0, 0.5, 0.05), (0.05, 0.0, length - 0.05)])
    return to_pcm(square_wave(frequency, t) * gain)


def serve_tone() -> np.ndarray:
    """Rising sweep played when the ball leaves a paddle"""
    t = time_axis(0.6)
    frequency = ramp_envelope(t, 300.0, [(0.0, 600.0, 0.6)])
    gain = ramp_envelope(t, 0.0, [(0.0, 0.3, 0.3), (0.3, 0.0, 0.6)])
    return to_pcm(square_wave(frequency, t) * gain)


SOUND_BUILDERS = {
    "wall": lambda: hit_tone(580),
    "paddle": lambda: hit_tone(440),
    "goal": goal_tone,
    "serve": serve_tone,
}


def select_sounds(result: StepResult) -> list[str]:
    """Names of the sounds to play for a simulation step, in collision order"""
    sounds = []
    for collision in result.collisions:
        if isinstance(collision, BallPaddleCollision):
            sounds.append("paddle")
        elif isinstance(collision, BallWallCollision):
            sounds.append("wall")
        elif isinstance(collision, BallGoalCollision):
            sounds.append("goal")

    if result.served:
        sounds.append("serve")
    return sounds


class SoundPlayer:
    """Plays a sound for each collision and serve, can be switched on and off"""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.available = True
        self.sounds: dict[str, pygame.mixer.Sound] = {}

        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as e:
            logger.warning("Audio unavailable, sound is disabled: %s", e)
            self.available = False
            self.enabled = False

    def _get_sound(self, name: str) -> pygame.mixer.Sound:
        if name not in self.sounds:
            samples = SOUND_BUILDERS[name]()
            channels = pygame.mixer.get_init()[2]
            if channels > 1:
                samples = np.repeat(samples[:, np.newaxis], channels, axis=1)
            self.sounds[name] = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        return self.sounds[name]

    def toggle(self) -> bool:
        """Switch sound on or off, returns the new state"""
        if self.available:
            self.enabled = not self.enabled
        return self.enabled

    def on_step(self, result: StepResult) -> None:
        """Play the sounds of a simulation step"""
        if not self.enabled:
            return

        for name in select_sounds(result):
            self._get_sound(name).play()
