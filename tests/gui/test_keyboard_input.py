"""
Tests for the keyboard to action mapping
"""

import pygame

from duel_pong.core.entities import InputAction
from duel_pong.gui.keyboard_input import KeyboardInput, actions_from_keys, build_key_mapping
from duel_pong.utils.config import KEYBOARD_LAYOUTS


class TestKeyMapping:
    def test_qwerty_mapping(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["qwerty"])

        assert mapping == {
            pygame.K_a: InputAction.MOVE_TOP_LEFT,
            pygame.K_d: InputAction.MOVE_TOP_RIGHT,
            pygame.K_LEFT: InputAction.MOVE_BOTTOM_LEFT,
            pygame.K_RIGHT: InputAction.MOVE_BOTTOM_RIGHT,
            pygame.K_SPACE: InputAction.RELEASE_SERVE,
        }

    def test_azerty_moves_top_paddle_with_q(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["azerty"])
        assert mapping[pygame.K_q] is InputAction.MOVE_TOP_LEFT

    def test_every_action_is_mapped(self):
        for layout in KEYBOARD_LAYOUTS.values():
            assert set(build_key_mapping(layout).values()) == set(InputAction)


class TestActionsFromKeys:
    def test_pressed_keys(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["qwerty"])
        keys = {pygame.K_a: True, pygame.K_SPACE: True, pygame.K_RIGHT: False, pygame.K_x: True}

        assert actions_from_keys(keys, mapping) == frozenset(
            {InputAction.MOVE_TOP_LEFT, InputAction.RELEASE_SERVE}
        )

    def test_nothing_pressed(self):
        mapping = build_key_mapping(KEYBOARD_LAYOUTS["qwerty"])
        assert actions_from_keys({}, mapping) == frozenset()


class TestKeyboardInput:
    def test_snapshot_is_frozen(self):
        """Later key changes do not leak into a snapshot already taken"""
        keyboard = KeyboardInput(KEYBOARD_LAYOUTS["qwerty"])
        keyboard.keys_pressed = {pygame.K_LEFT: True}

        snapshot = keyboard.snapshot()
        keyboard.keys_pressed = {pygame.K_RIGHT: True}

        assert snapshot == frozenset({InputAction.MOVE_BOTTOM_LEFT})
        assert keyboard.snapshot() == frozenset({InputAction.MOVE_BOTTOM_RIGHT})
