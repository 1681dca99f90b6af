"""
Keyboard input for Duel Pong
"""

from collections.abc import Mapping

import pygame

from duel_pong.core.entities import InputAction
from duel_pong.utils.config import KeyboardLayout
from duel_pong.utils.config import game_config


def build_key_mapping(layout: KeyboardLayout) -> dict[int, InputAction]:
    """Maps the key codes of a layout to logical actions"""
    return {
        layout.top_keys["left"]: InputAction.MOVE_TOP_LEFT,
        layout.top_keys["right"]: InputAction.MOVE_TOP_RIGHT,
        layout.bottom_keys["left"]: InputAction.MOVE_BOTTOM_LEFT,
        layout.bottom_keys["right"]: InputAction.MOVE_BOTTOM_RIGHT,
        layout.serve_key: InputAction.RELEASE_SERVE,
    }


def actions_from_keys(
    keys_pressed: Mapping[int, bool], key_mapping: Mapping[int, InputAction]
) -> frozenset[InputAction]:
    """Returns the actions whose key is currently pressed"""
    return frozenset(
        action for key_code, action in key_mapping.items() if keys_pressed.get(key_code, False)
    )


class KeyboardInput:
    """Collects the keys held down by both players"""

    def __init__(self, layout: KeyboardLayout | None = None) -> None:
        self.key_mapping = build_key_mapping(layout or game_config.get_keyboard_layout())
        self.keys_pressed: dict[int, bool] = {}

    def update_keys(self) -> None:
        """Update the state of the mapped keys using pygame"""
        pygame_keys = pygame.key.get_pressed()
        self.keys_pressed = {key_code: bool(pygame_keys[key_code]) for key_code in self.key_mapping}

    def snapshot(self) -> frozenset[InputAction]:
        """Actions held down for the current frame"""
        return actions_from_keys(self.keys_pressed, self.key_mapping)
