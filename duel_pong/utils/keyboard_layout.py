"""
Keyboard layout detection and management for Duel Pong
"""

import json
import locale
import logging
import os
from pathlib import Path

from duel_pong.utils.config import KEYBOARD_LAYOUTS, game_config

logger = logging.getLogger(__name__)


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    try:
        system_locale, _ = locale.getlocale()
    except ValueError:
        system_locale = None

    # Fallback to environment variables
    if not system_locale:
        system_locale = os.environ.get("LANG", "")
    system_locale = system_locale.lower()

    # Map common locales to keyboard layouts
    if system_locale.startswith("fr"):
        return "azerty"
    elif system_locale.startswith("de"):
        return "qwertz"
    return "qwerty"


def get_config_file_path() -> Path:
    """Get the path to the user configuration file"""
    return Path.home() / ".config" / "duel_pong" / "user_config.json"


def load_user_preferences(config_file: Path | None = None) -> dict:
    """Load user preferences from config file"""
    config_file = config_file or get_config_file_path()

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", config_file, e)

    return {}


def save_user_preferences(preferences: dict, config_file: Path | None = None) -> bool:
    """Save user preferences to config file, returns False if it could not be written"""
    config_file = config_file or get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(preferences, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.warning("Could not save preferences to %s: %s", config_file, e)
        return False
    return True


def get_preferred_layout(config_file: Path | None = None) -> str:
    """
    Get the user's preferred keyboard layout

    Priority:
    1. User saved preference
    2. System detection
    3. Default configuration
    """
    user_prefs = load_user_preferences(config_file)
    layout = user_prefs.get("keyboard_layout")
    if layout in KEYBOARD_LAYOUTS:
        return layout

    detected = detect_system_layout()
    if detected in KEYBOARD_LAYOUTS:
        return detected

    return game_config.KEYBOARD_LAYOUT


def set_preferred_layout(layout: str, config_file: Path | None = None) -> bool:
    """
    Set the user's preferred keyboard layout

    Args:
        layout: Layout name (must be in KEYBOARD_LAYOUTS)
        config_file: Preferences file, defaults to the per-user one

    Returns:
        True if successful, False otherwise
    """
    if layout not in KEYBOARD_LAYOUTS:
        return False

    user_prefs = load_user_preferences(config_file)
    user_prefs["keyboard_layout"] = layout
    game_config.KEYBOARD_LAYOUT = layout

    return save_user_preferences(user_prefs, config_file)


def list_available_layouts() -> dict[str, str]:
    """Get all available keyboard layouts"""
    return {name: layout.name for name, layout in KEYBOARD_LAYOUTS.items()}


def auto_configure_layout() -> str:
    """Pick the best keyboard layout and store it in the game config"""
    preferred = get_preferred_layout()
    game_config.KEYBOARD_LAYOUT = preferred
    logger.info("Using %s keyboard layout", preferred)
    return preferred


def show_layout_help() -> str:
    """Generate help text showing current key mappings"""
    layout = game_config.get_keyboard_layout()

    help_text = f"Keyboard layout: {layout.name}\n\n"
    help_text += "Top paddle:\n"
    for action, key_name in layout.display_names.items():
        help_text += f"  {action}: {key_name}\n"
    help_text += "\nBottom paddle:\n"
    help_text += "  left: ←\n"
    help_text += "  right: →\n"
    help_text += "\nServe: SPACE\n"
    help_text += "Sound on/off: M\n"

    return help_text
