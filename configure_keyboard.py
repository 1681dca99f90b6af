#!/usr/bin/env python3
"""
Utility to configure the Duel Pong keyboard layout
"""

from duel_pong.utils.keyboard_layout import get_preferred_layout
from duel_pong.utils.keyboard_layout import list_available_layouts
from duel_pong.utils.keyboard_layout import set_preferred_layout
from duel_pong.utils.keyboard_layout import show_layout_help


def print_layouts(layouts: dict[str, str], current_layout: str) -> None:
    for key, name in layouts.items():
        marker = " (current)" if key == current_layout else ""
        print(f"  {key}: {name}{marker}")


def main():
    """Interface to configure keyboard layout"""
    print("=== DUEL PONG KEYBOARD CONFIGURATION ===")
    print()

    current_layout = get_preferred_layout()
    layouts = list_available_layouts()

    print("Available layouts:")
    print_layouts(layouts, current_layout)
    print()
    print("Commands:")
    print("  help - Show key help")
    print("  set <layout> - Change layout (e.g. 'set azerty')")
    print("  list - Show layouts")
    print("  quit - Exit")
    print()

    while True:
        try:
            command = input("duel_pong_config> ").strip().lower()
        except (KeyboardInterrupt, EOFError):
            print()
            break

        if command in ("quit", "q"):
            break
        elif command in ("help", "h"):
            print()
            print(show_layout_help())
        elif command in ("list", "l"):
            print_layouts(layouts, current_layout)
        elif command.startswith("set "):
            layout = command[4:].strip()
            if layout not in layouts:
                print(f"Unknown layout: {layout}")
                print(f"Available layouts: {', '.join(layouts.keys())}")
            elif set_preferred_layout(layout):
                print(f"Layout changed to: {layouts[layout]}")
                current_layout = layout
            else:
                print("Layout applied for this session, but it could not be saved")
        else:
            print("Unknown command. Type 'help' for help.")


if __name__ == "__main__":
    main()
