"""Interactive terminal menu helpers.

Single-select menus based on simple_term_menu, with optional generated
shortcut keys.
"""

import string

from simple_term_menu import TerminalMenu

# TerminalMenu lowercases key presses, so uppercase letters are not usable
HOTKEYS = string.digits + string.ascii_lowercase


def with_hotkeys(items: list[str]) -> list[str]:
    """Prefix items with ``[k]`` shortcut markers, digits first, then letters.

    Items beyond the available keys are indented but get no shortcut.
    """
    entries = []
    for i, item in enumerate(items):
        if i < len(HOTKEYS):
            entries.append(f"[{HOTKEYS[i]}] {item}")
        else:
            entries.append(f"    {item}")
    return entries


def select_menu(items: list[str], title: str, hotkeys: bool = False) -> int | None:
    """Show a single-select menu. Returns selected index or None if cancelled."""
    entries = with_hotkeys(items) if hotkeys else items
    menu = TerminalMenu(
        entries,
        title=title,
        menu_cursor="> ",
        menu_cursor_style=("fg_cyan", "bold"),
        # 'q' is a hotkey, not a quit key
        quit_keys=("escape", "ctrl-g"),
    )
    return menu.show()
