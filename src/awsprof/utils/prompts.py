"""Console prompts used by the profile managers."""

from getpass import getpass

from .menu import select_menu
from .output import print_error, prompt


class Prompter:
    """Ask the user for values on the terminal.

    Managers take a prompter so that tests can answer prompts without a
    terminal.
    """

    def secret(self, label: str) -> str:
        """Ask for a masked value until a non-empty one is given."""
        while not (val := getpass(f"{label}: ").strip()):
            print_error(f"{label} is required")
        return val

    def text(self, label: str) -> str:
        """Ask for a visible value until a non-empty one is given."""
        while not (val := prompt(label).strip()):
            print_error(f"{label} is required")
        return val

    def choose(self, items: list[str], title: str) -> str | None:
        """Single choice with hotkeys. Returns the chosen item or None."""
        idx = select_menu(items, title, hotkeys=True)
        if idx is None:
            return None
        return items[idx]
