"""Helper utilities."""

import logging
import os
import shlex
from typing import Any

from rich.logging import RichHandler
from typer.core import TyperGroup

from .output import console

EXPORT_FILE_VAR = "AWSPROF_EXPORT_FILE"


def ordered_group(order: list[str]) -> type[TyperGroup]:
    """Create a TyperGroup subclass that orders commands."""

    class _OrderedGroup(TyperGroup):
        def list_commands(self, ctx: Any) -> list[str]:
            commands = super().list_commands(ctx)
            rank = {n: i for i, n in enumerate(order)}
            return sorted(commands, key=lambda n: rank.get(n, 99))

    return _OrderedGroup


def setup_logging(verbose: bool = False) -> None:
    """Route awsprof logging through Rich on stderr."""
    logger = logging.getLogger("awsprof")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def export_statement(var: str, value: str) -> str:
    """Build a shell ``export`` line with the value quoted."""
    return f"export {var}={shlex.quote(value)}"


def write_export(var: str, value: str) -> bool:
    """Write an export line to the file named by AWSPROF_EXPORT_FILE.

    Returns:
        True if the file was written, False if the variable is not set
    """
    path = os.environ.get(EXPORT_FILE_VAR)
    if not path:
        return False
    with open(path, "a") as f:
        f.write(export_statement(var, value) + "\n")
    return True
