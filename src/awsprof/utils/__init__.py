"""Utility functions and helpers."""

from .helpers import (
    EXPORT_FILE_VAR,
    export_statement,
    ordered_group,
    setup_logging,
    write_export,
)
from .menu import (
    select_menu,
    with_hotkeys,
)
from .output import (
    console,
    create_table,
    print_cancelled,
    print_error,
    print_info,
    print_success,
    print_warning,
    prompt,
)
from .prompts import Prompter

__all__ = [
    "EXPORT_FILE_VAR",
    "Prompter",
    "console",
    "create_table",
    "export_statement",
    "ordered_group",
    "print_cancelled",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "prompt",
    "select_menu",
    "setup_logging",
    "with_hotkeys",
    "write_export",
]
