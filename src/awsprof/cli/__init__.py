"""CLI commands."""

from . import account, config, main, profile, role, session

__all__ = ["account", "config", "main", "profile", "role", "session"]
