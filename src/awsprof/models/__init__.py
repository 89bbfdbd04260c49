"""Data models."""

from .config import DEFAULT_SESSION_DURATION, Config
from .profile import Credentials, ProfileKind, ProfileName

__all__ = [
    "Config",
    "Credentials",
    "DEFAULT_SESSION_DURATION",
    "ProfileKind",
    "ProfileName",
]
