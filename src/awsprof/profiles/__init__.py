"""Profile lifecycle: accounts, roles, sessions and the active profile."""

from .accounts import AccountManager
from .active import ProfileContext, ProfileSelector
from .credentials_file import read_credential_file
from .roles import RoleManager
from .sessions import RefreshResult, SessionManager

__all__ = [
    "AccountManager",
    "ProfileContext",
    "ProfileSelector",
    "RefreshResult",
    "RoleManager",
    "SessionManager",
    "read_credential_file",
]
