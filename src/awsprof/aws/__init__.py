"""AWS CLI adapter and exceptions."""

from .client import AwsCli
from .exceptions import (
    AwsCliError,
    AwsProfError,
    ConfigError,
    CredentialFileError,
    InvalidPathError,
    ProfileError,
    ProfileNotFoundError,
    TokenExchangeError,
)
from .store import ProfileStore, TokenService

__all__ = [
    "AwsCli",
    "AwsCliError",
    "AwsProfError",
    "ConfigError",
    "CredentialFileError",
    "InvalidPathError",
    "ProfileError",
    "ProfileNotFoundError",
    "ProfileStore",
    "TokenExchangeError",
    "TokenService",
]
