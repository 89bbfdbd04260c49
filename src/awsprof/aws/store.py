"""Interfaces the profile managers depend on.

``AwsCli`` implements both; tests substitute in-memory fakes.
"""

from typing import Protocol

from ..models.profile import Credentials


class ProfileStore(Protocol):
    """Query/mutation surface over the AWS CLI profile storage."""

    def list_profiles(self) -> set[str]: ...

    def profile_exists(self, name: str) -> bool: ...

    def get_value(self, profile: str, key: str) -> str | None: ...

    def set_value(self, profile: str, key: str, value: str) -> None: ...


class TokenService(Protocol):
    """MFA code to temporary credential exchange."""

    def get_session_token(
        self,
        profile: str,
        serial_number: str,
        token_code: str,
        duration_seconds: int,
    ) -> Credentials: ...
