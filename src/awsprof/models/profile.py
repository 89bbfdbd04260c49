"""Profile naming and credential models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

SEPARATOR = ":"


class ProfileKind(str, Enum):
    """Profile variant, derived from the suffix after the last ':'."""

    IAM = "iam"
    MFA = "mfa"
    ROLE = "role"
    PLAIN = "plain"


class ProfileName(BaseModel):
    """Parsed profile name.

    ``work:iam`` and ``work:mfa`` are the long-lived and session profiles of
    account ``work``; any other suffix (``work:readonly``) is a role profile.
    Names without a separator, such as ``default``, are plain profiles.
    """

    model_config = ConfigDict(frozen=True)

    account: str
    kind: ProfileKind
    role: str | None = None

    @classmethod
    def parse(cls, name: str) -> "ProfileName":
        """Parse a profile name into its variant.

        Args:
            name: Profile name as stored by the AWS CLI

        Returns:
            Parsed profile name

        Raises:
            ValueError: If the name is empty or has an empty account/suffix
        """
        if not name:
            raise ValueError("Profile name must not be empty")

        account, sep, suffix = name.rpartition(SEPARATOR)
        if not sep:
            return cls(account=name, kind=ProfileKind.PLAIN)
        if not account or not suffix:
            raise ValueError(f"Invalid profile name '{name}'")

        if suffix == ProfileKind.IAM.value:
            return cls(account=account, kind=ProfileKind.IAM)
        if suffix == ProfileKind.MFA.value:
            return cls(account=account, kind=ProfileKind.MFA)
        return cls(account=account, kind=ProfileKind.ROLE, role=suffix)

    @classmethod
    def iam(cls, account: str) -> "ProfileName":
        return cls(account=account, kind=ProfileKind.IAM)

    @classmethod
    def mfa(cls, account: str) -> "ProfileName":
        return cls(account=account, kind=ProfileKind.MFA)

    @classmethod
    def for_role(cls, account: str, role: str) -> "ProfileName":
        if role in (ProfileKind.IAM.value, ProfileKind.MFA.value):
            raise ValueError(f"Role name '{role}' is reserved")
        if not role or SEPARATOR in role:
            raise ValueError(f"Role name '{role}' must be non-empty and must not contain '{SEPARATOR}'")
        return cls(account=account, kind=ProfileKind.ROLE, role=role)

    def paired_iam(self) -> "ProfileName":
        """Return the IAM profile backing this account's MFA session."""
        return ProfileName.iam(self.account)

    def __str__(self) -> str:
        if self.kind == ProfileKind.PLAIN:
            return self.account
        if self.kind == ProfileKind.ROLE:
            return f"{self.account}{SEPARATOR}{self.role}"
        return f"{self.account}{SEPARATOR}{self.kind.value}"


class Credentials(BaseModel):
    """Temporary credential set returned by sts get-session-token."""

    model_config = ConfigDict(populate_by_name=True)

    access_key_id: str = Field(..., alias="AccessKeyId")
    secret_access_key: str = Field(..., alias="SecretAccessKey")
    session_token: str = Field(..., min_length=1, alias="SessionToken")
    expiration: datetime | None = Field(default=None, alias="Expiration")

    def as_profile_values(self) -> dict[str, str]:
        """Map the credentials to AWS CLI profile keys."""
        return {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "aws_session_token": self.session_token,
        }
