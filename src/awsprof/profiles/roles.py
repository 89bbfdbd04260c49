"""Assumed-role profiles (``<account>:<role>``)."""

import logging

from ..aws.exceptions import ProfileNotFoundError
from ..aws.store import ProfileStore
from ..models.profile import ProfileName

logger = logging.getLogger(__name__)


class RoleManager:
    """Create role profiles on top of an account's IAM or MFA profile."""

    def __init__(self, store: ProfileStore) -> None:
        self.store = store

    def create(self, account: str, role: str, role_arn: str, use_iam: bool = False) -> ProfileName:
        """Write ``<account>:<role>`` with role_arn and source_profile.

        An existing role profile is overwritten.

        Args:
            account: Account name
            role: Role profile suffix
            role_arn: ARN of the role to assume
            use_iam: Source from ``<account>:iam`` instead of ``<account>:mfa``

        Returns:
            Name of the role profile

        Raises:
            ProfileNotFoundError: If the source profile does not exist
            ValueError: If the role name is reserved
        """
        target = ProfileName.for_role(account, role)
        source = ProfileName.iam(account) if use_iam else ProfileName.mfa(account)

        if not self.store.profile_exists(str(source)):
            raise ProfileNotFoundError("Source profile", str(source))

        self.store.set_value(str(target), "role_arn", role_arn)
        self.store.set_value(str(target), "source_profile", str(source))
        logger.info("Wrote role profile %s (source %s)", target, source)
        return target
