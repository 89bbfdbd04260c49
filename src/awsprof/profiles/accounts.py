"""IAM account profiles (``<name>:iam``)."""

import logging
from pathlib import Path

from ..aws.exceptions import ProfileNotFoundError
from ..aws.store import ProfileStore
from ..models.profile import ProfileName
from ..utils.prompts import Prompter
from .credentials_file import read_credential_file

logger = logging.getLogger(__name__)


class AccountManager:
    """Create and edit long-lived key profiles."""

    def __init__(self, store: ProfileStore, prompter: Prompter) -> None:
        self.store = store
        self.prompter = prompter

    def create(self, name: str, credentials_file: str | Path | None = None) -> bool:
        """Create ``<name>:iam``.

        Args:
            name: Account name
            credentials_file: Optional access key CSV; prompts when omitted

        Returns:
            True if the profile was written, False if it already existed
        """
        profile = str(ProfileName.iam(name))
        if self.store.profile_exists(profile):
            logger.info("Profile %s already exists, leaving it unchanged", profile)
            return False
        self._write_keys(profile, credentials_file)
        return True

    def edit(self, name: str, credentials_file: str | Path | None = None) -> None:
        """Replace the keys of an existing ``<name>:iam``.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        profile = str(ProfileName.iam(name))
        if not self.store.profile_exists(profile):
            raise ProfileNotFoundError("Account", profile)
        self._write_keys(profile, credentials_file)

    def _write_keys(self, profile: str, credentials_file: str | Path | None) -> None:
        if credentials_file is not None:
            key_id, secret = read_credential_file(credentials_file)
        else:
            key_id = self.prompter.secret("Access key ID")
            secret = self.prompter.secret("Secret access key")

        self.store.set_value(profile, "aws_access_key_id", key_id)
        self.store.set_value(profile, "aws_secret_access_key", secret)
        logger.info("Stored access keys in %s", profile)
