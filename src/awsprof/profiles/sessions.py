"""MFA session refresh."""

import logging
from dataclasses import dataclass

from ..aws.exceptions import ProfileError, ProfileNotFoundError
from ..aws.store import ProfileStore, TokenService
from ..models.config import DEFAULT_SESSION_DURATION
from ..models.profile import Credentials, ProfileKind, ProfileName
from ..utils.prompts import Prompter
from .active import ProfileContext, ProfileSelector

logger = logging.getLogger(__name__)

MFA_SERIAL_KEY = "mfa_serial"


@dataclass
class RefreshResult:
    """Outcome of a session refresh.

    ``credentials`` is None when nothing needed refreshing; ``activated`` is
    False when the profile was left alone entirely.
    """

    profile: str
    mfa_profile: str | None = None
    credentials: Credentials | None = None
    activated: bool = False


class SessionManager:
    """Refresh the MFA session behind a profile and activate it."""

    def __init__(
        self,
        store: ProfileStore,
        tokens: TokenService,
        context: ProfileContext,
        prompter: Prompter,
        duration_seconds: int = DEFAULT_SESSION_DURATION,
    ) -> None:
        self.store = store
        self.tokens = tokens
        self.context = context
        self.prompter = prompter
        self.duration_seconds = duration_seconds
        self.selector = ProfileSelector(store, context, prompter)

    def refresh(
        self,
        profile: str | None = None,
        code: str | None = None,
        arn: str | None = None,
    ) -> RefreshResult | None:
        """Refresh the session credentials used by ``profile``.

        IAM profiles need no refresh and are left alone. For an MFA profile
        the profile itself is refreshed; for any other profile its
        ``source_profile`` is. The active profile is cleared while the
        refresh runs, restored afterwards, and finally set to ``profile``.

        Args:
            profile: Target profile (asks interactively when omitted)
            code: MFA code (asks when omitted)
            arn: MFA device ARN, used only if none is stored yet

        Returns:
            Refresh result, or None if profile selection was cancelled

        Raises:
            ProfileNotFoundError: If the target has no usable source profile
            ProfileError: If the source profile is not an MFA profile
            TokenExchangeError: If sts get-session-token fails
        """
        if profile is None:
            profile = self.selector.pick()
            if profile is None:
                return None

        target = ProfileName.parse(profile)
        if target.kind == ProfileKind.IAM:
            logger.info("%s holds long-lived keys, nothing to refresh", profile)
            return RefreshResult(profile=profile)

        mfa = target if target.kind == ProfileKind.MFA else self._source_profile(profile)

        credentials = None
        if mfa is not None:
            with self.context.cleared():
                credentials = self._refresh_mfa(mfa, code, arn)

        self.context.set(profile)
        return RefreshResult(
            profile=profile,
            mfa_profile=str(mfa) if mfa is not None else None,
            credentials=credentials,
            activated=True,
        )

    def _source_profile(self, profile: str) -> ProfileName | None:
        """Resolve the MFA profile a role profile draws on.

        Returns None when the source is an IAM profile.
        """
        source = self.store.get_value(profile, "source_profile")
        if source is None:
            raise ProfileNotFoundError("Source profile of", profile)

        source_name = ProfileName.parse(source)
        if source_name.kind == ProfileKind.IAM:
            logger.info("%s is sourced from %s, nothing to refresh", profile, source)
            return None
        if source_name.kind != ProfileKind.MFA:
            raise ProfileError(
                f"Source profile '{source}' of '{profile}' is not an MFA profile"
            )
        return source_name

    def _refresh_mfa(self, mfa: ProfileName, code: str | None, arn: str | None) -> Credentials:
        iam = mfa.paired_iam()
        if not self.store.profile_exists(str(iam)):
            raise ProfileNotFoundError("Account", str(iam))

        serial = None
        if self.store.profile_exists(str(mfa)):
            serial = self.store.get_value(str(mfa), MFA_SERIAL_KEY)
            if serial is not None and arn is not None and arn != serial:
                logger.warning("Ignoring supplied ARN, %s already uses %s", mfa, serial)

        if serial is None:
            serial = arn or self.prompter.text("MFA device ARN")
            self.store.set_value(str(mfa), MFA_SERIAL_KEY, serial)

        if code is None:
            code = self.prompter.secret("MFA code")

        logger.info("Requesting session token for %s via %s", mfa, iam)
        credentials = self.tokens.get_session_token(str(iam), serial, code, self.duration_seconds)

        for key, value in credentials.as_profile_values().items():
            self.store.set_value(str(mfa), key, value)
        return credentials
