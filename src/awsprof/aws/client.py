"""AWS CLI client.

Every profile read and write goes through the ``aws`` executable so that the
tool's own config/credentials file handling stays authoritative.
"""

import json
import logging
import shutil
import subprocess

from pydantic import ValidationError

from .exceptions import AwsCliError, TokenExchangeError
from ..models.config import DEFAULT_SESSION_DURATION, Config
from ..models.profile import Credentials

logger = logging.getLogger(__name__)

SECRET_KEYS = frozenset({"aws_secret_access_key", "aws_session_token"})
SECRET_FLAGS = frozenset({"--token-code"})


def redact(args: list[str]) -> list[str]:
    """Return a copy of a command line with secret values masked."""
    masked = list(args)
    for i, arg in enumerate(masked[:-1]):
        if arg in SECRET_FLAGS:
            masked[i + 1] = "****"
    if len(masked) >= 3 and masked[-3] == "set" and masked[-2] in SECRET_KEYS:
        masked[-1] = "****"
    return masked


class AwsCli:
    """Thin wrapper around the ``aws`` executable."""

    def __init__(self, command: str = "aws", timeout: int | None = None) -> None:
        """Initialize AWS CLI client.

        Args:
            command: Executable name or path
            timeout: Per-call timeout in seconds (None waits indefinitely)
        """
        self.command = command
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> "AwsCli":
        return cls(command=config.aws_command, timeout=config.aws_timeout)

    def run(self, *args: str) -> subprocess.CompletedProcess:
        """Run an aws subcommand and capture its output.

        The ambient environment is inherited, including the active-profile
        variable as it is at call time.

        Args:
            *args: Arguments after the executable name

        Returns:
            Completed process (non-zero exit status is not an error here)

        Raises:
            AwsCliError: If the executable is missing or the call times out
        """
        executable = shutil.which(self.command)
        if executable is None:
            raise AwsCliError(
                f"'{self.command}' command not found. Install the AWS CLI or set "
                "aws_command with 'awsprof config set aws_command <path>'."
            )

        cmd = [executable, *args]
        logger.debug("Running %s", " ".join(redact([self.command, *args])))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            raise AwsCliError(f"'{self.command} {args[0]}' timed out after {self.timeout}s")
        except OSError as e:
            raise AwsCliError(f"Failed to run '{self.command}': {e}")

        logger.debug("Exit status %d", result.returncode)
        return result

    def _check(self, result: subprocess.CompletedProcess, action: str) -> str:
        if result.returncode != 0:
            output = (result.stderr or result.stdout or "").strip()
            raise AwsCliError(
                f"Failed to {action}: {output or f'exit status {result.returncode}'}",
                returncode=result.returncode,
                output=output,
            )
        return result.stdout

    # ── Profile store ────────────────────────────────────────────────────

    def list_profiles(self) -> set[str]:
        """List all profile names known to the AWS CLI.

        Returns:
            Set of profile names
        """
        stdout = self._check(self.run("configure", "list-profiles"), "list profiles")
        return {line.strip() for line in stdout.splitlines() if line.strip()}

    def profile_exists(self, name: str) -> bool:
        return name in self.list_profiles()

    def get_value(self, profile: str, key: str) -> str | None:
        """Read a single profile setting.

        Args:
            profile: Profile name
            key: Setting name (e.g. source_profile)

        Returns:
            Setting value or None if it is not set
        """
        result = self.run("configure", "--profile", profile, "get", key)
        # configure get exits 1 with no output when the key is unset
        if result.returncode == 1 and not result.stderr.strip():
            return None
        value = self._check(result, f"read '{key}' of profile '{profile}'").strip()
        return value or None

    def set_value(self, profile: str, key: str, value: str) -> None:
        """Write a single profile setting.

        Args:
            profile: Profile name
            key: Setting name
            value: Setting value
        """
        self._check(
            self.run("configure", "--profile", profile, "set", key, value),
            f"set '{key}' of profile '{profile}'",
        )

    # ── Token service ────────────────────────────────────────────────────

    def get_session_token(
        self,
        profile: str,
        serial_number: str,
        token_code: str,
        duration_seconds: int = DEFAULT_SESSION_DURATION,
    ) -> Credentials:
        """Exchange an MFA code for temporary credentials.

        Args:
            profile: Profile holding the long-lived keys
            serial_number: MFA device ARN
            token_code: Current MFA code
            duration_seconds: Session validity

        Returns:
            Temporary credentials

        Raises:
            TokenExchangeError: If the call fails or the response is malformed
        """
        result = self.run(
            "sts",
            "get-session-token",
            "--profile",
            profile,
            "--serial-number",
            serial_number,
            "--token-code",
            token_code,
            "--duration-seconds",
            str(duration_seconds),
            "--output",
            "json",
        )
        if result.returncode != 0:
            raise TokenExchangeError(result.stderr or result.stdout)

        try:
            return Credentials.model_validate(json.loads(result.stdout)["Credentials"])
        except (json.JSONDecodeError, KeyError, TypeError, ValidationError):
            raise TokenExchangeError(result.stdout, "Unexpected get-session-token response")
