"""Custom exceptions for awsprof."""


class AwsProfError(Exception):
    """Base exception for awsprof."""

    pass


class ConfigError(AwsProfError):
    """Configuration related errors."""

    pass


class ProfileError(AwsProfError):
    """A profile exists but cannot be used for the requested operation."""

    pass


class ProfileNotFoundError(ProfileError):
    """Profile not found in the AWS CLI store."""

    def __init__(self, kind: str, name: str) -> None:
        """Initialize profile not found error.

        Args:
            kind: What the profile was needed as (account, source profile, ...)
            name: Profile name
        """
        super().__init__(f"{kind} '{name}' not found")
        self.kind = kind
        self.name = name


class InvalidPathError(AwsProfError):
    """A credential file path that does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File '{path}' does not exist")
        self.path = path


class CredentialFileError(AwsProfError):
    """Credential file exists but cannot be used."""

    pass


class AwsCliError(AwsProfError):
    """The aws executable is missing or a call to it failed."""

    def __init__(self, message: str, returncode: int | None = None, output: str = "") -> None:
        """Initialize AWS CLI error.

        Args:
            message: Error message
            returncode: Process exit status if the process ran
            output: Captured stderr/stdout of the failed call
        """
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class TokenExchangeError(AwsProfError):
    """sts get-session-token reported a failure."""

    def __init__(self, response: str, message: str = "Token exchange failed") -> None:
        """Initialize token exchange error.

        Args:
            response: Raw response of the failed call
            message: Leading error message
        """
        super().__init__(f"{message}: {response.strip() or '(empty response)'}")
        self.response = response
