"""Configuration models."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_SESSION_DURATION = 86400


class Config(BaseModel):
    """awsprof settings."""

    aws_command: str = "aws"
    aws_timeout: int | None = Field(default=None, gt=0)
    session_duration: int = Field(default=DEFAULT_SESSION_DURATION, ge=900, le=129600)
    profile_env_var: str = Field(default="AWS_PROFILE", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")

    @field_validator("aws_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Reject blank executable names.

        Args:
            v: Field value

        Returns:
            Stripped value

        Raises:
            ValueError: If the value is blank
        """
        v = v.strip()
        if not v:
            raise ValueError("aws_command must not be empty")
        return v
