"""MFA session commands."""

import typer

from ..aws.exceptions import AwsProfError
from ..profiles import SessionManager
from ..utils import console, print_cancelled, print_error, print_info, print_success
from ._shared import announce_active, get_aws, get_config, get_context, get_prompter

app = typer.Typer(help="Manage MFA sessions", no_args_is_help=True)


@app.command("refresh")
def refresh_session(
    profile: str = typer.Argument(None, help="Profile to refresh and activate"),
    code: str = typer.Option(None, "--code", "-c", help="MFA code"),
    arn: str = typer.Option(None, "--arn", "-a", help="MFA device ARN (first refresh only)"),
) -> None:
    """Refresh the MFA session behind a profile and make it active."""
    try:
        config = get_config()
        aws = get_aws(config)
        context = get_context(config)
        manager = SessionManager(aws, aws, context, get_prompter(), config.session_duration)

        result = manager.refresh(profile, code, arn)
        if result is None:
            print_cancelled()
            return

        if result.credentials is None:
            print_info(f"'{result.profile}' does not use an MFA session, nothing to refresh")
        else:
            expiry = result.credentials.expiration
            until = f" (valid until {expiry:%Y-%m-%d %H:%M %Z})" if expiry else ""
            print_success(f"Session '{result.mfa_profile}' refreshed{until}")

        if result.activated:
            announce_active(context, result.profile)

    except KeyboardInterrupt:
        console.print()
        print_cancelled()
    except (AwsProfError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)
