"""Main CLI application."""

import typer

from .. import __version__
from ..utils import console, setup_logging
from ..utils.helpers import ordered_group
from . import account, config, profile, role, session

app = typer.Typer(
    name="awsprof",
    help="Manage AWS CLI accounts, roles and MFA sessions",
    no_args_is_help=True,
    cls=ordered_group(["use", "current", "list", "account", "role", "session", "config", "shell-init"]),
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(account.app, name="account")
app.add_typer(role.app, name="role")
app.add_typer(session.app, name="session")
app.add_typer(config.app, name="config")

app.command("use")(profile.use_profile)
app.command("current")(profile.current_profile)
app.command("list")(profile.list_profiles)
app.command("shell-init")(profile.shell_init)


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: Whether version flag was set
    """
    if value:
        console.print(f"awsprof version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log AWS CLI calls"),
) -> None:
    """awsprof - accounts, roles and MFA sessions on top of the AWS CLI.

    Profiles follow a naming convention: <account>:iam holds long-lived
    keys, <account>:mfa holds MFA session keys and <account>:<role>
    assumes a role from one of them.

    Get started:
        awsprof account create work -f accessKeys.csv
        awsprof session refresh work:mfa --arn arn:aws:iam::123456789012:mfa/me
        awsprof role create work admin arn:aws:iam::123456789012:role/Admin
    """
    setup_logging(verbose)


if __name__ == "__main__":
    app()
