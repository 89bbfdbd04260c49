"""Role profile commands."""

import typer

from ..aws.exceptions import AwsProfError
from ..profiles import RoleManager
from ..utils import print_error, print_success
from ._shared import get_aws, get_config

app = typer.Typer(help="Manage assumed-role profiles (<account>:<role>)", no_args_is_help=True)


@app.command("create")
def create_role(
    account: str = typer.Argument(..., help="Account name"),
    role: str = typer.Argument(..., help="Role profile name"),
    role_arn: str = typer.Argument(..., help="ARN of the role to assume"),
    use_iam: bool = typer.Option(
        False, "--iam/--mfa", help="Source profile: <account>:iam or <account>:mfa"
    ),
) -> None:
    """Create or overwrite <account>:<role>."""
    try:
        target = RoleManager(get_aws(get_config())).create(account, role, role_arn, use_iam)
        print_success(f"Role profile '{target}' written")

    except (AwsProfError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)
