"""IAM account profile commands."""

import typer

from ..aws.exceptions import AwsProfError
from ..profiles import AccountManager
from ..utils import console, print_cancelled, print_error, print_info, print_success
from ._shared import get_aws, get_config, get_prompter

app = typer.Typer(help="Manage IAM account profiles (<name>:iam)", no_args_is_help=True)

FILE_HELP = "CSV with 'Access key ID' and 'Secret access key' columns"


def _manager() -> AccountManager:
    return AccountManager(get_aws(get_config()), get_prompter())


# ── account create ───────────────────────────────────────────────────────


@app.command("create")
def create_account(
    name: str = typer.Argument(..., help="Account name"),
    file: str = typer.Option(None, "--file", "-f", help=FILE_HELP),
) -> None:
    """Create <name>:iam from a key file or prompts."""
    try:
        if _manager().create(name, file):
            print_success(f"Account '{name}:iam' created")
        else:
            print_info(f"Account '{name}:iam' already exists. Use 'awsprof account edit' to change its keys.")

    except KeyboardInterrupt:
        console.print()
        print_cancelled()
    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)


# ── account edit ─────────────────────────────────────────────────────────


@app.command("edit")
def edit_account(
    name: str = typer.Argument(..., help="Account name"),
    file: str = typer.Option(None, "--file", "-f", help=FILE_HELP),
) -> None:
    """Replace the access keys of <name>:iam."""
    try:
        _manager().edit(name, file)
        print_success(f"Account '{name}:iam' updated")

    except KeyboardInterrupt:
        console.print()
        print_cancelled()
    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)
