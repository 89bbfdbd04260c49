"""Active profile commands: use, current, list, shell-init."""

import textwrap

import typer

from ..aws.exceptions import AwsProfError
from ..models.profile import ProfileName
from ..profiles import ProfileSelector
from ..utils import console, create_table, print_cancelled, print_error, print_info, print_success
from ..utils.helpers import EXPORT_FILE_VAR
from ._shared import announce_active, get_aws, get_config, get_context, get_prompter


def use_profile(
    name: str = typer.Argument(None, help="Profile name (pick from a menu if omitted)"),
) -> None:
    """Set the active profile."""
    try:
        config = get_config()
        context = get_context(config)
        selected = ProfileSelector(get_aws(config), context, get_prompter()).set_active(name)
        if selected is None:
            print_cancelled()
            return

        print_success(f"Active profile set to '{selected}'")
        announce_active(context, selected)

    except KeyboardInterrupt:
        console.print()
        print_cancelled()
    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)


def current_profile() -> None:
    """Show the active profile."""
    try:
        context = get_context(get_config())
    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)

    active = context.get()
    if active:
        typer.echo(active)
    else:
        print_info(f"No active profile ({context.var} is not set)")


def _kind_label(name: str) -> str:
    try:
        parsed = ProfileName.parse(name)
    except ValueError:
        return "?"
    if parsed.role:
        return f"{parsed.kind.value} ({parsed.role})"
    return parsed.kind.value


def list_profiles() -> None:
    """List all profiles known to the AWS CLI."""
    try:
        config = get_config()
        names = sorted(get_aws(config).list_profiles())
        if not names:
            print_info("No profiles configured. Run 'awsprof account create' to create one.")
            return

        active = get_context(config).get()
        table = create_table(
            title="AWS Profiles",
            columns=[("Profile", "cyan"), ("Kind", ""), ("Active", "green")],
            rows=[[n, _kind_label(n), "✓" if n == active else ""] for n in names],
        )
        console.print(table)

    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)


def shell_init() -> None:
    """Print a shell function that applies profile changes to the current shell.

    Add to ~/.bashrc or ~/.zshrc:  eval "$(awsprof shell-init)"
    """
    typer.echo(
        textwrap.dedent(
            f"""\
            awsprof() {{
                local export_file rc
                export_file="$(mktemp)" || return 1
                {EXPORT_FILE_VAR}="$export_file" command awsprof "$@"
                rc=$?
                . "$export_file"
                rm -f "$export_file"
                return $rc
            }}"""
        )
    )
