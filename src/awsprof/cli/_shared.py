"""Shared wiring for the command modules.

Commands build their collaborators through these functions so tests can
substitute the AWS CLI client and the prompter in one place.
"""

from ..aws.client import AwsCli
from ..config import Config, ConfigManager
from ..profiles.active import ProfileContext
from ..utils import print_info, print_warning, write_export
from ..utils.helpers import export_statement
from ..utils.prompts import Prompter


def get_config() -> Config:
    """Load awsprof settings (defaults when no config file exists)."""
    return ConfigManager().get()


def get_aws(config: Config) -> AwsCli:
    return AwsCli.from_config(config)


def get_context(config: Config) -> ProfileContext:
    return ProfileContext(var=config.profile_env_var)


def get_prompter() -> Prompter:
    return Prompter()


def announce_active(context: ProfileContext, name: str) -> None:
    """Hand the newly active profile to the calling shell.

    With the ``shell-init`` wrapper installed the export line goes to the
    wrapper's file; otherwise the user gets the line to run themselves.
    """
    try:
        if write_export(context.var, name):
            return
    except OSError as e:
        print_warning(f"Could not write the export file: {e}")
    print_info("To use this profile in your shell, run:")
    print_info(f"  {export_statement(context.var, name)}")
    print_info("or install the wrapper: eval \"$(awsprof shell-init)\"")
