"""Configuration management commands for awsprof."""

import typer
from rich.panel import Panel

from ..aws.exceptions import AwsProfError
from ..config import ConfigManager
from ..models.config import Config
from ..utils import console, print_error, print_success

app = typer.Typer(help="Manage awsprof settings", no_args_is_help=True)


def _render_config_panel(config_manager: ConfigManager, config: Config) -> Panel:
    """Build a Rich Panel for the settings."""
    lines = []
    for key, value in config.model_dump().items():
        display = "(none)" if value is None else value
        lines.append(f"[bold]{key}:[/bold] {display}")

    lines.append("")
    source = config_manager.config_file if config_manager.exists() else "defaults"
    lines.append(f"[dim]Source: {source}[/dim]")

    return Panel("\n".join(lines), title="awsprof settings", border_style="blue")


# ── config show ──────────────────────────────────────────────────────────


@app.command("show")
def show_config() -> None:
    """Show current settings."""
    config_manager = ConfigManager()

    try:
        config = config_manager.get()
        console.print(_render_config_panel(config_manager, config))

    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)


# ── config set ───────────────────────────────────────────────────────────


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help=f"Setting ({', '.join(Config.model_fields)})"),
    value: str = typer.Argument(..., help="New value ('none' to unset optional values)"),
) -> None:
    """Change a setting."""
    config_manager = ConfigManager()

    try:
        config = config_manager.set_value(key, value)
        field = key.replace("-", "_")
        print_success(f"{field} set to {getattr(config, field)}")

    except AwsProfError as e:
        print_error(str(e))
        raise typer.Exit(1)
