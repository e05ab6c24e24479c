"""Configuration management commands."""

from typing import Optional

import typer

from tasktracker_cli.config import ConfigManager, get_config_manager
from tasktracker_cli.utils.typer_helpers import SuggestingGroup
from tasktracker_cli.utils.ui.console import get_console
from tasktracker_cli.utils.ui.formatters import format_error, format_output, format_success

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


def _manager(ctx: typer.Context) -> ConfigManager:
    state = ctx.obj
    if state is None:
        return get_config_manager()
    return state.config_manager


@app.command("view")
def view_config(
    ctx: typer.Context,
    output: str = typer.Option("yaml", "--output", "-o", help="Output format (json, yaml)"),
) -> None:
    """View current configuration."""
    config_dict = _manager(ctx).config.model_dump()
    if output not in ("json", "yaml"):
        format_error(f"Unsupported output format: {output}")
        raise typer.Exit(1)
    format_output(config_dict, output)


@app.command("get")
def get_config(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key (e.g., search.limit)"),
) -> None:
    """Get a configuration value."""
    value = _manager(ctx).get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1)
    console.print(value)


@app.command("set")
def set_config(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key (e.g., search.limit)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        _manager(ctx).set(key, value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1) from None
    except (OSError, ValueError) as e:
        format_error(f"Failed to set config: {e}")
        raise typer.Exit(1) from e
    format_success(f"Configuration '{key}' set to '{_manager(ctx).get(key)}'")


@app.command("reset")
def reset_config(
    ctx: typer.Context,
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        _manager(ctx).reset(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(1) from None
    except OSError as e:
        format_error(f"Failed to reset config: {e}")
        raise typer.Exit(1) from e

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
