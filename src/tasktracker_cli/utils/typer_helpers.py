"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from tasktracker_cli.utils.exit_codes import ERROR_GENERAL
from tasktracker_cli.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, available) -> list[str]:
    """Return up to three command names that look like ``attempted``."""
    return get_close_matches(
        attempted, sorted(available), n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF
    )


class SuggestingGroup(TyperGroup):
    """Command group that answers a mistyped command with close matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = suggest_commands(attempted, self.commands)
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print()
            heading = (
                "Did you mean this?"
                if len(suggestions) == 1
                else "Did you mean one of these?"
            )
            console.print(f"[yellow]{heading}[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            console.print()
            console.print(f"Run '{ctx.info_name} help' for usage.")
            raise typer.Exit(ERROR_GENERAL) from e
