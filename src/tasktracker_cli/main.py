"""Main entry point for Task Tracker CLI."""

from typing import Optional

import typer

from tasktracker_cli import __version__
from tasktracker_cli.commands import config, tasks
from tasktracker_cli.commands.state import CliState
from tasktracker_cli.models import Status
from tasktracker_cli.utils.logger import set_console_level
from tasktracker_cli.utils.typer_helpers import SuggestingGroup
from tasktracker_cli.utils.ui.console import get_console

app = typer.Typer(
    name="tcli",
    cls=SuggestingGroup,
    help="Track short tasks from the command line",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")

STATUS_HELP = "Status (not_started, in_progress, done)"
OUTPUT_HELP = "Output format (table, json, yaml, quiet)"


@app.callback()
def main_callback(
    ctx: typer.Context,
    tasks_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        envvar="TCLI_TASKS_FILE",
        help="Task file to use (default: storage.tasks_file from config)",
    ),
    profile: str = typer.Option("default", "--profile", help="Configuration profile"),
) -> None:
    """Track short tasks from the command line."""
    state = CliState(profile=profile, tasks_file=tasks_file)
    ctx.obj = state

    settings = state.config_manager.config
    set_console_level(settings.logging.level)
    if not settings.output.color:
        console.no_color = True


@app.command()
def add(
    ctx: typer.Context,
    description: list[str] = typer.Argument(..., help="Task description"),
    status: Optional[str] = typer.Option(None, "--status", "-s", help=STATUS_HELP),
) -> None:
    """Add a new task."""
    tasks.add_task(ctx.obj, " ".join(description), status)


@app.command()
def update(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="New description"
    ),
    status: Optional[str] = typer.Option(None, "--status", "-s", help=STATUS_HELP),
) -> None:
    """Update a task's description and/or status."""
    tasks.update_task(ctx.obj, task_id, description, status)


@app.command()
def delete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Delete a task."""
    tasks.delete_task(ctx.obj, task_id)


@app.command("mark-in-progress")
def mark_in_progress(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task as in progress."""
    tasks.mark_task(ctx.obj, task_id, Status.IN_PROGRESS)


@app.command("mark-done")
def mark_done(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Mark a task as done."""
    tasks.mark_task(ctx.obj, task_id, Status.DONE)


@app.command("mark-not-started")
def mark_not_started(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
) -> None:
    """Move a task back to not started."""
    tasks.mark_task(ctx.obj, task_id, Status.NOT_STARTED)


@app.command("list")
def list_(
    ctx: typer.Context,
    status: Optional[str] = typer.Option(None, "--status", "-s", help=STATUS_HELP),
    output: Optional[str] = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """List tasks, optionally filtered by status."""
    tasks.list_tasks(ctx.obj, status, output)


@app.command()
def search(
    ctx: typer.Context,
    keyword: list[str] = typer.Argument(..., help="Text to look for"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-k", help="Number of results (default: search.limit)"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help=OUTPUT_HELP),
) -> None:
    """Fuzzy-search task descriptions."""
    tasks.search_tasks(ctx.obj, " ".join(keyword), limit, output)


@app.command("help")
def help_(ctx: typer.Context) -> None:
    """Show this help message."""
    typer.echo(ctx.find_root().get_help())


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Task Tracker CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
