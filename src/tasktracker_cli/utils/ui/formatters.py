"""Output formatters for different formats."""

import json
from collections.abc import Sequence
from typing import Any

import yaml
from rich.table import Table

from tasktracker_cli.models import Status, Task, format_timestamp
from tasktracker_cli.services.matcher import TaskMatch
from tasktracker_cli.utils.ui.console import get_console

OUTPUT_FORMATS = ("table", "json", "yaml", "quiet")

STATUS_STYLES = {
    Status.NOT_STARTED: "yellow",
    Status.IN_PROGRESS: "cyan",
    Status.DONE: "green",
}


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")


def format_status(status: Status) -> str:
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{status.label}[/{style}]"


def task_to_dict(task: Task) -> dict[str, str]:
    return task.to_record()


def match_to_dict(match: TaskMatch) -> dict[str, Any]:
    data: dict[str, Any] = task_to_dict(match.task)
    data["distance"] = match.distance
    return data


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display records (dicts) based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_dict_table(data)


def format_quiet(data: Any) -> None:
    """Print only ids, one per line."""
    items = data if isinstance(data, list) else [data]
    for item in items:
        if isinstance(item, dict) and "id" in item:
            print(item["id"])


def format_dict_table(items: list[dict[str, Any]]) -> None:
    """Format a list of records as a table, one column per key."""
    console = get_console()
    if not items:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    columns = list(items[0].keys())
    for column in columns:
        table.add_column(column)
    for item in items:
        table.add_row(*(str(item.get(column, "")) for column in columns))
    console.print(table)


def format_tasks(tasks: Sequence[Task], output_format: str = "table") -> None:
    """Display tasks as a rich table or as serialized records."""
    if output_format != "table":
        format_output([task_to_dict(task) for task in tasks], output_format)
        return

    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="bold magenta", no_wrap=True)
    table.add_column("Description")
    table.add_column("Status", no_wrap=True)
    table.add_column("Created", style="dim", no_wrap=True)
    table.add_column("Updated", style="dim", no_wrap=True)
    for task in tasks:
        table.add_row(
            task.id,
            task.description,
            format_status(task.status),
            format_timestamp(task.created_at),
            format_timestamp(task.updated_at),
        )
    console.print(table)


def format_matches(matches: Sequence[TaskMatch], output_format: str = "table") -> None:
    """Display search results, best match first."""
    if output_format != "table":
        format_output([match_to_dict(match) for match in matches], output_format)
        return

    console = get_console()
    if not matches:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="bold magenta", no_wrap=True)
    table.add_column("Description")
    table.add_column("Status", no_wrap=True)
    table.add_column("Distance", justify="right")
    for match in matches:
        table.add_row(
            match.task.id,
            match.task.description,
            format_status(match.task.status),
            str(match.distance),
        )
    console.print(table)
