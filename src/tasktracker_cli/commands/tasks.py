"""Task commands: add, update, delete, mark, list and search."""

from __future__ import annotations

from tasktracker_cli.exceptions import InvalidArgumentError
from tasktracker_cli.models import OperationResult, Outcome, Status, Task
from tasktracker_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_info,
    format_matches,
    format_success,
    format_tasks,
)

from .decorators import command_wrapper
from .state import CliState


def _render_result(result: OperationResult, action: str) -> None:
    if result.outcome is Outcome.NOT_FOUND:
        format_info(f"Task id: {result.task_id} not found")
    else:
        format_success(f"Task {action} (ID: {result.task_id})")


def _resolve_output(state: CliState, output: str | None) -> str:
    output = output or state.config_manager.config.output.format
    if output not in OUTPUT_FORMATS:
        raise InvalidArgumentError(
            f"Unknown output format: {output}. Choose from: {', '.join(OUTPUT_FORMATS)}"
        )
    return output


@command_wrapper
def add_task(state: CliState, description: str, status: str | None = None) -> None:
    """Create a task and store it."""
    task = Task.new(description, status)
    state.task_service().add_task(task)
    format_success(f"Task added (ID: {task.id})")


@command_wrapper
def update_task(
    state: CliState,
    task_id: str,
    description: str | None = None,
    status: str | None = None,
) -> None:
    """Change a task's description, status, or both."""
    service = state.task_service()
    if description is not None and status is not None:
        result = service.update_description_and_status(task_id, description, status)
        _render_result(result, "description and status updated")
    elif description is not None:
        result = service.update_description(task_id, description)
        _render_result(result, "description updated")
    elif status is not None:
        result = service.update_status(task_id, status)
        _render_result(result, "status updated")
    else:
        raise InvalidArgumentError(
            "Nothing to update. Pass --description and/or --status."
        )


@command_wrapper
def delete_task(state: CliState, task_id: str) -> None:
    result = state.task_service().delete_task(task_id)
    _render_result(result, "deleted")


@command_wrapper
def mark_task(state: CliState, task_id: str, status: Status) -> None:
    result = state.task_service().mark_as(task_id, status)
    _render_result(result, f"marked as {status.label.lower()}")


@command_wrapper
def list_tasks(state: CliState, status: str | None = None, output: str | None = None) -> None:
    """Show all tasks in stored order, optionally only one status."""
    output = _resolve_output(state, output)
    tasks = state.task_service().list_tasks(status)
    format_tasks(tasks, output)


@command_wrapper
def search_tasks(
    state: CliState, keyword: str, limit: int | None = None, output: str | None = None
) -> None:
    """Show the tasks closest to ``keyword``, best first."""
    output = _resolve_output(state, output)
    if limit is None:
        limit = state.config_manager.config.search.limit
    matches = state.task_service().search_tasks(keyword, limit)
    format_matches(matches, output)
