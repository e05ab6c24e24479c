"""Task service - Business logic for task operations.

This service layer sits between commands and the repository. Every public
operation is a full round trip: load the whole collection, change it, and
write the whole collection back.
"""

from __future__ import annotations

from collections.abc import Callable

from tasktracker_cli.exceptions import InvalidArgumentError
from tasktracker_cli.models import OperationResult, Status, Task
from tasktracker_cli.models.task import require_description, require_id
from tasktracker_cli.repositories import TaskRepository
from tasktracker_cli.services import matcher
from tasktracker_cli.utils.logger import get_logger


class TaskService:
    """Service for task business logic.

    Construct one per process and hand it to whatever dispatches commands.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service and make sure storage exists.

        Args:
            task_repository: TaskRepository implementation for data access

        Raises:
            StorageError: If the backing storage cannot be created
        """
        self.repository = task_repository
        self.logger = get_logger()
        self.repository.initialize()

    # ---- queries ----

    def list_tasks(self, status: Status | str | None = None) -> list[Task]:
        """List tasks in stored order, optionally only those in ``status``."""
        wanted = None if status is None else _as_status(status)
        tasks = self.repository.load()
        if wanted is None:
            return tasks
        return [task for task in tasks if task.status is wanted]

    def get_task(self, task_id: str) -> Task | None:
        task_id = require_id(task_id)
        for task in self.repository.load():
            if task.id == task_id:
                return task
        return None

    def search_tasks(self, query: str, limit: int = matcher.DEFAULT_LIMIT) -> list[matcher.TaskMatch]:
        """Rank all tasks against ``query`` and keep the best ``limit``."""
        return matcher.rank(query, self.repository.load(), limit)

    # ---- mutations ----

    def add_task(self, task: Task | None) -> OperationResult:
        if task is None:
            raise InvalidArgumentError("Task cannot be empty.")
        tasks = self.repository.load()
        tasks.append(task)
        self.repository.save(tasks)
        self.logger.info("task added id=%s status=%s", task.id, task.status)
        return OperationResult.success(task)

    def update_description(self, task_id: str, description: str) -> OperationResult:
        task_id = require_id(task_id)
        description = require_description(description)
        return self._mutate(task_id, lambda task: task.set_description(description))

    def update_status(self, task_id: str, status: str) -> OperationResult:
        task_id = require_id(task_id)
        new_status = _as_status(status)
        return self._mutate(task_id, lambda task: task.set_status(new_status))

    def update_description_and_status(
        self, task_id: str, description: str, status: str
    ) -> OperationResult:
        task_id = require_id(task_id)
        description = require_description(description)
        new_status = _as_status(status)

        def apply(task: Task) -> None:
            task.set_description(description)
            task.set_status(new_status)

        return self._mutate(task_id, apply)

    def mark_as(self, task_id: str, status: Status) -> OperationResult:
        task_id = require_id(task_id)
        if not isinstance(status, Status):
            raise InvalidArgumentError(f"Expected a Status, got {status!r}")
        return self._mutate(task_id, lambda task: task.set_status(status))

    def delete_task(self, task_id: str) -> OperationResult:
        task_id = require_id(task_id)
        tasks = self.repository.load()
        for index, task in enumerate(tasks):
            if task.id == task_id:
                del tasks[index]
                self.repository.save(tasks)
                self.logger.info("task deleted id=%s", task_id)
                return OperationResult.success(task)
        self.logger.info("delete: task not found id=%s", task_id)
        return OperationResult.not_found(task_id)

    def _mutate(self, task_id: str, apply: Callable[[Task], None]) -> OperationResult:
        tasks = self.repository.load()
        for task in tasks:
            if task.id == task_id:
                apply(task)
                self.repository.save(tasks)
                self.logger.info("task updated id=%s status=%s", task.id, task.status)
                return OperationResult.success(task)
        self.logger.info("update: task not found id=%s", task_id)
        return OperationResult.not_found(task_id)


def _as_status(status: Status | str) -> Status:
    if isinstance(status, Status):
        return status
    return Status.parse(status)
