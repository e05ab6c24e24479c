"""Per-invocation CLI state shared through ``typer.Context.obj``."""

from __future__ import annotations

from dataclasses import dataclass, field

from tasktracker_cli.config import ConfigManager, get_config_manager
from tasktracker_cli.repositories import JsonTaskRepository
from tasktracker_cli.services.task_service import TaskService


@dataclass
class CliState:
    """Options from the root callback plus the lazily built task service.

    The service is created on first use so that commands which never touch
    tasks (``help``, ``version``, ``config``) do not create the task file.
    """

    profile: str = "default"
    tasks_file: str | None = None
    _service: TaskService | None = field(default=None, repr=False)

    @property
    def config_manager(self) -> ConfigManager:
        return get_config_manager(self.profile)

    def task_service(self) -> TaskService:
        if self._service is None:
            path = self.config_manager.resolve_tasks_file(self.tasks_file)
            self._service = TaskService(JsonTaskRepository(path))
        return self._service
