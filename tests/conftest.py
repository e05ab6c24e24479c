"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real log and config
directories and from the working directory's task file.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from tasktracker_cli.models import Status, Task
from tasktracker_cli.repositories import JsonTaskRepository
from tasktracker_cli.services.task_service import TaskService


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _reset_logger() -> None:
    import tasktracker_cli.utils.logger as logger_mod

    logger_mod._logger = None
    app_logger = logging.getLogger("tasktracker_cli")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point log/config directories at *tmp_path* and run inside it."""
    import tasktracker_cli.config as config_mod

    log_dir = tmp_path / "logs"
    config_dir = tmp_path / "config"
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.delenv("TCLI_TASKS_FILE", raising=False)

    _reset_logger()
    config_mod._config_manager = None
    with patch("tasktracker_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        with patch("tasktracker_cli.config.user_config_dir", return_value=str(config_dir)):
            yield tmp_path
    _reset_logger()
    config_mod._config_manager = None


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture()
def repository(tasks_file):
    return JsonTaskRepository(tasks_file)


@pytest.fixture()
def service(repository):
    return TaskService(repository)


@pytest.fixture()
def seeded_service(service):
    """A service holding three tasks in a known order."""
    for description, status in (
        ("buy milk", Status.NOT_STARTED),
        ("buy bread", Status.IN_PROGRESS),
        ("walk dog", Status.DONE),
    ):
        service.add_task(Task.new(description, status))
    return service
