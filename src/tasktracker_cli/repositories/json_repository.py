"""JSON file implementation of TaskRepository."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from tasktracker_cli.exceptions import InvalidArgumentError, StorageError
from tasktracker_cli.models import Task
from tasktracker_cli.repositories.repository import TaskRepository
from tasktracker_cli.utils.logger import get_logger


class JsonTaskRepository(TaskRepository):
    """Stores the task collection as one JSON array in a flat file.

    Every load reads the whole file and every save rewrites it. There is no
    locking: two processes writing the same file concurrently can lose one
    of the writes.
    """

    def __init__(self, path: str | Path = "tasks.json"):
        """Initialize the JSON task repository.

        Args:
            path: Task file location. Relative paths resolve against the
                current working directory.
        """
        self.path = Path(path)
        self.logger = get_logger()

    def initialize(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Error initializing task file {self.path}: {e}") from e
        self.logger.info("creating task file %s", self.path)
        self.save([])

    def load(self) -> list[Task]:
        try:
            with open(self.path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("Error loading tasks from %s: %s", self.path, e)
            return []

        if not content.strip():
            return []

        try:
            records = json.loads(content)
            if not isinstance(records, list):
                raise InvalidArgumentError(
                    f"Task file must contain a JSON array, got {type(records).__name__}"
                )
            tasks = [Task.from_record(record) for record in records]
        except (ValueError, RecursionError) as e:
            self.logger.warning(
                "Error loading tasks from %s: %s; continuing with an empty task list",
                self.path,
                e,
            )
            return []

        self.logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps(
            [task.to_record() for task in tasks], indent=2, ensure_ascii=False
        )
        try:
            # the file is only truncated once encoding has succeeded
            data = (payload + "\n").encode("utf-8")
            with open(self.path, "wb") as f:
                f.write(data)
        except (OSError, UnicodeEncodeError) as e:
            raise StorageError(f"Error writing tasks to {self.path}: {e}") from e
        self.logger.debug("saved %d task(s) to %s", len(tasks), self.path)
