"""Repository abstraction layer for Task Tracker CLI.

The task store keeps the whole collection in a single document, so the
port is deliberately coarse: read everything, write everything. Business
rules live in :mod:`tasktracker_cli.services.task_service`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tasktracker_cli.models import Task


class TaskRepository(ABC):
    """Abstract base class for task collection persistence."""

    @abstractmethod
    def initialize(self) -> None:
        """Create the backing storage with an empty collection if it is missing.

        Raises:
            StorageError: If the storage cannot be created
        """
        raise NotImplementedError(
            "TaskRepository.initialize() must be implemented by adapter"
        )

    @abstractmethod
    def load(self) -> list[Task]:
        """Load the full task collection in stored order.

        Unreadable or malformed storage yields an empty list rather than
        raising.
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> None:
        """Replace the stored collection with ``tasks``.

        Raises:
            StorageError: If the collection cannot be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")
