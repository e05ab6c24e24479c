"""Task persistence ports and adapters."""

from .json_repository import JsonTaskRepository
from .repository import TaskRepository

__all__ = ["TaskRepository", "JsonTaskRepository"]
