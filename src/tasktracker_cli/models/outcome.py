"""Reported outcomes of task mutations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tasktracker_cli.models.task import Task


class Outcome(StrEnum):
    """Result of a mutation that the caller renders rather than raises."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class OperationResult:
    outcome: Outcome
    task_id: str
    task: Task | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def success(cls, task: Task) -> OperationResult:
        return cls(Outcome.SUCCESS, task.id, task)

    @classmethod
    def not_found(cls, task_id: str) -> OperationResult:
        return cls(Outcome.NOT_FOUND, task_id)
