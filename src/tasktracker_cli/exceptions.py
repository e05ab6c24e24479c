"""Error taxonomy for Task Tracker CLI.

Every error carries the exit code the command layer should use once the
error has been rendered. Validation errors are handled outcomes, so they
exit 0; storage failures are fatal.
"""

from __future__ import annotations

from tasktracker_cli.utils.exit_codes import ERROR_STORAGE, SUCCESS


class TaskTrackerError(Exception):
    """Base exception for all Task Tracker errors."""

    exit_code: int = 1


class InvalidArgumentError(TaskTrackerError, ValueError):
    """Raised when an operation receives an empty id, description or task."""

    exit_code = SUCCESS


class InvalidStatusError(InvalidArgumentError):
    """Raised when a status token is not one of the canonical names."""

    def __init__(self, raw: object, accepted: tuple[str, ...]):
        self.raw = raw
        self.accepted = accepted
        super().__init__(
            f"Invalid status: {raw!r}. Valid statuses are: {', '.join(accepted)}"
        )


class StorageError(TaskTrackerError):
    """Raised when the task file cannot be created or written."""

    exit_code = ERROR_STORAGE
