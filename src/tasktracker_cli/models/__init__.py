"""Task Tracker domain models.

This package contains the entities the task store reads, mutates and
writes: the closed :class:`Status` set, the :class:`Task` entity and the
:class:`OperationResult` reported by every mutation.
"""

from .outcome import OperationResult, Outcome
from .status import Status
from .task import TIMESTAMP_FORMAT, Task, format_timestamp, parse_timestamp

__all__ = [
    "Status",
    "Task",
    "TIMESTAMP_FORMAT",
    "format_timestamp",
    "parse_timestamp",
    "Outcome",
    "OperationResult",
]
