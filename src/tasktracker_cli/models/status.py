"""Task lifecycle status."""

from __future__ import annotations

from enum import StrEnum

from tasktracker_cli.exceptions import InvalidStatusError


class Status(StrEnum):
    """
    Lifecycle status of a task.

    The value of each member is its canonical name, which is also what gets
    written to the task file.
    """

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, raw: str | None) -> Status:
        """Parse a status token, ignoring case and surrounding whitespace.

        Raises:
            InvalidStatusError: If the token is not a canonical status name.
        """
        if not isinstance(raw, str):
            raise InvalidStatusError(raw, cls.names())
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise InvalidStatusError(raw, cls.names()) from None

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Status.NOT_STARTED: "Not started",
    Status.IN_PROGRESS: "In progress",
    Status.DONE: "Done",
}
