"""Task data model."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from tasktracker_cli.exceptions import InvalidArgumentError
from tasktracker_cli.models.status import Status

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
ID_LENGTH = 8


def now() -> datetime:
    """Current local wall-clock time at second resolution."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(raw: str | datetime) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` timestamp.

    Raises:
        InvalidArgumentError: If the value is not in the expected format.
    """
    if isinstance(raw, datetime):
        return raw.replace(microsecond=0, tzinfo=None)
    try:
        parsed = datetime.strptime(raw, TIMESTAMP_FORMAT)
    except (TypeError, ValueError):
        parsed = None
    # strptime also accepts unpadded fields such as "2024-5-1 9:30:00"
    if parsed is None or format_timestamp(parsed) != raw:
        raise InvalidArgumentError(
            f"Invalid timestamp: {raw!r}. Expected format YYYY-MM-DD HH:MM:SS"
        )
    return parsed


def generate_id() -> str:
    """Short random task id: the first 8 hex characters of a UUID4."""
    return uuid.uuid4().hex[:ID_LENGTH]


def require_description(description: Any) -> str:
    if not isinstance(description, str) or not description.strip():
        raise InvalidArgumentError("Description cannot be empty.")
    try:
        description.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidArgumentError("Description must be valid UTF-8 text.") from None
    return description


def require_id(task_id: Any) -> str:
    if not isinstance(task_id, str) or not task_id.strip():
        raise InvalidArgumentError("Task ID cannot be empty.")
    return task_id


def _coerce_status(status: Status | str | None) -> Status:
    if isinstance(status, Status):
        return status
    return Status.parse(status)


class Task(BaseModel):
    """Task model representing a single tracked task.

    Attributes:
        id: Short random identifier, fixed at creation
        description: Non-empty task text
        status: Lifecycle status
        created_at: Creation timestamp, fixed at creation
        updated_at: Last modification timestamp, never earlier than created_at

    Use :meth:`new` for fresh tasks and :meth:`reconstruct` (or
    :meth:`from_record`) when rehydrating from storage. Both validate every
    field.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(frozen=True, min_length=1)
    description: str
    status: Status = Status.NOT_STARTED
    created_at: datetime = Field(alias="createdAt", frozen=True)
    updated_at: datetime = Field(alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def _default_timestamps(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "id" not in data:
            data["id"] = generate_id()
        created = data.get("created_at", data.get("createdAt"))
        if created is None:
            created = now()
            data["created_at"] = created
        if data.get("updated_at", data.get("updatedAt")) is None:
            data["updated_at"] = created
        return data

    @field_validator("description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        return require_description(value)

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: Any) -> Status:
        return _coerce_status(value)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _check_timestamp(cls, value: Any) -> datetime:
        return parse_timestamp(value)

    @model_validator(mode="after")
    def _check_order(self) -> Task:
        if self.updated_at < self.created_at:
            raise ValueError("updatedAt cannot be earlier than createdAt")
        return self

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    # ---- construction ----

    @classmethod
    def new(cls, description: str, status: Status | str | None = None) -> Task:
        """Create a fresh task; status defaults to NOT_STARTED."""
        description = require_description(description)
        resolved = Status.NOT_STARTED if status is None else _coerce_status(status)
        stamp = now()
        return cls(
            id=generate_id(),
            description=description,
            status=resolved,
            created_at=stamp,
            updated_at=stamp,
        )

    @classmethod
    def reconstruct(
        cls,
        id: str,
        description: str,
        status: Status | str,
        created_at: str | datetime,
        updated_at: str | datetime,
    ) -> Task:
        """Rebuild a stored task, re-validating every field."""
        task_id = require_id(id)
        description = require_description(description)
        resolved = _coerce_status(status)
        created = parse_timestamp(created_at)
        updated = parse_timestamp(updated_at)
        if updated < created:
            raise InvalidArgumentError(
                f"Task {task_id}: updatedAt {format_timestamp(updated)} is earlier "
                f"than createdAt {format_timestamp(created)}"
            )
        return cls(
            id=task_id,
            description=description,
            status=resolved,
            created_at=created,
            updated_at=updated,
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Task:
        """Rebuild a task from one element of the task file.

        Raises:
            InvalidArgumentError: If the record is not an object or a field is
                missing or invalid.
        """
        if not isinstance(record, Mapping):
            raise InvalidArgumentError(f"Task record must be an object, got {type(record).__name__}")
        try:
            return cls.reconstruct(
                record["id"],
                record["description"],
                record["status"],
                record["createdAt"],
                record["updatedAt"],
            )
        except KeyError as e:
            raise InvalidArgumentError(f"Task record is missing field {e.args[0]!r}") from None

    def to_record(self) -> dict[str, str]:
        """The JSON object written to the task file."""
        return self.model_dump(mode="json", by_alias=True)

    # ---- mutation ----

    def set_description(self, description: str) -> None:
        self.description = require_description(description)
        self._touch()

    def set_status(self, status: Status | str) -> None:
        self.status = _coerce_status(status)
        self._touch()

    def _touch(self) -> None:
        self.updated_at = max(now(), self.updated_at)
