# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import random
import string
import time
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

Clock = Callable[[], datetime]

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LEN = 9


class ValidationError(ValueError):
    """Invalid task input (empty title, unknown priority, malformed record)."""


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Any) -> Priority:
        try:
            return cls(raw)
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValidationError(
                f"Invalid priority: {raw}. Must be one of: {allowed}"
            ) from None


def utc_now() -> datetime:
    return datetime.now(UTC)


def generate_task_id() -> str:
    """
    Build a session-unique task id: ``task_<epoch ms>_<9 base-36 chars>``.

    The millisecond part alone repeats for back-to-back calls; the random
    suffix is what keeps ids apart.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(random.choices(_ID_ALPHABET, k=_ID_RANDOM_LEN))
    return f"task_{millis}_{suffix}"


def _to_millis(dt: datetime) -> datetime:
    # Naive datetimes are taken as UTC.
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    dt = dt.astimezone(UTC)
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def format_timestamp(dt: datetime) -> str:
    """Render as ISO-8601 UTC with milliseconds, e.g. 2024-01-02T03:04:05.678Z."""
    return _to_millis(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(f"Invalid timestamp: {raw!r}")
    try:
        dt = datetime.fromisoformat(raw.strip())
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {raw!r}") from None
    return _to_millis(dt)


def _clean_title(title: Any, message: str) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(message)
    return title.strip()


def _clean_description(description: Any) -> str:
    if description is None:
        return ""
    if not isinstance(description, str):
        raise ValidationError(
            f"Task description must be a string, got {type(description).__name__}"
        )
    return description.strip()


class Task:
    """
    A single to-do item.

    Identity (id, created_at) is fixed at construction. Every other field
    changes only through the mutating methods, each of which refreshes
    updated_at. Attributes are exposed as read-only properties.

    Timestamps are kept in UTC at millisecond precision, which is exactly what
    to_dict() renders, so to_dict()/from_dict() round-trips without loss.
    """

    __slots__ = (
        "_id",
        "_title",
        "_description",
        "_priority",
        "_completed",
        "_created_at",
        "_updated_at",
        "_clock",
    )

    def __init__(
        self,
        title: str,
        description: str | None = None,
        priority: Priority | str = Priority.MEDIUM,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._title = _clean_title(title, "Task title is required")
        self._description = _clean_description(description)
        self._priority = Priority.parse(priority)
        self._clock: Clock = clock or utc_now

        self._id = generate_task_id()
        self._completed = False
        now = _to_millis(self._clock())
        self._created_at = now
        self._updated_at = now

    # ---- read-only views ----

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # ---- mutations ----

    def _touch(self) -> None:
        # updated_at never goes below created_at, even if the clock steps back.
        self._updated_at = max(_to_millis(self._clock()), self._created_at)

    def mark_complete(self) -> None:
        self._completed = True
        self._touch()

    def mark_incomplete(self) -> None:
        self._completed = False
        self._touch()

    def update_title(self, new_title: str) -> None:
        self._title = _clean_title(new_title, "Task title cannot be empty")
        self._touch()

    def update_description(self, new_description: str | None) -> None:
        self._description = _clean_description(new_description)
        self._touch()

    def update_priority(self, new_priority: Priority | str) -> None:
        self._priority = Priority.parse(new_priority)
        self._touch()

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "title": self._title,
            "description": self._description,
            "priority": self._priority.value,
            "completed": self._completed,
            "createdAt": format_timestamp(self._created_at),
            "updatedAt": format_timestamp(self._updated_at),
        }

    @classmethod
    def from_dict(cls, record: Mapping[str, Any], *, clock: Clock | None = None) -> Task:
        """
        Rebuild a task from a stored record.

        Title and priority go through the constructor, so a corrupted record
        fails with ValidationError instead of producing an invalid task. The
        id, completion flag and timestamps are then taken verbatim.
        """
        if not isinstance(record, Mapping):
            raise ValidationError(f"Task record must be a mapping, got {type(record).__name__}")

        task = cls(
            record.get("title"),  # type: ignore[arg-type]
            record.get("description"),
            record.get("priority", Priority.MEDIUM),
            clock=clock,
        )

        task_id = record.get("id")
        if not isinstance(task_id, str) or not task_id:
            raise ValidationError(f"Invalid task id: {task_id!r}")

        completed = record.get("completed", False)
        if not isinstance(completed, bool):
            raise ValidationError(f"Invalid completed flag: {completed!r}")

        task._id = task_id
        task._completed = completed
        task._created_at = parse_timestamp(record.get("createdAt"))
        task._updated_at = parse_timestamp(record.get("updatedAt"))
        return task

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Task(id={self._id!r}, title={self._title!r}, "
            f"priority={self._priority.value}, completed={self._completed})"
        )
