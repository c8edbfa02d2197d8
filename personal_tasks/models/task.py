from __future__ import annotations

import datetime as _dt
import uuid
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"
TASK_STATUS_NOT_COMPLETED = "Not completed"
RECURRENCE_UNDETERMINED = "Undetermined"


class Priority(str, Enum):
    """Closed set of priority levels; values are the stored display texts."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Vietnamese display texts, accepted on input and in older stores
PRIORITY_ALIASES: dict[str, Priority] = {
    "thấp": Priority.LOW,
    "trung bình": Priority.MEDIUM,
    "cao": Priority.HIGH,
}


def lookup_priority(text: str) -> Priority | None:
    key = text.strip().casefold()
    for level in Priority:
        if level.value.casefold() == key:
            return level
    return PRIORITY_ALIASES.get(key)


class Task(BaseModel):
    """A task record persisted in the JSON store.

    - `created_at` and `last_updated_at` are equal at creation; nothing updates them
    - `recurrence_pattern` is only present for recurring tasks and is never acted on
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str
    description: str = ""
    due_date: _dt.date
    priority: Priority
    status: str = TASK_STATUS_NOT_COMPLETED
    created_at: _dt.datetime
    last_updated_at: _dt.datetime
    is_recurring: bool = False
    recurrence_pattern: str | None = None

    @field_validator("priority", mode="before")
    @classmethod
    def _priority_from_text(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Priority):
            return lookup_priority(value) or value
        return value

    @property
    def due_date_text(self) -> str:
        return self.due_date.strftime(DATE_FORMAT)

    def to_record(self) -> dict[str, Any]:
        """JSON-safe dict in store layout; omits `recurrence_pattern` when unset."""
        exclude = {"recurrence_pattern"} if self.recurrence_pattern is None else None
        return self.model_dump(mode="json", exclude=exclude)


__all__ = [
    "DATE_FORMAT",
    "PRIORITY_ALIASES",
    "Priority",
    "RECURRENCE_UNDETERMINED",
    "TASK_STATUS_NOT_COMPLETED",
    "Task",
    "lookup_priority",
]
