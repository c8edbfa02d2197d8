from __future__ import annotations

from typing import Any


class TaskTrackerError(Exception):
    """Base error for task creation failures.

    `kind` is the stable, machine-readable failure category; `field` names the
    offending input for validation failures.
    """

    kind = "TaskTrackerError"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.kind, "field": self.field, "message": self.message}


class InvalidInput(TaskTrackerError, ValueError):
    kind = "InvalidInput"


class DuplicateTask(TaskTrackerError):
    kind = "DuplicateTask"


class IOFailure(TaskTrackerError):
    kind = "IOFailure"


__all__ = ["TaskTrackerError", "InvalidInput", "DuplicateTask", "IOFailure"]
