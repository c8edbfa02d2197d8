from __future__ import annotations

from .creator import CreateResult, TaskCreator
from .errors import DuplicateTask, InvalidInput, IOFailure, TaskTrackerError
from .models.task import Priority, Task
from .store import JsonTaskStore, TaskStore

__all__ = [
    "CreateResult",
    "DuplicateTask",
    "IOFailure",
    "InvalidInput",
    "JsonTaskStore",
    "Priority",
    "Task",
    "TaskCreator",
    "TaskStore",
    "TaskTrackerError",
]
