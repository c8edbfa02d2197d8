from __future__ import annotations

import datetime as _dt
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from personal_tasks.duplicates import is_duplicate
from personal_tasks.errors import DuplicateTask, InvalidInput, IOFailure, TaskTrackerError
from personal_tasks.messages import Messages, get_messages
from personal_tasks.models.task import (
    DATE_FORMAT,
    RECURRENCE_UNDETERMINED,
    TASK_STATUS_NOT_COMPLETED,
    Priority,
    Task,
)
from personal_tasks.observability import get_json_logger, get_metrics
from personal_tasks.store.json_store import TaskStore
from personal_tasks.validation import parse_due_date, resolve_priority, validate_title


@dataclass(slots=True)
class CreateResult:
    """Outcome of one create-task call: either a task or an error, plus a message."""

    task: Task | None
    message: str
    error: TaskTrackerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.task is not None


def _utc_now() -> _dt.datetime:
    return _dt.datetime.now(_dt.UTC)


class TaskCreator:
    """Validate, de-duplicate, and persist new tasks.

    Each call re-reads the full store and writes it back in full. A failed call
    never leaves a partial record behind.
    """

    def __init__(
        self,
        store: TaskStore,
        *,
        messages: Messages | None = None,
        clock: Callable[[], _dt.datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.store = store
        self.messages = messages or get_messages()
        self._clock = clock or _utc_now
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._logger = get_json_logger("personal_tasks.creator")

    def create_task(
        self,
        title: str,
        description: str,
        due_date: str,
        priority: Priority | str,
        is_recurring: bool = False,
    ) -> CreateResult:
        try:
            task = self._create(title, description, due_date, priority, is_recurring)
        except TaskTrackerError as e:
            return self._failed(e)
        get_metrics().increment("tasks_created")
        message = self.messages.format("created", task_id=task.id)
        self._logger.info(
            "task created",
            extra={"event": "task_created", "task_id": task.id},
        )
        return CreateResult(task=task, message=message)

    def _create(
        self,
        title: str,
        description: str,
        due_date: str,
        priority: Priority | str,
        is_recurring: bool,
    ) -> Task:
        msgs = self.messages
        if not validate_title(title):
            raise InvalidInput(msgs.format("title_empty"), field="title")
        if description is not None and not isinstance(description, str):
            raise InvalidInput(msgs.format("description_invalid"), field="description")
        due = parse_due_date(due_date, msgs)
        level = resolve_priority(priority, msgs)
        due_text = due.strftime(DATE_FORMAT)

        with self.store.lock:
            try:
                tasks = self.store.load()
            except IOFailure as e:
                raise IOFailure(msgs.format("load_failed", reason=e.message)) from e
            if is_duplicate(tasks, title, due_text):
                raise DuplicateTask(msgs.format("duplicate", title=title))

            now = self._clock()
            task = Task(
                id=self._id_factory(),
                title=title,
                description=description or "",
                due_date=due,
                priority=level,
                status=TASK_STATUS_NOT_COMPLETED,
                created_at=now,
                last_updated_at=now,
                is_recurring=bool(is_recurring),
                recurrence_pattern=RECURRENCE_UNDETERMINED if is_recurring else None,
            )
            try:
                self.store.save([*tasks, task])
            except IOFailure as e:
                raise IOFailure(msgs.format("save_failed", reason=e.message)) from e
        return task

    def _failed(self, error: TaskTrackerError) -> CreateResult:
        get_metrics().increment("task_create_errors", {"kind": error.kind})
        log = self._logger.error if isinstance(error, IOFailure) else self._logger.info
        log(
            "task rejected",
            extra={"event": "task_rejected", "kind": error.kind, "field": error.field},
        )
        return CreateResult(task=None, message=error.message, error=error)


__all__ = ["CreateResult", "TaskCreator"]
