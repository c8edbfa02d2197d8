from __future__ import annotations

from collections.abc import Iterable

from personal_tasks.models.task import Task


def is_duplicate(existing: Iterable[Task], title: str, due_date_text: str) -> bool:
    """Return True if any task has the same title (case-insensitive) and due date string."""
    wanted = title.casefold()
    for task in existing:
        if task.title.casefold() == wanted and task.due_date_text == due_date_text:
            return True
    return False


__all__ = ["is_duplicate"]
