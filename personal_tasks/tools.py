from __future__ import annotations

from typing import Any

from personal_tasks.config import load_config
from personal_tasks.creator import CreateResult, TaskCreator
from personal_tasks.errors import IOFailure
from personal_tasks.messages import get_messages
from personal_tasks.models.task import Priority
from personal_tasks.observability import get_json_logger
from personal_tasks.store.json_store import JsonTaskStore

# Module-level creator cache so the store path and locale are read once
_CREATOR: TaskCreator | None = None


def _get_creator() -> TaskCreator:
    global _CREATOR
    if _CREATOR is None:
        cfg = load_config()
        _CREATOR = TaskCreator(JsonTaskStore(cfg.db_path), messages=get_messages(cfg.locale))
    return _CREATOR


def reset_for_testing() -> None:
    global _CREATOR
    _CREATOR = None


def result_to_dict(result: CreateResult) -> dict[str, Any]:
    if result.task is not None and result.error is None:
        return {"task": result.task.to_record(), "message": result.message}
    err = result.error
    return {
        "task": None,
        "error": err.kind if err is not None else "TaskTrackerError",
        "field": err.field if err is not None else None,
        "message": result.message,
        "transient": isinstance(err, IOFailure),
    }


def create_task_tool(
    title: str,
    description: str,
    due_date: str,
    priority: Priority | str,
    is_recurring: bool = False,
) -> dict[str, Any]:
    """Create a task and return a JSON-safe result dict."""
    logger = get_json_logger("personal_tasks.tools")
    logger.debug(
        "tool call",
        extra={"event": "tool_call", "metadata": {"title": str(title)[:80], "due_date": due_date}},
    )
    result = _get_creator().create_task(title, description, due_date, priority, is_recurring)
    return result_to_dict(result)


__all__ = ["create_task_tool", "reset_for_testing", "result_to_dict"]
