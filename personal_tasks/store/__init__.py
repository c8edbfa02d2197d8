from __future__ import annotations

from .json_store import DEFAULT_DB_PATH, JsonTaskStore, TaskStore

__all__ = [
    "DEFAULT_DB_PATH",
    "JsonTaskStore",
    "TaskStore",
]
