from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from personal_tasks.messages import CATALOGS, DEFAULT_LOCALE
from personal_tasks.store.json_store import DEFAULT_DB_PATH


@dataclass(slots=True)
class TrackerConfig:
    db_path: str
    locale: str


def load_config(env: dict[str, str] | None = None) -> TrackerConfig:
    e: dict[str, Any] = dict(os.environ)
    if env:
        e.update(env)
    db_path = (e.get("TASKS_DB_PATH") or "").strip() or DEFAULT_DB_PATH
    locale = (e.get("TASKS_LOCALE") or "").strip().lower()
    if locale not in CATALOGS:
        locale = DEFAULT_LOCALE
    return TrackerConfig(db_path=db_path, locale=locale)


__all__ = ["TrackerConfig", "load_config"]
