from __future__ import annotations

import datetime as dt
from collections.abc import Generator
from pathlib import Path

import pytest

from personal_tasks.creator import TaskCreator
from personal_tasks.observability import get_json_logger, reset_metrics
from personal_tasks.store.json_store import JsonTaskStore

FIXED_NOW = dt.datetime(2025, 7, 1, 9, 30, 15, 123456, tzinfo=dt.UTC)


@pytest.fixture(scope="session", autouse=True)
def _bind_loggers_to_session_streams() -> None:
    """Create package loggers once so their handlers outlive per-test capsys streams."""
    for name in (
        "personal_tasks.store",
        "personal_tasks.creator",
        "personal_tasks.tools",
    ):
        get_json_logger(name)


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, None, None]:
    from personal_tasks import tools

    reset_metrics()
    tools.reset_for_testing()
    yield
    tools.reset_for_testing()


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks_database.json"


@pytest.fixture()
def store(store_path: Path) -> JsonTaskStore:
    return JsonTaskStore(store_path)


@pytest.fixture()
def creator(store: JsonTaskStore) -> TaskCreator:
    return TaskCreator(store, clock=lambda: FIXED_NOW)


@pytest.fixture()
def fixed_now() -> dt.datetime:
    return FIXED_NOW


@pytest.fixture()
def captured_loggers(capsys: pytest.CaptureFixture[str]) -> Generator[None, None, None]:
    """Rebind package loggers so the current capsys stream sees their output."""
    import logging

    names = ("personal_tasks.store", "personal_tasks.creator", "personal_tasks.tools")
    saved = {n: list(logging.getLogger(n).handlers) for n in names}
    for n in names:
        logging.getLogger(n).handlers.clear()
        get_json_logger(n)
    yield
    for n in names:
        lg = logging.getLogger(n)
        lg.handlers.clear()
        lg.handlers.extend(saved[n])
