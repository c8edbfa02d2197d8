from __future__ import annotations

import pytest

from personal_tasks.config import load_config
from personal_tasks.messages import get_messages


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TASKS_DB_PATH", raising=False)
    monkeypatch.delenv("TASKS_LOCALE", raising=False)
    cfg = load_config()
    assert cfg.db_path == "tasks_database.json"
    assert cfg.locale == "en"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKS_DB_PATH", "/tmp/other.json")
    monkeypatch.setenv("TASKS_LOCALE", " VI ")
    cfg = load_config()
    assert cfg.db_path == "/tmp/other.json"
    assert cfg.locale == "vi"


def test_explicit_env_mapping_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKS_DB_PATH", "/tmp/from_os.json")
    cfg = load_config({"TASKS_DB_PATH": "/tmp/explicit.json", "TASKS_LOCALE": "fr"})
    assert cfg.db_path == "/tmp/explicit.json"
    # Unknown locales fall back to English
    assert cfg.locale == "en"


def test_blank_db_path_uses_default() -> None:
    assert load_config({"TASKS_DB_PATH": "   "}).db_path == "tasks_database.json"


def test_messages_catalogs() -> None:
    en = get_messages("en")
    vi = get_messages("vi")
    assert en.format("duplicate", title="X") == (
        "Error: task 'X' already exists with the same due date."
    )
    assert vi.format("created", task_id="abc") == "Đã thêm nhiệm vụ mới thành công với ID: abc"
    assert get_messages("xx").locale == "en"
    assert get_messages(None).locale == "en"
    assert set(vi.templates) == set(en.templates)
