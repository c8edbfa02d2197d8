from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from personal_tasks.cli import main
from personal_tasks.creator import TaskCreator
from personal_tasks.demo import run_demo
from personal_tasks.errors import DuplicateTask, InvalidInput
from personal_tasks.messages import get_messages
from personal_tasks.store.json_store import JsonTaskStore


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as ei:
        main(argv)
    return int(ei.value.code or 0)


def test_demo_walkthrough(store: JsonTaskStore, store_path: Path) -> None:
    lines: list[str] = []
    results = run_demo(TaskCreator(store), out=lines.append)

    assert [r.ok for r in results] == [True, False, True, False]
    assert isinstance(results[1].error, DuplicateTask)
    assert isinstance(results[3].error, InvalidInput)
    assert "Adding a valid task:" in lines
    assert "Adding a task with an empty title:" in lines
    assert "Error: title must not be empty." in lines

    stored = json.loads(store_path.read_text(encoding="utf-8"))
    assert [t["title"] for t in stored] == ["Buy book", "Exercise"]
    assert "recurrence_pattern" not in stored[0]
    assert stored[1]["recurrence_pattern"] == "Undetermined"


def test_demo_headings_follow_locale(store: JsonTaskStore) -> None:
    lines: list[str] = []
    run_demo(TaskCreator(store, messages=get_messages("vi")), out=lines.append)
    assert "Thêm nhiệm vụ hợp lệ:" in lines


def test_cli_demo(tmp_path: Path, capsys: Any) -> None:
    db = tmp_path / "demo.json"
    assert _run(["demo", "--db", str(db)]) == 0
    out = capsys.readouterr().out
    assert "Adding a duplicate task:" in out
    assert len(json.loads(db.read_text(encoding="utf-8"))) == 2


def test_cli_add_success_and_duplicate(tmp_path: Path, capsys: Any) -> None:
    db = tmp_path / "cli.json"
    args = [
        "add",
        "--title",
        "Buy book",
        "--due",
        "2025-07-20",
        "--priority",
        "high",
        "--db",
        str(db),
    ]

    assert _run(args) == 0
    assert "Added new task with ID:" in capsys.readouterr().out

    assert _run(args) == 1
    assert "already exists" in capsys.readouterr().err


def test_cli_add_json_output(tmp_path: Path, capsys: Any, captured_loggers: None) -> None:
    db = tmp_path / "cli.json"
    code = _run(
        [
            "add",
            "--title",
            "Exercise",
            "--description",
            "Gym 1h",
            "--due",
            "2025-07-21",
            "--recurring",
            "--json",
            "--db",
            str(db),
        ]
    )
    assert code == 0
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert "task created" in captured.err
    assert payload["task"]["priority"] == "Medium"
    assert payload["task"]["recurrence_pattern"] == "Undetermined"


def test_cli_add_bad_date_uses_locale(tmp_path: Path, capsys: Any) -> None:
    db = tmp_path / "cli.json"
    code = _run(["add", "--title", "x", "--due", "20-07-2025", "--db", str(db), "--locale", "vi"])
    assert code == 1
    assert "Ngày đến hạn không hợp lệ" in capsys.readouterr().err
    assert not db.exists()


def test_cli_without_command_prints_help(capsys: Any) -> None:
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_cli_demo_stdout_carries_only_messages(
    tmp_path: Path, capsys: Any, captured_loggers: None
) -> None:
    assert _run(["demo", "--db", str(tmp_path / "demo.json")]) == 0
    captured = capsys.readouterr()
    assert '"msg"' not in captured.out
    assert "task rejected" in captured.err
