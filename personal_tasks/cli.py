from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from personal_tasks.config import TrackerConfig, load_config
from personal_tasks.creator import TaskCreator
from personal_tasks.demo import run_demo
from personal_tasks.messages import CATALOGS, get_messages
from personal_tasks.store.json_store import JsonTaskStore
from personal_tasks.tools import result_to_dict


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--db", help="Path to the JSON task store (default: $TASKS_DB_PATH)")
    p.add_argument("--locale", choices=sorted(CATALOGS), help="Message language")


def _resolve_config(args: Any) -> TrackerConfig:
    cfg = load_config()
    if getattr(args, "db", None):
        cfg.db_path = args.db
    if getattr(args, "locale", None):
        cfg.locale = args.locale
    return cfg


def _build_creator(cfg: TrackerConfig) -> TaskCreator:
    return TaskCreator(JsonTaskStore(cfg.db_path), messages=get_messages(cfg.locale))


def _cmd_demo(args: Any) -> int:
    run_demo(_build_creator(_resolve_config(args)))
    return 0


def _cmd_add(args: Any) -> int:
    creator = _build_creator(_resolve_config(args))
    result = creator.create_task(
        args.title, args.description, args.due, args.priority, args.recurring
    )
    if args.json:
        print(json.dumps(result_to_dict(result), ensure_ascii=False))
    elif result.ok:
        print(result.message)
    else:
        sys.stderr.write(result.message + "\n")
    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser("personal-tasks")
    sub = parser.add_subparsers(dest="cmd")

    p_demo = sub.add_parser("demo", help="Run the demonstration create-task calls")
    _add_common(p_demo)

    p_add = sub.add_parser("add", help="Create a task")
    p_add.add_argument("--title", required=True)
    p_add.add_argument("--description", default="")
    p_add.add_argument("--due", required=True, help="Due date as YYYY-MM-DD")
    p_add.add_argument("--priority", default="Medium", help="Low, Medium or High")
    p_add.add_argument("--recurring", action="store_true")
    p_add.add_argument("--json", action="store_true", help="Print the result as JSON")
    _add_common(p_add)

    args = parser.parse_args(argv)
    cmd = getattr(args, "cmd", None)

    if cmd == "demo":
        raise SystemExit(_cmd_demo(args))

    if cmd == "add":
        raise SystemExit(_cmd_add(args))

    # Default to help if no subcommand
    parser.print_help()


if __name__ == "__main__":
    main()
