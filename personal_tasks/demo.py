from __future__ import annotations

from collections.abc import Callable

from personal_tasks.creator import CreateResult, TaskCreator
from personal_tasks.models.task import Priority


def run_demo(creator: TaskCreator, out: Callable[[str], object] = print) -> list[CreateResult]:
    """Walk through the success, duplicate, recurring, and empty-title paths."""
    msgs = creator.messages
    calls: list[tuple[str, tuple[str, str, str, Priority | str, bool]]] = [
        ("demo_valid", ("Buy book", "Software Engineering book", "2025-07-20", "High", False)),
        (
            "demo_duplicate",
            ("Buy book", "Software Engineering book", "2025-07-20", Priority.HIGH, False),
        ),
        ("demo_recurring", ("Exercise", "Gym 1h", "2025-07-21", "Medium", True)),
        ("demo_empty_title", ("", "No title", "2025-07-22", "Low", False)),
    ]
    results: list[CreateResult] = []
    for heading, args in calls:
        out("")
        out(msgs.format(heading))
        result = creator.create_task(*args)
        out(result.message)
        results.append(result)
    return results


__all__ = ["run_demo"]
