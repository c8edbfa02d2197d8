from __future__ import annotations

import datetime as _dt
import re

from personal_tasks.errors import InvalidInput
from personal_tasks.messages import Messages, get_messages
from personal_tasks.models.task import Priority, lookup_priority

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def validate_title(title: object) -> bool:
    return isinstance(title, str) and bool(title.strip())


def parse_due_date(text: object, messages: Messages | None = None) -> _dt.date:
    """Parse a strict `YYYY-MM-DD` string into a calendar date.

    Raises InvalidInput(field="due_date") for empty input, any other layout,
    and dates that do not exist (e.g. 2025-02-30).
    """
    msgs = messages or get_messages()
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput(msgs.format("due_date_empty"), field="due_date")
    m = _DATE_RE.fullmatch(text.strip())
    if m is None:
        raise InvalidInput(msgs.format("due_date_invalid"), field="due_date")
    year, month, day = (int(part) for part in m.groups())
    try:
        return _dt.date(year, month, day)
    except ValueError as exc:
        raise InvalidInput(msgs.format("due_date_invalid"), field="due_date") from exc


def resolve_priority(value: Priority | str, messages: Messages | None = None) -> Priority:
    if isinstance(value, Priority):
        return value
    msgs = messages or get_messages()
    if isinstance(value, str):
        level = lookup_priority(value)
        if level is not None:
            return level
    raise InvalidInput(msgs.format("priority_invalid", value=value), field="priority")


__all__ = ["validate_title", "parse_due_date", "resolve_priority"]
