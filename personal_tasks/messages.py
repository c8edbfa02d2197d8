from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_LOCALE = "en"

_EN: dict[str, str] = {
    "title_empty": "Error: title must not be empty.",
    "due_date_empty": "Error: due date must not be empty.",
    "due_date_invalid": "Error: invalid due date. Please use the YYYY-MM-DD format.",
    "priority_invalid": "Error: invalid priority: {value}",
    "duplicate": "Error: task '{title}' already exists with the same due date.",
    "save_failed": "Error: could not write the task store: {reason}",
    "load_failed": "Error: the task store could not be loaded safely: {reason}",
    "description_invalid": "Error: description must be text.",
    "created": "Added new task with ID: {task_id}",
    "demo_valid": "Adding a valid task:",
    "demo_duplicate": "Adding a duplicate task:",
    "demo_recurring": "Adding a recurring task:",
    "demo_empty_title": "Adding a task with an empty title:",
}

_VI: dict[str, str] = {
    "title_empty": "Lỗi: Tiêu đề không được để trống.",
    "due_date_empty": "Lỗi: Ngày đến hạn không được để trống.",
    "due_date_invalid": "Lỗi: Ngày đến hạn không hợp lệ. Vui lòng sử dụng định dạng YYYY-MM-DD.",
    "priority_invalid": "Lỗi: Mức độ ưu tiên không hợp lệ: {value}",
    "duplicate": "Lỗi: Nhiệm vụ '{title}' đã tồn tại với cùng ngày đến hạn.",
    "save_failed": "Lỗi khi ghi vào file database: {reason}",
    "load_failed": "Lỗi khi đọc file database: {reason}",
    "description_invalid": "Lỗi: Mô tả phải là văn bản.",
    "created": "Đã thêm nhiệm vụ mới thành công với ID: {task_id}",
    "demo_valid": "Thêm nhiệm vụ hợp lệ:",
    "demo_duplicate": "Thêm nhiệm vụ trùng lặp:",
    "demo_recurring": "Thêm nhiệm vụ lặp lại:",
    "demo_empty_title": "Thêm nhiệm vụ với tiêu đề rỗng:",
}

CATALOGS: dict[str, Mapping[str, str]] = {"en": _EN, "vi": _VI}


@dataclass(slots=True, frozen=True)
class Messages:
    """User-facing message templates for one locale.

    Missing keys fall back to the English catalog so partial translations stay usable.
    """

    locale: str
    templates: Mapping[str, str]

    def format(self, key: str, **values: object) -> str:
        template = self.templates.get(key) or _EN[key]
        return template.format(**values)


def get_messages(locale: str | None = None) -> Messages:
    name = (locale or DEFAULT_LOCALE).strip().lower()
    if name not in CATALOGS:
        name = DEFAULT_LOCALE
    return Messages(locale=name, templates=CATALOGS[name])


__all__ = ["CATALOGS", "DEFAULT_LOCALE", "Messages", "get_messages"]
