from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from personal_tasks.errors import IOFailure
from personal_tasks.models.task import Task
from personal_tasks.observability import get_json_logger

DEFAULT_DB_PATH = "tasks_database.json"


class TaskStore:
    """Pluggable task store interface.

    Implementations read and write the whole collection at once and must call
    `super().__init__()`. `lock` serializes a load-modify-save cycle within one process.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()

    def load(self) -> list[Task]:  # pragma: no cover - interface only
        raise NotImplementedError

    def save(self, tasks: Sequence[Task]) -> None:  # pragma: no cover - interface only
        raise NotImplementedError


class JsonTaskStore(TaskStore):
    """Task store backed by a single JSON array file.

    - `load` treats a missing, unreadable, or malformed file as an empty store and
      raises IOFailure when an element of the array is not a valid task
    - `save` writes a temp file beside the target and swaps it in with `os.replace`
    """

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_DB_PATH) -> None:
        super().__init__()
        self.path = Path(path)
        self._logger = get_json_logger("personal_tasks.store")

    def load(self) -> list[Task]:
        with self.lock:
            try:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError:
                self._logger.debug(
                    "store missing; starting empty",
                    extra={"event": "store_missing", "store": str(self.path)},
                )
                return []
            except (OSError, UnicodeDecodeError) as e:
                return self._unreadable("read_error", e)
            except json.JSONDecodeError as e:
                return self._unreadable("malformed_json", e)
            if not isinstance(data, list):
                return self._unreadable("not_an_array", None)
            try:
                return [Task.model_validate(item) for item in data]
            except ValidationError as e:
                # Never drop records: the caller must not save over this file
                self._logger.error(
                    "store has invalid records",
                    extra={
                        "event": "store_error",
                        "store": str(self.path),
                        "reason": "invalid_record",
                        "metadata": {"error": str(e)[:200]},
                    },
                )
                count = e.error_count()
                raise IOFailure(f"invalid record in {self.path}: {count} error(s)") from e

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False, indent=2)
        with self.lock:
            tmp_name: str | None = None
            try:
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
                tmp_name = None
            except OSError as e:
                self._logger.error(
                    "store write failed",
                    extra={"event": "store_error", "store": str(self.path), "reason": str(e)},
                )
                raise IOFailure(str(e)) from e
            finally:
                if tmp_name is not None:
                    try:
                        os.unlink(tmp_name)
                    except OSError:
                        pass
        self._logger.debug(
            "store saved",
            extra={"event": "store_saved", "store": str(self.path), "count": len(tasks)},
        )

    def _unreadable(self, reason: str, exc: Exception | None) -> list[Task]:
        # An unreadable store is reported as empty; the next save overwrites it
        self._logger.warning(
            "store unreadable; treating as empty",
            extra={
                "event": "store_unreadable",
                "store": str(self.path),
                "reason": reason,
                "metadata": {"error": str(exc)[:200]} if exc is not None else {},
            },
        )
        return []


__all__ = ["DEFAULT_DB_PATH", "TaskStore", "JsonTaskStore"]
