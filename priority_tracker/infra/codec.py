"""JSON wire format for the persisted task list.

The blob is a single array of camelCase records::

    [{"id": "...", "title": "...", "notes": "", "priority": "A",
      "isUrgent": true, "isImportant": true, "dueDate": null,
      "isCompleted": false, "createdDate": "2026-01-01T09:00:00+00:00",
      "subPriority": 1}]

Timestamps are ISO-8601; naive values are read as UTC.
"""
from __future__ import annotations

import json
import uuid
from datetime import datetime
from typing import Any, Iterable, Optional

from priority_tracker.domain.entities import Task, as_utc
from priority_tracker.domain.enums import Priority
from priority_tracker.domain.errors import TaskDecodeError, TaskValidationError


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TaskDecodeError(f"Expected ISO-8601 string, got {value!r}")
    return as_utc(datetime.fromisoformat(value))


def _require(record: dict, name: str, kind: type) -> Any:
    value = record.get(name)
    # bool is a subclass of int; never accept it where a number is expected
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TaskDecodeError(f"Field {name!r} must be {kind.__name__}, got {value!r}")
    return value


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": str(task.id),
        "title": task.title,
        "notes": task.notes,
        "priority": task.priority.value,
        "isUrgent": task.is_urgent,
        "isImportant": task.is_important,
        "dueDate": _format_datetime(task.due_date),
        "isCompleted": task.is_completed,
        "createdDate": _format_datetime(task.created_date),
        "subPriority": task.sub_priority,
    }


def task_from_dict(record: Any) -> Task:
    if not isinstance(record, dict):
        raise TaskDecodeError(f"Task record must be an object, got {type(record).__name__}")
    sub_priority = record.get("subPriority")
    if sub_priority is not None:
        sub_priority = _require(record, "subPriority", int)
    created_date = _parse_datetime(_require(record, "createdDate", str))
    try:
        return Task(
            id=uuid.UUID(_require(record, "id", str)),
            title=_require(record, "title", str),
            notes=_require(record, "notes", str),
            priority=Priority(_require(record, "priority", str)),
            is_urgent=_require(record, "isUrgent", bool),
            is_important=_require(record, "isImportant", bool),
            due_date=_parse_datetime(record.get("dueDate")),
            is_completed=_require(record, "isCompleted", bool),
            created_date=created_date,
            sub_priority=sub_priority,
        )
    except TaskValidationError as exc:
        raise TaskDecodeError(str(exc)) from exc


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    payload = [task_to_dict(task) for task in tasks]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def decode_tasks(blob: bytes) -> list[Task]:
    try:
        payload = json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise TaskDecodeError(f"Malformed task blob: {exc}") from exc
    if not isinstance(payload, list):
        raise TaskDecodeError("Task blob must hold a JSON array")
    try:
        return [task_from_dict(record) for record in payload]
    except ValueError as exc:
        # bad UUID, unknown priority letter or unparsable timestamp
        raise TaskDecodeError(f"Malformed task record: {exc}") from exc
