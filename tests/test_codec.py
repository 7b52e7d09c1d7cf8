from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from priority_tracker.domain.entities import Task
from priority_tracker.domain.enums import Priority
from priority_tracker.domain.errors import TaskDecodeError
from priority_tracker.infra.codec import decode_tasks, encode_tasks


def _tasks() -> list[Task]:
    return [
        Task(
            title="Complete project proposal",
            notes="Board meeting",
            priority=Priority.A,
            is_urgent=True,
            is_important=True,
            due_date=datetime(2026, 5, 1, 17, 30, tzinfo=timezone.utc),
            created_date=datetime(2026, 4, 1, 8, 0, tzinfo=timezone.utc),
            sub_priority=1,
        ),
        Task(
            title="Café with colleague",
            is_completed=True,
            created_date=datetime(2026, 4, 2, 8, 0, tzinfo=timezone.utc),
        ),
    ]


def test_round_trip_preserves_every_field() -> None:
    tasks = _tasks()

    decoded = decode_tasks(encode_tasks(tasks))

    assert decoded == tasks
    assert encode_tasks(decoded) == encode_tasks(tasks)


def test_encoded_record_layout() -> None:
    record = json.loads(encode_tasks(_tasks()[:1]))[0]

    assert set(record) == {
        "id", "title", "notes", "priority", "isUrgent", "isImportant",
        "dueDate", "isCompleted", "createdDate", "subPriority",
    }
    assert record["priority"] == "A"
    assert record["subPriority"] == 1
    assert record["dueDate"] == "2026-05-01T17:30:00+00:00"


def test_naive_timestamps_read_as_utc() -> None:
    record = json.loads(encode_tasks(_tasks()[1:]))[0]
    record["createdDate"] = "2026-04-02T08:00:00"

    task = decode_tasks(json.dumps([record]).encode())[0]

    assert task.created_date == datetime(2026, 4, 2, 8, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "blob",
    [
        b"not json",
        b"\xff\xfe",
        b'{"tasks": []}',
        b"[1, 2]",
        b"[" * 200_000,
        b'[{"id": "nope"}]',
    ],
)
def test_malformed_blob_raises_decode_error(blob: bytes) -> None:
    with pytest.raises(TaskDecodeError):
        decode_tasks(blob)


@pytest.mark.parametrize(
    "field, value",
    [
        ("id", "not-a-uuid"),
        ("priority", "Z"),
        ("isUrgent", "yes"),
        ("subPriority", True),
        ("createdDate", "yesterday"),
        ("dueDate", 12),
    ],
)
def test_bad_field_raises_decode_error(field: str, value: object) -> None:
    record = json.loads(encode_tasks(_tasks()[:1]))[0]
    record[field] = value

    with pytest.raises(TaskDecodeError):
        decode_tasks(json.dumps([record]).encode())


def test_sub_priority_outside_tier_a_is_rejected() -> None:
    record = json.loads(encode_tasks(_tasks()[1:]))[0]
    record["subPriority"] = 2

    with pytest.raises(TaskDecodeError):
        decode_tasks(json.dumps([record]).encode())


def test_round_trip_of_naive_timestamps() -> None:
    tasks = [Task(title="x", created_date=datetime(2026, 1, 1, 8), due_date=datetime(2026, 1, 9))]

    assert decode_tasks(encode_tasks(tasks)) == tasks
