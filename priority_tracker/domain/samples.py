from __future__ import annotations

from datetime import datetime, timedelta

from .entities import Task, utcnow
from .enums import Priority

_SAMPLES = (
    dict(
        title="Complete project proposal",
        notes="Deadline for board meeting tomorrow",
        priority=Priority.A,
        is_urgent=True,
        is_important=True,
        sub_priority=1,
    ),
    dict(
        title="Review quarterly reports",
        notes="Need to finish before Friday",
        priority=Priority.A,
        is_urgent=True,
        is_important=True,
        sub_priority=2,
    ),
    dict(
        title="Plan next quarter strategy",
        notes="Important for long-term success",
        priority=Priority.B,
        is_important=True,
    ),
    dict(
        title="Return client phone call",
        notes="Non-critical but should respond",
        priority=Priority.B,
        is_urgent=True,
    ),
    dict(
        title="Coffee with colleague",
        notes="Nice to catch up",
        priority=Priority.C,
    ),
    dict(
        title="Organize team meeting notes",
        notes="Can be delegated to assistant",
        priority=Priority.D,
    ),
)


def sample_tasks(now: datetime | None = None) -> list[Task]:
    # One millisecond apart keeps creation order equal to list order.
    base = now or utcnow()
    return [
        Task(created_date=base + timedelta(milliseconds=index), **fields)
        for index, fields in enumerate(_SAMPLES)
    ]
