from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .classification import display_label, quadrant_for
from .enums import Priority, Quadrant
from .errors import TaskValidationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # naive timestamps are taken to be UTC
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class Task:
    title: str
    notes: str = ""
    priority: Priority = Priority.C
    is_urgent: bool = False
    is_important: bool = False
    due_date: Optional[datetime] = None
    is_completed: bool = False
    created_date: datetime = field(default_factory=utcnow)
    sub_priority: int | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "created_date", as_utc(self.created_date))
        if self.due_date is not None:
            object.__setattr__(self, "due_date", as_utc(self.due_date))
        if self.sub_priority is None:
            return
        if self.priority != Priority.A:
            raise TaskValidationError(
                f"sub_priority is only allowed for priority A, got {self.priority.value}"
            )
        if self.sub_priority < 1:
            raise TaskValidationError("sub_priority must be a positive integer")

    @property
    def quadrant(self) -> Quadrant:
        return quadrant_for(self.is_urgent, self.is_important)

    @property
    def display_label(self) -> str:
        return display_label(self.priority, self.sub_priority)

    def is_overdue(self, now: datetime | None = None) -> bool:
        if self.due_date is None or self.is_completed:
            return False
        return self.due_date < as_utc(now or utcnow())
