from __future__ import annotations

import functools
import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from enum import StrEnum
from typing import Callable, Optional, Union

from priority_tracker.config import DEFAULT_STORAGE_KEY
from priority_tracker.domain.entities import Task, utcnow
from priority_tracker.domain.enums import Priority, Quadrant, TaskFilter
from priority_tracker.domain.errors import (
    DuplicateTaskError,
    TaskDecodeError,
    TaskValidationError,
)
from priority_tracker.domain.samples import sample_tasks
from priority_tracker.infra.blob_store import BlobStore
from priority_tracker.infra.codec import decode_tasks, encode_tasks

logger = logging.getLogger(__name__)

TaskRef = Union[Task, uuid.UUID]


class MutationResult(StrEnum):
    APPLIED = "applied"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILED = "persistence_failed"


def _by_priority_rank(first: Task, second: Task) -> int:
    # Sub-priority decides only when both sides carry one; any other pair
    # falls back to creation time.
    if first.sub_priority is not None and second.sub_priority is not None:
        return first.sub_priority - second.sub_priority
    if first.created_date < second.created_date:
        return -1
    if first.created_date > second.created_date:
        return 1
    return 0


def _created(task: Task) -> datetime:
    return task.created_date


def _task_id(ref: TaskRef) -> uuid.UUID:
    return ref.id if isinstance(ref, Task) else ref


class TaskStore:
    """Owns the task collection and mirrors it into one blob slot.

    Every mutation rewrites the whole collection under ``key``. On startup a
    missing or unreadable blob is replaced by the sample task set, which is
    written back straight away.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._blob_store = blob_store
        self._key = key
        self._clock = clock
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._load()

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- mutations ----

    def create(self, task: Task) -> MutationResult:
        with self._lock:
            if self._index_of(task.id) is not None:
                raise DuplicateTaskError(task.id)
            self._tasks.append(task)
            return self._persist()

    def add(
        self,
        title: str,
        notes: str = "",
        priority: Priority = Priority.C,
        is_urgent: bool = False,
        is_important: bool = False,
        due_date: Optional[datetime] = None,
        sub_priority: int | None = None,
    ) -> Task:
        title = title.strip()
        if not title:
            raise TaskValidationError("Task title is required")
        task = Task(
            title=title,
            notes=notes.strip(),
            priority=priority,
            is_urgent=is_urgent,
            is_important=is_important,
            due_date=due_date,
            created_date=self._clock(),
            sub_priority=sub_priority if priority == Priority.A else None,
        )
        if task.due_date is not None and task.due_date < task.created_date:
            raise TaskValidationError("Due date cannot be in the past")
        self.create(task)
        return task

    def update(self, task: Task) -> MutationResult:
        with self._lock:
            index = self._index_of(task.id)
            if index is None:
                logger.debug("Update skipped, unknown task id=%s", task.id)
                return MutationResult.NOT_FOUND
            # creation time is fixed once the task exists
            self._tasks[index] = replace(task, created_date=self._tasks[index].created_date)
            return self._persist()

    def edit(
        self,
        task_id: uuid.UUID,
        title: str,
        notes: str = "",
        priority: Priority = Priority.C,
        is_urgent: bool = False,
        is_important: bool = False,
        due_date: Optional[datetime] = None,
        sub_priority: int | None = None,
    ) -> Task | None:
        """Apply edited form values to an existing task.

        Title and notes are stripped and the title must stay non-empty. The
        sub-priority is cleared unless the task is in tier A, so demoting an
        A-ranked task just drops its rank. Returns the stored task, or None
        when the id is unknown.
        """
        title = title.strip()
        if not title:
            raise TaskValidationError("Task title is required")
        with self._lock:
            current = self.get(task_id)
            if current is None:
                logger.debug("Edit skipped, unknown task id=%s", task_id)
                return None
            edited = replace(
                current,
                title=title,
                notes=notes.strip(),
                priority=priority,
                is_urgent=is_urgent,
                is_important=is_important,
                due_date=due_date,
                sub_priority=sub_priority if priority == Priority.A else None,
            )
            self.update(edited)
            return edited

    def delete(self, ref: TaskRef) -> MutationResult:
        task_id = _task_id(ref)
        with self._lock:
            remaining = [task for task in self._tasks if task.id != task_id]
            if len(remaining) == len(self._tasks):
                logger.debug("Delete skipped, unknown task id=%s", task_id)
                return MutationResult.NOT_FOUND
            self._tasks = remaining
            return self._persist()

    def toggle_completion(self, ref: TaskRef) -> MutationResult:
        task_id = _task_id(ref)
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                logger.debug("Toggle skipped, unknown task id=%s", task_id)
                return MutationResult.NOT_FOUND
            current = self._tasks[index]
            self._tasks[index] = replace(current, is_completed=not current.is_completed)
            return self._persist()

    # ---- queries ----

    def get(self, task_id: uuid.UUID) -> Task | None:
        with self._lock:
            index = self._index_of(task_id)
            return self._tasks[index] if index is not None else None

    def list_by_priority(self, priority: Priority) -> list[Task]:
        with self._lock:
            matching = [
                task for task in self._tasks
                if task.priority == priority and not task.is_completed
            ]
        return sorted(matching, key=functools.cmp_to_key(_by_priority_rank))

    def list_by_quadrant(self, quadrant: Quadrant) -> list[Task]:
        with self._lock:
            matching = [
                task for task in self._tasks
                if task.quadrant == quadrant and not task.is_completed
            ]
        return sorted(matching, key=_created)

    def list_active(self) -> list[Task]:
        with self._lock:
            matching = [task for task in self._tasks if not task.is_completed]
        return sorted(matching, key=_created)

    def list_completed(self) -> list[Task]:
        with self._lock:
            matching = [task for task in self._tasks if task.is_completed]
        return sorted(matching, key=_created, reverse=True)

    def list_all(self) -> list[Task]:
        with self._lock:
            return sorted(self._tasks, key=_created, reverse=True)

    def list_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
        if task_filter == TaskFilter.ACTIVE:
            return self.list_active()
        if task_filter == TaskFilter.COMPLETED:
            return self.list_completed()
        return self.list_all()

    def list_overdue(self, now: datetime | None = None) -> list[Task]:
        now = now or self._clock()
        with self._lock:
            matching = [task for task in self._tasks if task.is_overdue(now)]
        return sorted(matching, key=lambda task: task.due_date)

    def count_by_priority(self, priority: Priority) -> int:
        return len(self.list_by_priority(priority))

    def count_by_quadrant(self, quadrant: Quadrant) -> int:
        return len(self.list_by_quadrant(quadrant))

    def get_stats(self) -> dict[str, int]:
        with self._lock:
            total = len(self._tasks)
            completed = sum(1 for task in self._tasks if task.is_completed)
        return {
            "total": total,
            "active": total - completed,
            "completed": completed,
            "overdue": len(self.list_overdue()),
        }

    # ---- persistence ----

    def _index_of(self, task_id: uuid.UUID) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _load(self) -> None:
        blob = self._blob_store.load(self._key)
        if blob is None:
            logger.info("No saved tasks under key=%s, seeding samples", self._key)
            self._seed()
            return
        try:
            self._tasks = decode_tasks(blob)
        except TaskDecodeError as exc:
            logger.warning("Discarding unreadable tasks under key=%s: %s", self._key, exc)
            self._seed()
            return
        logger.info("Loaded %s tasks from key=%s", len(self._tasks), self._key)

    def _seed(self) -> None:
        self._tasks = sample_tasks(self._clock())
        self._persist()

    def _persist(self) -> MutationResult:
        try:
            blob = encode_tasks(self._tasks)
        except (TypeError, ValueError):
            logger.exception("Failed to encode %s tasks", len(self._tasks))
            return MutationResult.PERSISTENCE_FAILED
        if not self._blob_store.save(self._key, blob):
            logger.error("Tasks under key=%s were not saved; persisted copy is stale", self._key)
            return MutationResult.PERSISTENCE_FAILED
        return MutationResult.APPLIED
