from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, LargeBinary, String

from .db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskBlobModel(Base):
    __tablename__ = "task_blobs"

    key = Column(String(100), primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
