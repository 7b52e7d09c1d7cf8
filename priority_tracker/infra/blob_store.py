from __future__ import annotations

import logging
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .models import TaskBlobModel

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    def load(self, key: str) -> Optional[bytes]: ...

    def save(self, key: str, data: bytes) -> bool: ...


class SqlBlobStore:
    """Key-value blob slots kept in the ``task_blobs`` table.

    ``load`` propagates database errors; ``save`` logs them and reports
    ``False`` so a failed write never loses the caller's in-memory state.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def load(self, key: str) -> Optional[bytes]:
        with self._session_factory() as session:
            row = session.get(TaskBlobModel, key)
            return bytes(row.value) if row else None

    def save(self, key: str, data: bytes) -> bool:
        try:
            with self._session_factory() as session:
                row = session.get(TaskBlobModel, key)
                if row is None:
                    session.add(TaskBlobModel(key=key, value=data))
                else:
                    row.value = data
                session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to save blob key=%s size=%s", key, len(data))
            return False
        return True

