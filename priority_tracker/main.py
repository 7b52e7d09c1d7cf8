from __future__ import annotations

import logging
import sys

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from priority_tracker.config import Settings, load_settings
from priority_tracker.domain.enums import Priority, Quadrant
from priority_tracker.infra.blob_store import SqlBlobStore
from priority_tracker.infra.db import build_engine, build_session_factory, init_db
from priority_tracker.infra.logging import setup_logging
from priority_tracker.services.task_store import TaskStore

logger = logging.getLogger(__name__)


def build_task_store(settings: Settings) -> TaskStore:
    engine = build_engine(settings.database_url)
    init_db(engine)
    blob_store = SqlBlobStore(build_session_factory(engine))
    return TaskStore(blob_store, key=settings.storage_key)


def _log_summary(store: TaskStore) -> None:
    for priority in Priority:
        logger.info(
            "Priority %s (%s): %s open",
            priority.value,
            priority.description,
            store.count_by_priority(priority),
        )
    for quadrant in Quadrant:
        logger.info("%s: %s open", quadrant.title, store.count_by_quadrant(quadrant))
    logger.info("Stats: %s", store.get_stats())


def main() -> int:
    settings = load_settings()
    setup_logging(settings)
    try:
        store = build_task_store(settings)
    except SQLAlchemyError:
        logger.exception(
            "Database is not reachable at %s",
            make_url(settings.database_url).render_as_string(hide_password=True),
        )
        return 1

    _log_summary(store)
    return 0


if __name__ == "__main__":
    sys.exit(main())
