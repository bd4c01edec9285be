# src/task_tracker/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..storage.storage_manager import StorageManager
from .task_models import Clock, Task, ValidationError

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"


def save_tasks(storage: StorageManager, tasks: Iterable[Task]) -> bool:
    """Persist the whole task collection under TASKS_KEY."""
    return storage.save(TASKS_KEY, [t.to_dict() for t in tasks])


def load_tasks(storage: StorageManager, *, clock: Clock | None = None) -> list[Task]:
    """
    Load the task collection saved by save_tasks().

    Records that no longer validate are skipped (and logged) so that one
    corrupted entry does not cost the rest of the collection.
    """
    records = storage.load(TASKS_KEY, [])
    if not isinstance(records, list):
        logger.warning("Stored tasks are not a list (got %s); starting empty.", type(records).__name__)
        return []

    tasks: list[Task] = []
    for idx, record in enumerate(records):
        try:
            tasks.append(Task.from_dict(record, clock=clock))
        except ValidationError as e:
            logger.warning("Skipping stored task #%s: %s", idx, e)

    logger.debug("Loaded %s/%s tasks", len(tasks), len(records))
    return tasks
