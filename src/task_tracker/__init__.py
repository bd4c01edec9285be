"""
task_tracker: task entity model + fail-soft JSON persistence.

Public API:
- Task, Priority, ValidationError: the task entity and its validation error
- StorageManager: namespaced JSON save/load over a key-value backend
- InMemoryBackend, SQLiteBackend: backends StorageManager can run over
- save_tasks, load_tasks: whole-collection helpers
"""

from __future__ import annotations

from .storage.backends import (
    InMemoryBackend,
    KeyValueBackend,
    QuotaExceededError,
    SQLiteBackend,
    StorageError,
)
from .storage.storage_manager import DEFAULT_STORAGE_KEY, StorageManager
from .tasks.task_api import TASKS_KEY, load_tasks, save_tasks
from .tasks.task_models import Priority, Task, ValidationError

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "InMemoryBackend",
    "KeyValueBackend",
    "Priority",
    "QuotaExceededError",
    "SQLiteBackend",
    "StorageError",
    "StorageManager",
    "TASKS_KEY",
    "Task",
    "ValidationError",
    "load_tasks",
    "save_tasks",
]
