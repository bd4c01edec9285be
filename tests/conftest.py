# tests/conftest.py

from __future__ import annotations

import pytest

from task_tracker.storage.backends import InMemoryBackend
from task_tracker.storage.storage_manager import StorageManager

from .fakes import FailingBackend, SteppingClock


@pytest.fixture()
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture()
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture()
def storage(backend: InMemoryBackend) -> StorageManager:
    return StorageManager("testApp", backend)


@pytest.fixture()
def unavailable_storage() -> StorageManager:
    return StorageManager("testApp", FailingBackend())
