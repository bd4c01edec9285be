# tests/fakes.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from task_tracker.storage.backends import InMemoryBackend, StorageError


class SteppingClock:
    """
    Deterministic clock for unit tests.

    Every call returns the previous reading + step (first call returns start).
    """

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        self.calls += 1
        return current


class FailingBackend:
    """Backend whose every call raises, like storage disabled by the host."""

    def get_item(self, key: str) -> str | None:
        raise StorageError("storage disabled")

    def set_item(self, key: str, value: str) -> None:
        raise StorageError("storage disabled")

    def remove_item(self, key: str) -> None:
        raise StorageError("storage disabled")

    def keys(self) -> list[str]:
        raise StorageError("storage disabled")


class BrokenBackend(InMemoryBackend):
    """
    In-memory backend that passes the availability probe but fails selected
    operations afterwards ("get_item", "set_item", "remove_item", "keys").
    """

    def __init__(self, fail_on: set[str]) -> None:
        super().__init__()
        self.fail_on = set(fail_on)

    def _maybe_fail(self, op: str, key: str | None = None) -> None:
        if op in self.fail_on and key != "__storage_test__":
            raise StorageError(f"{op} failed")

    def get_item(self, key: str) -> str | None:
        self._maybe_fail("get_item", key)
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        self._maybe_fail("set_item", key)
        super().set_item(key, value)

    def remove_item(self, key: str) -> None:
        self._maybe_fail("remove_item", key)
        super().remove_item(key)

    def keys(self) -> list[str]:
        self._maybe_fail("keys")
        return super().keys()
