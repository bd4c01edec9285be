# src/task_tracker/storage/storage_manager.py

from __future__ import annotations

import json
import logging
from typing import Any

from .backends import InMemoryBackend, KeyValueBackend

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "taskManagementApp"
_PROBE_KEY = "__storage_test__"


class StorageManager:
    """
    Namespaced JSON persistence over a synchronous key-value backend.

    Every public method is fail-soft: backend errors, quota problems and
    corrupted payloads are logged and turned into False / the default value.
    Nothing here raises to the caller, so the application keeps working
    in memory when persistence is gone.

    Diagnostics go to `logger` (the module logger unless one is injected).
    """

    def __init__(
        self,
        storage_key: str = DEFAULT_STORAGE_KEY,
        backend: KeyValueBackend | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.storage_key = storage_key
        self._backend: KeyValueBackend = backend if backend is not None else InMemoryBackend()
        self._log = logger if logger is not None else logging.getLogger(__name__)
        self.is_available = self._check_storage_availability()
        self._log.debug(
            "StorageManager ready key=%s available=%s", self.storage_key, self.is_available
        )

    @property
    def prefix(self) -> str:
        return f"{self.storage_key}_"

    def _full_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def _check_storage_availability(self) -> bool:
        try:
            self._backend.set_item(_PROBE_KEY, "test")
            self._backend.remove_item(_PROBE_KEY)
            return True
        except Exception:
            self._log.debug("Storage probe failed.", exc_info=True)
            return False

    # ---- public API ----

    def save(self, key: str, value: Any) -> bool:
        if not self.is_available:
            self._log.warning("Storage not available, data will not persist (key=%s)", key)
            return False

        try:
            payload = json.dumps(value, ensure_ascii=False, allow_nan=False)
            self._backend.set_item(self._full_key(key), payload)
            return True
        except Exception:
            self._log.exception("Failed to save data key=%s", key)
            return False

    def load(self, key: str, default: Any = None) -> Any:
        if not self.is_available:
            return default

        try:
            raw = self._backend.get_item(self._full_key(key))
            if raw is None:
                return default
            return json.loads(raw)
        except Exception:
            self._log.exception("Failed to load data key=%s", key)
            return default

    def remove(self, key: str) -> bool:
        if not self.is_available:
            return False

        try:
            self._backend.remove_item(self._full_key(key))
            return True
        except Exception:
            self._log.exception("Failed to remove data key=%s", key)
            return False

    def clear(self) -> bool:
        """
        Remove every key in this namespace; other keys are left alone.

        Matches on `storage_key + "_"`, not the bare key, so "appBackup" survives
        clearing namespace "app".
        """
        if not self.is_available:
            return False

        try:
            # Snapshot keys before deleting.
            doomed = [k for k in self._backend.keys() if k.startswith(self.prefix)]
            for k in doomed:
                self._backend.remove_item(k)
            self._log.debug("Cleared %s keys from namespace %s", len(doomed), self.storage_key)
            return True
        except Exception:
            self._log.exception("Failed to clear data namespace=%s", self.storage_key)
            return False

    def get_storage_info(self) -> dict[str, Any]:
        """
        Usage stats for the whole store and for this namespace.

        Sizes are character counts of key + value.
        """
        if not self.is_available:
            return {"available": False}

        try:
            total_size = 0
            app_size = 0
            keys = self._backend.keys()
            for k in keys:
                value = self._backend.get_item(k) or ""
                item_size = len(k) + len(value)
                total_size += item_size
                if k.startswith(self.prefix):
                    app_size += item_size

            return {
                "available": True,
                "total_size": total_size,
                "app_size": app_size,
                "item_count": len(keys),
            }
        except Exception as e:
            self._log.exception("Failed to get storage info")
            return {"available": False, "error": str(e)}
