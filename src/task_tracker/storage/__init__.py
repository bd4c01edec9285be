"""
Storage subsystem.

Components:
- backends.py: synchronous string key-value backends (in-memory, SQLite)
- storage_manager.py: namespaced, fail-soft JSON persistence over a backend
"""
