# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Storage
    "TASK_TRACKER_DATA_DIR": "Local data directory, also holds the log file (default: .local/task_tracker).",
    "TASK_TRACKER_STORAGE_KEY": "Namespace prefix for stored keys (default: taskManagementApp).",
    "TASK_TRACKER_STORAGE_DB_PATH": "SQLite key-value file (default: <data_dir>/storage.sqlite3).",
    # Dev server
    "TASK_TRACKER_HOST": "Bind address (default: 0.0.0.0).",
    "TASK_TRACKER_PORT": "Port; falls back to PORT, then 3000.",
    "TASK_TRACKER_PUBLIC_DIR": "Static files served at / (default: web/public).",
    "TASK_TRACKER_SOURCE_DIR": "Script sources served at /src (default: web/src).",
}
