# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKTRACKER_APP_NAME": "App display name (default: task-tracker).",
    "TASKTRACKER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "TASKTRACKER_DATA_DIR": "Local data directory (default: .local/task_tracker).",
    "TASKTRACKER_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    "TASKTRACKER_DEFAULTS_PATH": "User defaults JSON path (default: <data_dir>/defaults.json).",
    "TASKTRACKER_BADGE_PATH": "Badge count file (default: <data_dir>/badge.txt).",
    # Badge
    "TASKTRACKER_BADGE_DAYS": (
        "Initial 'daysForBadge' value, written only if the user has not set one (default: 0)."
    ),
}
