# src/task_tracker/prefs/__init__.py
