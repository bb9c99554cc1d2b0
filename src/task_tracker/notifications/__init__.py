# src/task_tracker/notifications/__init__.py
