# src/task_tracker/ui/__init__.py
