# src/task_tracker/__init__.py
