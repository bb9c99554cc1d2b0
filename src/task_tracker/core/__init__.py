# src/task_tracker/core/__init__.py
