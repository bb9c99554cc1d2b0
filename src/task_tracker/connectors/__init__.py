# src/task_tracker/connectors/__init__.py
