"""In-memory task storage."""

from .memory import TaskStore, get_store, task_store

__all__ = ["TaskStore", "get_store", "task_store"]
