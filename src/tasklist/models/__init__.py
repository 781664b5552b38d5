"""Task models for Tasklist."""

from .task import Task, SEED_TASKS

__all__ = [
    "Task",
    "SEED_TASKS"
]
