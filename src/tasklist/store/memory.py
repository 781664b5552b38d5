"""Lock-guarded in-memory task collection."""

import threading
from typing import Iterable, List, Optional
import logging

from tasklist.models import Task, SEED_TASKS

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered collection of tasks.

    Lookups scan by exact ``id`` and stop at the first match. Every operation
    holds the store lock, and records go in and out as copies.
    """

    def __init__(self, seed: Optional[Iterable[Task]] = None):
        self._lock = threading.Lock()
        self._tasks: List[Task] = []
        self.reset(SEED_TASKS if seed is None else seed)

    def reset(self, seed: Iterable[Task] = ()):
        """Replace the whole collection with copies of ``seed``."""
        with self._lock:
            self._tasks = [task.model_copy() for task in seed]
            logger.debug(f"Task store reset with {len(self._tasks)} tasks")

    def _index_of(self, task_id: str) -> Optional[int]:
        # Caller must hold the lock
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def list_tasks(self) -> List[Task]:
        """Return every task in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def get_task(self, task_id: str) -> Optional[Task]:
        """Return the first task with ``task_id``, or None."""
        with self._lock:
            i = self._index_of(task_id)
            if i is None:
                logger.debug(f"Task {task_id!r} not found")
                return None
            return self._tasks[i].model_copy()

    def create_task(self, task: Task) -> Task:
        """Append ``task`` as given. Ids are neither generated nor checked."""
        with self._lock:
            self._tasks.append(task.model_copy())
        logger.info(f"Created task {task.id!r} ('{task.title}')")
        return task

    def replace_task(self, task_id: str, task: Task) -> Optional[Task]:
        """Replace the first task with ``task_id`` wholesale, id included."""
        with self._lock:
            i = self._index_of(task_id)
            if i is None:
                logger.debug(f"Task {task_id!r} not found for update")
                return None
            self._tasks[i] = task.model_copy()
        if task.id != task_id:
            logger.info(f"Updated task {task_id!r} (now {task.id!r})")
        else:
            logger.info(f"Updated task {task_id!r}")
        return task

    def delete_task(self, task_id: str) -> bool:
        """Remove the first task with ``task_id``. Returns False on a miss."""
        with self._lock:
            i = self._index_of(task_id)
            if i is None:
                logger.debug(f"Task {task_id!r} not found for delete")
                return False
            del self._tasks[i]
        logger.info(f"Deleted task {task_id!r}")
        return True

    def count(self) -> int:
        """Return the number of stored tasks."""
        with self._lock:
            return len(self._tasks)


# Global task store instance
task_store = TaskStore()


def get_store() -> TaskStore:
    """Dependency for FastAPI to get the task store."""
    return task_store
