"""
In-memory task store
"""

import logging
import threading
from typing import List, Optional

from ..errors import ValidationError
from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Holds every task of the running process, in insertion order."""

    def __init__(self):
        self._tasks = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def get_by_id(self, task_id: Optional[int]) -> Optional[Task]:
        if task_id is None:
            return None
        with self._lock:
            return self._tasks.get(task_id)

    def create(self, title: Optional[str], completed: Optional[bool] = None) -> Task:
        if not title:
            raise ValidationError("title must not be empty")
        with self._lock:
            task = Task(id=self._next_id, title=title, completed=bool(completed))
            self._tasks[task.id] = task
            self._next_id += 1
        logger.info(f"Created task {task.id}")
        return task

    def update(
        self,
        task_id: Optional[int],
        title: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Optional[Task]:
        """Apply the given fields to a task. Omitted (None) fields stay as they are."""
        if task_id is None:
            return None
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            if title is not None and not title:
                raise ValidationError("title must not be empty")
            if title is not None:
                task.title = title
            if completed is not None:
                task.completed = completed
        logger.info(f"Updated task {task_id}")
        return task

    def delete_by_id(self, task_id: int) -> None:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is not None:
            logger.info(f"Deleted task {task_id}")
