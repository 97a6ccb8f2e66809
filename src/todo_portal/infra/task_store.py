from __future__ import annotations
from typing import List

from todo_portal.domain.task_models import Task
from todo_portal.infra.locks import ReadWriteLock


class TaskStore:
    """
    In-memory task collection shared by every request thread.

    Tasks keep insertion order. IDs start at 1 and are never reused.
    Reads take the shared side of the lock, mutations the exclusive side,
    and callers only ever get copies of the stored tasks.
    """
    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = ReadWriteLock()

    def create(self, title: str) -> Task:
        with self._lock.write_locked():
            task = Task(id=self._next_id, title=title, completed=False)
            self._tasks.append(task)
            self._next_id += 1
            return task.model_copy()

    def list(self) -> List[Task]:
        with self._lock.read_locked():
            return [t.model_copy() for t in self._tasks]

    def toggle(self, task_id: int) -> bool:
        with self._lock.write_locked():
            for task in self._tasks:
                if task.id == task_id:
                    task.completed = not task.completed
                    return True
            return False

    def delete(self, task_id: int) -> bool:
        with self._lock.write_locked():
            for i, task in enumerate(self._tasks):
                if task.id == task_id:
                    del self._tasks[i]
                    return True
            return False

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)
