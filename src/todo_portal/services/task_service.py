import logging
from typing import List, Optional
from todo_portal.domain.task_models import Task
from todo_portal.infra.task_store import TaskStore

logger = logging.getLogger("todo.tasks")

class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def create_task(self, title: str, request_id: Optional[str] = None) -> Task:
        task = self.store.create(title)
        logger.info("task.create", extra={"category": "tasks", "event": "task.create", "request_id": request_id, "task_id": task.id, "title": title})
        return task

    def list_tasks(self) -> List[Task]:
        return self.store.list()

    def toggle_task(self, task_id: int, request_id: Optional[str] = None) -> bool:
        found = self.store.toggle(task_id)
        logger.info("task.toggle", extra={"category": "tasks", "event": "task.toggle", "request_id": request_id, "task_id": task_id, "found": found})
        return found

    def delete_task(self, task_id: int, request_id: Optional[str] = None) -> bool:
        found = self.store.delete(task_id)
        logger.info("task.delete", extra={"category": "tasks", "event": "task.delete", "request_id": request_id, "task_id": task_id, "found": found})
        return found
