import json
import logging
import re

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from todo_portal.domain.task_models import Task, TaskCreate, TaskCreated, TaskResult
from todo_portal.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])
logger = logging.getLogger("todo.http")

TOGGLE_SUFFIX = "/toggle"
ITEM_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]

_TASK_ID = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def get_service(request: Request) -> TaskService:
    # Wired once in create_app()
    svc = getattr(request.app.state, "task_service", None)
    if svc is None:
        raise RuntimeError("TaskService not wired")
    return svc


def parse_task_id(raw: str) -> int:
    """Signed decimal that fits in 64 bits, else 400."""
    if not _TASK_ID.fullmatch(raw) or len(raw.lstrip("+-").lstrip("0")) > 19:
        raise HTTPException(status_code=400, detail="Invalid task ID")
    task_id = int(raw)
    if not _INT64_MIN <= task_id <= _INT64_MAX:
        raise HTTPException(status_code=400, detail="Invalid task ID")
    return task_id


def parse_task_create(request: Request, body: bytes) -> TaskCreate:
    # The body is JSON whatever the Content-Type header says.
    try:
        return TaskCreate.model_validate(json.loads(body))
    except (ValueError, ValidationError) as e:
        logger.info(
            "request.invalid",
            extra={
                "category": "http",
                "event": "request.invalid",
                "request_id": request.state.request_id,
                "path": request.url.path,
                "error": type(e).__name__,
            },
        )
        raise HTTPException(status_code=400, detail="Invalid JSON")


def require_method(request: Request, method: str) -> None:
    if request.method != method:
        raise HTTPException(status_code=405, detail="Method not allowed", headers={"Allow": method})


@router.get("", response_model=list[Task])
def list_tasks(svc: TaskService = Depends(get_service)):
    return svc.list_tasks()


@router.post("", response_model=TaskCreated)
async def create_task(request: Request, svc: TaskService = Depends(get_service)):
    payload = parse_task_create(request, await request.body())
    if not payload.title:
        raise HTTPException(status_code=400, detail="Title is required")
    return TaskCreated(task=svc.create_task(payload.title, request_id=request.state.request_id))


@router.api_route("/{task_path:path}", methods=ITEM_METHODS, response_model=TaskResult)
def task_item(task_path: str, request: Request, svc: TaskService = Depends(get_service)):
    """
    Everything below /api/tasks/ lands here.

    A path ending in /toggle is a toggle (PUT), anything else is a delete
    (DELETE) whose target is the rest of the path. So DELETE .../3/toggle
    is a 405 and DELETE .../3/extra is a 400.
    """
    path = "/" + task_path
    request_id = request.state.request_id
    if path.endswith(TOGGLE_SUFFIX):
        require_method(request, "PUT")
        task_id = parse_task_id(path[: -len(TOGGLE_SUFFIX)][1:])
        return TaskResult(success=svc.toggle_task(task_id, request_id=request_id))

    require_method(request, "DELETE")
    task_id = parse_task_id(task_path)
    return TaskResult(success=svc.delete_task(task_id, request_id=request_id))
