from pathlib import Path
from typing import Optional
import logging

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import TemplateNotFound
from starlette.templating import Jinja2Templates

from todo_portal.app.errors import install_error_handlers
from todo_portal.app.middleware.access_log import AccessLogMiddleware
from todo_portal.app.routes import tasks
from todo_portal.infra.task_store import TaskStore
from todo_portal.observability.logging import setup_logging
from todo_portal.services.task_service import TaskService

BASE_DIR = Path(__file__).resolve().parent
HOST = "0.0.0.0"
PORT = 8080
logger = logging.getLogger("todo.system")


def create_app(store: Optional[TaskStore] = None, templates_dir: Optional[Path] = None) -> FastAPI:
    setup_logging()

    app = FastAPI(title="Todo Portal")
    app.add_middleware(AccessLogMiddleware)
    install_error_handlers(app)

    # Static files (JS)
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    # One store for the life of the process
    app.state.task_service = TaskService(store if store is not None else TaskStore())
    templates = Jinja2Templates(directory=str(templates_dir or BASE_DIR / "templates"))

    app.include_router(tasks.router)

    # Pages
    @app.get("/", response_class=HTMLResponse)
    def home(request: Request, svc: TaskService = Depends(tasks.get_service)):
        try:
            return templates.TemplateResponse(request, "index.html", {"tasks": svc.list_tasks()})
        except TemplateNotFound:
            logger.error("page.missing", extra={"category": "system", "event": "page.missing", "template": "index.html"})
            raise HTTPException(status_code=404, detail="Not Found")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def serve() -> None:
    logger.info(
        "system.start",
        extra={"category": "system", "event": "system.start", "url": f"http://localhost:{PORT}"},
    )
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)
