import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("todo.access")


def _fields(request: Request, event: str, **extra) -> dict:
    return {
        "category": "http",
        "event": event,
        "request_id": request.state.request_id,
        "method": request.method,
        "path": request.url.path,
        **extra,
    }


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request.state.request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        start = time.perf_counter()

        logger.info(
            "request.start",
            extra=_fields(request, "request.start", client=request.client.host if request.client else None),
        )

        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed = round((time.perf_counter() - start) * 1000, 2)
            logger.exception("request.error", extra=_fields(request, "request.error", duration_ms=elapsed))
            raise

        elapsed = round((time.perf_counter() - start) * 1000, 2)
        response.headers["X-Request-ID"] = request.state.request_id
        logger.info(
            "request.end",
            extra=_fields(request, "request.end", status_code=response.status_code, duration_ms=elapsed),
        )
        return response
