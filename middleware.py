# middleware.py
import logging
import os
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger("access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every completed request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # the 500 body is written further out by the server error handler
            self._log(request, 500, start_time, "-")
            raise
        self._log(request, response.status_code, start_time, response.headers.get("content-length", "-"))
        return response

    def _log(self, request: Request, status: int, start_time: float, content_length: str) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1f ms - %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            content_length,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )


class StaticFilesMiddleware:
    """Serves files from ``directory`` ahead of API routing.

    GET and HEAD requests whose path names an existing file (or a directory
    holding ``index.html``) never reach the router.
    """

    def __init__(self, app: ASGIApp, directory: str):
        self.app = app
        self.directory = os.path.realpath(directory)
        self.static = StaticFiles(directory=directory, html=True)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] == "http"
            and scope["method"] in ("GET", "HEAD")
            and self.has_file(scope["path"])
        ):
            await self.static(scope, receive, send)
            return
        await self.app(scope, receive, send)

    def has_file(self, path: str) -> bool:
        full_path = os.path.realpath(os.path.join(self.directory, path.lstrip("/")))
        if full_path != self.directory and not full_path.startswith(self.directory + os.sep):
            return False
        if os.path.isdir(full_path):
            full_path = os.path.join(full_path, "index.html")
        return os.path.isfile(full_path)
