"""Counts requests to the static file server."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from chirpy.admin.metrics import HitCounter

FILESERVER_PREFIX = "/app"


class FileserverHitsMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, counter: HitCounter):
        super().__init__(app)
        self._counter = counter

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        # bare "/app" only redirects to "/app/", which is counted on its own
        if path.startswith(FILESERVER_PREFIX + "/"):
            self._counter.increment()
        return await call_next(request)
