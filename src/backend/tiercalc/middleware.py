"""Request ID middleware for the calculator API.

Generates a UUID4 per request, stores it in a ContextVar so error handlers can
read it without the Request object, logs the request at DEBUG, and attaches
the id as an X-Request-ID response header.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

log = logging.getLogger(__name__)

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_var.get()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request/response pair with a fresh X-Request-ID."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        req_id = str(uuid.uuid4())
        request_id_var.set(req_id)
        log.debug("%s %s [%s]", request.method, request.url.path, req_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = req_id
        return response
