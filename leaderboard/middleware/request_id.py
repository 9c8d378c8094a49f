"""
Leaderboard Backend — Request ID Middleware
=============================================

What:  Tags every request with a correlation ID and echoes it in X-Request-ID.
Why:   A score submission that fails can be matched to its server log lines
       by the ID the client received.
How:   Reuses a client-supplied X-Request-ID header, otherwise generates one,
       and stores it in a ContextVar read by the logger and error handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request ID and exposes it to handlers and the client.

    Behavior:
        1. Use the X-Request-ID header if the client sent one
        2. Otherwise generate a short ID (first 8 chars of a UUID4)
        3. Store it in request_id_var and request.state.request_id
        4. Return it in the X-Request-ID response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
