"""
Todo App: Request Tracing Middleware
====================================

What:  Logs every request that reaches the router: once when it starts
       (method, path, client) and once when its response is ready
       (status, latency).
Why:   The only observability this service has. It is purely passive: the
       request and response pass through untouched and nothing here can
       reject a request.
When:  Installed inside the guard chain, so requests rejected by a guard
       never produce a trace entry.

Correlation:
    Each request gets a short trace id (the client's X-Request-ID when one
    is sent, otherwise 8 chars of a uuid4) stored in a ContextVar, so any
    log line emitted while the request is handled can include it.

What we log vs what we don't:
    ✅ method, path, client address, status, duration, trace id
    ❌ request body, Authorization header
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")


class TracingMiddleware(BaseHTTPMiddleware):
    """
    Structured access log for routed requests.

    Args:
        logger: Destination for trace entries (injected by the app factory)
    """

    def __init__(self, app, logger: logging.Logger, **kwargs):
        super().__init__(app, **kwargs)
        self.logger = logger

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        tid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])
        token = trace_id_var.set(tid)
        try:
            self.logger.debug(
                "started %s %s [%s] from %s",
                method,
                path,
                tid,
                client_ip,
                extra={
                    "trace_id": tid,
                    "method": method,
                    "path": path,
                    "client_ip": client_ip,
                },
            )

            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            status = response.status_code
            if status >= 500:
                log_level = logging.ERROR
            elif status >= 400:
                log_level = logging.WARNING
            else:
                log_level = logging.INFO

            self.logger.log(
                log_level,
                "finished %s %s %d %.1fms [%s]",
                method,
                path,
                status,
                duration_ms,
                tid,
                extra={
                    "trace_id": tid,
                    "method": method,
                    "path": path,
                    "status": status,
                    "duration_ms": round(duration_ms, 2),
                    "client_ip": client_ip,
                },
            )
            return response
        finally:
            trace_id_var.reset(token)
