"""
Todo App: Guard Chain Middleware
================================

What:  Runs the ordered guard list in front of every routed request.
How:   Starlette middleware that builds nothing itself: it asks
       `run_guards()` for an outcome and either answers with the rejection
       or calls the next layer.

Route scoping:
    Guards only apply to requests that match a route. A request for an
    unmapped (method, path) goes straight to the router and gets its 404,
    with or without credentials, so the 404 never depends on who asks.
"""

from typing import Sequence

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match

from todoapp.pipeline import Guard, Reject, run_guards


def matches_route(request: Request) -> bool:
    """True when some route of the receiving app fully matches the request."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return True
    return False


class GuardChainMiddleware(BaseHTTPMiddleware):
    """
    Applies `guards` in order; the first rejection ends the request.

    Downstream layers (tracing, router, handler) never run for a rejected
    request.
    """

    def __init__(self, app, guards: Sequence[Guard] = (), **kwargs):
        super().__init__(app, **kwargs)
        self.guards = tuple(guards)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not matches_route(request):
            return await call_next(request)

        outcome = run_guards(self.guards, request)
        if isinstance(outcome, Reject):
            return outcome.to_response()

        return await call_next(outcome.request)
