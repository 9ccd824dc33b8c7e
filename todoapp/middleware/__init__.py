"""
Todo App: Middleware Package
============================

What:  The guard pipeline wrapped around the router.

Middleware Chain (order matters!):
    Request → [Content-Length] → [Authorization] → [Tracing] → Route Handler

    Why this order:
    1. Content-Length FIRST: cheapest check, and the one an attacker can
       abuse before anything else runs
    2. Authorization: identity check, only for requests of acceptable size
    3. Tracing: only requests that survived the guards are logged

    The two guards run inside one GuardChainMiddleware, as an explicit list;
    tracing is its own middleware registered inside it.

    Responses unwind in reverse:
    Response ← [Guards] ← [Tracing] ← Route Handler
"""

from todoapp.middleware.authorization import AuthorizationGuard, shared_secret
from todoapp.middleware.content_length import ContentLengthGuard
from todoapp.middleware.guards import GuardChainMiddleware
from todoapp.middleware.tracing import TracingMiddleware, trace_id_var

__all__ = [
    "AuthorizationGuard",
    "ContentLengthGuard",
    "GuardChainMiddleware",
    "TracingMiddleware",
    "shared_secret",
    "trace_id_var",
]
