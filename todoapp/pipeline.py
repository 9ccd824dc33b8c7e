"""
Todo App: Guard Pipeline
========================

What:  The outcome type every guard returns and the function that runs an
       ordered list of guards with short-circuit semantics.
Why:   Guards stay plain functions of a single request: no framework
       callbacks, no awaiting, nothing shared between requests. That makes
       each one testable on its own and makes the chain order explicit data
       instead of an accident of middleware registration.

Contract:
    Guard = Callable[[Request], GuardOutcome]

    Continue(request)        → hand the (possibly replaced) request on
    Reject(status, body)     → stop here and answer with this status

    run_guards([g1, g2, g3], request)

        g1 ─Continue─▶ g2 ─Continue─▶ g3 ─Continue─▶ Continue(request)
         │              │              │
       Reject         Reject         Reject
         ▼              ▼              ▼
     (g2, g3 are never called once an earlier guard rejects)
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Union

from starlette.requests import Request
from starlette.responses import Response


@dataclass(frozen=True)
class Continue:
    """The guard accepts the request; downstream stages receive `request`."""

    request: Request


@dataclass(frozen=True)
class Reject:
    """
    The guard refuses the request.

    The body defaults to empty: rejected clients only ever learn the status.
    """

    status_code: int
    body: bytes = b""

    def to_response(self) -> Response:
        return Response(content=self.body, status_code=self.status_code)


GuardOutcome = Union[Continue, Reject]
Guard = Callable[[Request], GuardOutcome]


def run_guards(guards: Sequence[Guard], request: Request) -> GuardOutcome:
    """
    Run `guards` in order, stopping at the first rejection.

    Each guard sees the request returned by the previous one. An empty
    sequence accepts everything.
    """
    for guard in guards:
        outcome = guard(request)
        if isinstance(outcome, Reject):
            return outcome
        request = outcome.request
    return Continue(request)
