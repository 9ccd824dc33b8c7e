"""
Todo App: Custom Exception Hierarchy
====================================

What:  Application-specific exceptions raised by route handlers.
How:   Each exception carries a message and an optional context dict.
       Global handlers (registered in main.py) translate them into a bare
       status code; neither the message nor the context reaches the client.

Exception Hierarchy:
    TodoAppError (base)
    ├── ValidationError          → 400 Bad Request
    │   └── InvalidRangeError    → 400 Bad Request
    └── NotFoundError            → 404 Not Found

Guard rejections are not exceptions: guards return a `Reject` outcome
(see todoapp.pipeline) and never raise.
"""

from typing import Any, Dict, Optional


class TodoAppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Description for the server log
        context:  Additional debug info (logged, never returned)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(TodoAppError):
    """Client input is well-formed HTTP but semantically unusable."""

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidRangeError(ValidationError):
    """
    Raised by GET /rand when the requested range is empty or inverted.

    Sampling from `[start, end)` requires `start < end`; `start == end`
    has no value to return.
    """

    def __init__(self, start: int, end: int):
        super().__init__(
            message=f"Empty or inverted range: start={start} must be below end={end}",
            field="start",
            context={"start": start, "end": end},
        )
        self.start = start
        self.end = end


class NotFoundError(TodoAppError):
    """The requested resource does not exist."""

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(message=f"The requested {resource} was not found", context=ctx)
