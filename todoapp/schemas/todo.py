"""
Todo App: Payload Schemas
=========================

What:  Pydantic models for the JSON echo body and the /rand query string.
Why:   FastAPI validates incoming data against these and serializes the
       echo response from them.

Round-trip:
    A Todo is decoded and re-encoded with no defaults, no normalization and
    no checks beyond "both fields are strings". The values come back
    unchanged; the output is always in declaration order (`title`, then
    `description`) with compact separators, whatever order the input used.
    A body already in that form, such as

        {"title":"foo","description":"Bar ja bulle!"}

    comes back byte for byte. Unknown keys are dropped.
"""

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """A todo item. Has no identity and is never stored."""

    title: str
    description: str


class RangeParameters(BaseModel):
    """
    Bounds for GET /rand, sampled as the half-open interval `[start, end)`.

    Both bounds are non-negative; `start < end` is checked by the handler
    so the failure maps to InvalidRangeError rather than a schema error.
    """

    start: int = Field(ge=0, description="Inclusive lower bound")
    end: int = Field(ge=0, description="Exclusive upper bound")
