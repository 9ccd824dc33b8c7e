"""
Todo App: Content-Length Guard
==============================

What:  Rejects requests whose declared Content-Length exceeds a fixed limit.
Why:   The header is attacker-controlled. A client can announce a body far
       larger than available memory before sending a single byte; refusing
       on the header alone bounds the worst-case allocation without reading
       anything.
When:  First guard in the chain, before any identity check.

Reproduce by hand:

    curl --verbose -X POST http://localhost:3000/json \\
         --json '{"title":"foo", "description":"bar"}' \\
         --header 'Content-Length: 999999999999' \\
         --header 'Authorization: GBA'

    → HTTP/1.1 400 Bad Request (empty body)

Unparseable values:
    A header that is not a non-negative integer ("abc", "-1", "1.5") is
    passed through by default (fail open). `reject_malformed=True` turns
    that into a 400 as well.
"""

import logging
import re
from typing import Optional

from starlette.requests import Request

from todoapp.pipeline import Continue, GuardOutcome, Reject

# Unsigned decimal, optional leading '+', ASCII digits only
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# No 64-bit length has more significant digits than this
MAX_DIGITS = 20
# Stand-in for longer values; exceeds every accepted max_bytes
OVERSIZED = 10 ** MAX_DIGITS


def parse_content_length(raw: Optional[str]) -> Optional[int]:
    """
    Returns the header as an int, or None when absent or unparseable.

    Digit strings longer than MAX_DIGITS (leading zeros aside) are not
    converted; they come back as OVERSIZED.
    """
    if raw is None or not _UNSIGNED_INT.fullmatch(raw):
        return None
    digits = raw.lstrip("+").lstrip("0") or "0"
    if len(digits) > MAX_DIGITS:
        return OVERSIZED
    return int(digits)


class ContentLengthGuard:
    """
    Guard rejecting oversized declared bodies with 400 Bad Request.

    Args:
        max_bytes:        Largest accepted Content-Length (inclusive), below OVERSIZED
        logger:           Receives the parsed value at DEBUG on every call
        reject_malformed: Reject unparseable headers instead of failing open
    """

    def __init__(
        self,
        max_bytes: int,
        logger: logging.Logger,
        reject_malformed: bool = False,
    ):
        self.max_bytes = max_bytes
        self.logger = logger
        self.reject_malformed = reject_malformed

    def __call__(self, request: Request) -> GuardOutcome:
        raw = request.headers.get("content-length")
        content_length = parse_content_length(raw)

        self.logger.debug(
            "Content-Length %r",
            content_length,
            extra={"content_length": content_length},
        )

        if content_length is None:
            if raw is not None and self.reject_malformed:
                self.logger.debug("Rejecting malformed Content-Length %r", raw)
                return Reject(400)
            return Continue(request)

        if content_length > self.max_bytes:
            return Reject(400)

        return Continue(request)
