"""
Todo App: Authorization Guard
=============================

What:  Lets a request through only when its Authorization header passes a
       credential check.
How:   The guard knows nothing about credentials; it hands the raw header
       value to a `verify(credential) -> bool` callable. The default
       verifier compares against one shared secret.

Why a verifier callable:
    The shared secret is a placeholder. Replacing it with real token
    validation (JWT, API keys, an introspection call) only means passing a
    different `verify` to create_app(); the pipeline wiring stays the same.
"""

import hmac
import logging
from typing import Callable

from starlette.requests import Request

from todoapp.pipeline import Continue, GuardOutcome, Reject

CredentialVerifier = Callable[[str], bool]


def shared_secret(secret: str) -> CredentialVerifier:
    """
    Build a verifier accepting exactly `secret` (case-sensitive, no trimming).

    Comparison runs in constant time so the secret cannot be recovered from
    response timing.
    """
    expected = secret.encode("utf-8")

    def verify(credential: str) -> bool:
        return hmac.compare_digest(credential.encode("utf-8"), expected)

    return verify


class AuthorizationGuard:
    """Guard answering 401 Unauthorized to missing or rejected credentials."""

    def __init__(self, verify: CredentialVerifier, logger: logging.Logger):
        self.verify = verify
        self.logger = logger

    def __call__(self, request: Request) -> GuardOutcome:
        credential = request.headers.get("authorization")

        if credential is not None and self.verify(credential):
            return Continue(request)

        # Never log the credential itself
        self.logger.debug(
            "Authorization %s for %s %s",
            "missing" if credential is None else "rejected",
            request.method,
            request.url.path,
        )
        return Reject(401)
