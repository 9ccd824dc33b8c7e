"""
Todo App: Application Configuration
===================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading, validated once at startup.
How:   Pydantic Settings reads from environment variables (or a .env file)
       and exposes a module-level `settings` singleton. The app factories
       also accept an explicit `Settings` instance, which is what the tests
       use.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from todoapp.log import parse_log_filter

# 2 MiB: largest Content-Length the content-length guard lets through
DEFAULT_MAX_CONTENT_LENGTH = 2 * 1024 * 1024


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Defaults reproduce the tutorial setup: loopback bind on port 3000,
    debug output for the service and its access log, and the placeholder
    shared secret.
    """

    # ── Server ────────────────────────────────────────────────────────────
    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=3000, ge=1, le=65535)

    # ── Logging ───────────────────────────────────────────────────────────
    # Comma-separated directives, see todoapp.log for the syntax
    log_filter: str = Field(default="todoapp=DEBUG,todoapp.access=DEBUG")

    @field_validator("log_filter")
    @classmethod
    def validate_log_filter(cls, v: str) -> str:
        """Rejects filters naming unknown levels so startup fails loudly."""
        parse_log_filter(v)
        return v

    # ── Guards ────────────────────────────────────────────────────────────
    # What: Upper bound on the declared Content-Length, in bytes
    # Note: The header is checked, not the body; a body is never read here
    max_content_length: int = Field(default=DEFAULT_MAX_CONTENT_LENGTH, ge=0, le=2**63 - 1)

    # What: When True, a Content-Length that is not a non-negative integer
    # is rejected with 400 instead of being passed through
    reject_malformed_content_length: bool = Field(default=False)

    # What: Shared secret expected verbatim in the Authorization header
    # Placeholder scheme; swap the verifier in create_app() for real tokens
    auth_secret: str = Field(default="GBA", min_length=1)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
