"""
Todo App: Package Initializer
=============================

What: Marks `todoapp` as a Python package and carries the release version.
Who:  Imported by uvicorn (`todoapp.main:app`), the CLI (`python -m todoapp`)
      and the test suite.

Layout:

    ┌─────────────────────────────────────┐
    │     Middleware (guards, tracing)    │  ← cross-cutting, per request
    ├─────────────────────────────────────┤
    │          Routes (API layer)         │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Schemas (payloads)          │  ← pydantic models
    └─────────────────────────────────────┘

    There is no persistence layer: every request is handled in isolation and
    nothing survives past its response.
"""

__version__ = "0.3.0"
