"""
Todo App: Test Configuration (conftest.py)
==========================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all
       tests.

Fixtures:
    ├── test_settings:  Explicit Settings, independent of the environment
    ├── pipeline_logger: The logger injected into the apps under test
    ├── make_request:   Factory for bare Starlette requests (guard unit tests)
    ├── auth_headers:   A valid Authorization header
    ├── test_client:    HTTPX AsyncClient bound to the guarded todo app
    └── hello_client:   HTTPX AsyncClient bound to the unguarded demo
"""

import logging
import os
from typing import Dict, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

# Override settings for testing BEFORE any app imports
os.environ["LOG_FILTER"] = "WARNING"

from todoapp.config import Settings  # noqa: E402
from todoapp.main import create_app, create_hello_app  # noqa: E402

TEST_LOGGER_NAME = "todoapp.test"


@pytest.fixture
def test_settings():
    return Settings(
        log_filter="WARNING",
        auth_secret="GBA",
        max_content_length=2 * 1024 * 1024,
        reject_malformed_content_length=False,
    )


@pytest.fixture
def pipeline_logger():
    """A dedicated logger so caplog assertions don't see unrelated records."""
    return logging.getLogger(TEST_LOGGER_NAME)


@pytest.fixture
def auth_headers():
    return {"Authorization": "GBA"}


@pytest.fixture
def make_request():
    """
    Builds a Starlette Request from plain values.

    Usage:
        request = make_request(headers={"Content-Length": "10"})
        outcome = guard(request)
    """

    def _make(
        headers: Optional[Dict[str, str]] = None,
        method: str = "GET",
        path: str = "/",
    ) -> Request:
        raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        scope = {
            "type": "http",
            "http_version": "1.1",
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 50000),
            "root_path": "",
            "path": path,
            "raw_path": path.encode("latin-1"),
            "query_string": b"",
            "headers": raw_headers,
        }
        return Request(scope)

    return _make


@pytest_asyncio.fixture
async def test_client(test_settings, pipeline_logger):
    """
    HTTPX AsyncClient talking to a fresh todo app through ASGITransport.

    Usage:
        async def test_root(test_client, auth_headers):
            response = await test_client.get("/", headers=auth_headers)
    """
    app = create_app(settings=test_settings, logger=pipeline_logger)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def hello_client(test_settings, pipeline_logger):
    app = create_hello_app(settings=test_settings, logger=pipeline_logger)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
