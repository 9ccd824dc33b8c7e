"""
Todo App: FastAPI Application Factories
=======================================

What:  Builds the two applications of the tutorial series.
       - create_hello_app(): the unguarded hello-world demo
       - create_app():       the todo app, routes wrapped in the guard chain
How:   Factory functions return a configured FastAPI instance; the module
       level `app` (the todo app) is what uvicorn serves by default.

Todo app architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Guard Chain (matched routes only):                      │
    │  ┌────────────────┐ ┌───────────────┐ ┌───────────────┐  │
    │  │ Content-Length │→│ Authorization │→│    Tracing    │  │
    │  └────────────────┘ └───────────────┘ └───────────────┘  │
    │                                                          │
    │  Routes:                                                 │
    │  GET / · GET /html · GET /rand · POST /json              │
    │  GET /404 · GET /500                                     │
    │                                                          │
    │  Exception Handlers (status only, never a body):         │
    │  ValidationError→400 │ NotFound→404 │ bad body→400/422   │
    │  unmapped→404 │ unexpected→500                           │
    └──────────────────────────────────────────────────────────┘

Dependency injection:
    The logger is created once here and handed to every stage of the
    pipeline; guards and tracing hold no global logging state of their own.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncGenerator, Callable, List, Optional, Sequence

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from todoapp import __version__
from todoapp.config import Settings, settings as default_settings
from todoapp.exceptions import TodoAppError
from todoapp.log import setup_logging
from todoapp.middleware.authorization import (
    AuthorizationGuard,
    CredentialVerifier,
    shared_secret,
)
from todoapp.middleware.content_length import ContentLengthGuard
from todoapp.middleware.guards import GuardChainMiddleware
from todoapp.middleware.tracing import TracingMiddleware, trace_id_var
from todoapp.pipeline import Guard
from todoapp.routes import hello, stubs, todos

APP_LOGGER_NAME = "todoapp"


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

def make_lifespan(
    settings: Settings, logger: logging.Logger
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """Lifespan that configures logging from `settings` before serving."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.log_filter)
        logger.info(
            "%s %s listening on http://%s:%d",
            app.title,
            __version__,
            settings.server_host,
            settings.server_port,
        )
        yield
        logger.info("%s shutting down", app.title)

    return lifespan


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def validation_status(exc: RequestValidationError) -> int:
    """
    400 for unreadable input, 422 for readable input of the wrong shape.

    Unreadable: any query/path/header error, a body that is not JSON, or no
    body at all. Wrong shape: a JSON body missing a field or holding a
    field of the wrong type.
    """
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid":
            return 400
        if not loc or loc[0] != "body" or loc == ("body",):
            return 400
    return 422


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """
    Map exceptions to bare status codes.

    Clients receive a status and an empty body; whatever detail exists is
    logged server-side with the trace id.
    """

    @app.exception_handler(TodoAppError)
    async def handle_app_error(request: Request, exc: TodoAppError):
        logger.warning(
            "[%s] %s: %s | Context: %s",
            trace_id_var.get(""),
            type(exc).__name__,
            exc.message,
            exc.context,
        )
        return Response(status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        status = validation_status(exc)
        logger.warning(
            "[%s] Rejected input for %s %s (%d): %s",
            trace_id_var.get(""),
            request.method,
            request.url.path,
            status,
            [error.get("type") for error in exc.errors()],
        )
        return Response(status_code=status)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Routing is exact on (method, path): a wrong method is just unmapped
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return Response(status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, outside tracing: no trace id here
        logger.error(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            str(exc),
            exc_info=True,
        )
        return Response(status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factories
# ══════════════════════════════════════════════════════════════════════════

def build_guards(
    settings: Settings,
    logger: logging.Logger,
    verify: Optional[CredentialVerifier] = None,
) -> List[Guard]:
    """
    The todo app's guard chain, in execution order.

    Size before identity: the content-length check is the cheapest and the
    one exploitable without credentials.
    """
    return [
        ContentLengthGuard(
            max_bytes=settings.max_content_length,
            logger=logger,
            reject_malformed=settings.reject_malformed_content_length,
        ),
        AuthorizationGuard(
            verify=verify or shared_secret(settings.auth_secret),
            logger=logger,
        ),
    ]


def _build_app(
    title: str,
    settings: Settings,
    logger: logging.Logger,
    routers: Sequence[APIRouter],
    guards: Sequence[Guard],
) -> FastAPI:
    app = FastAPI(
        title=title,
        version=__version__,
        # The route table is exactly the one in todoapp.routes
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=make_lifespan(settings, logger),
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: tracing is added
    # first so it ends up inside the guard chain.
    app.add_middleware(TracingMiddleware, logger=logger.getChild("access"))
    if guards:
        app.add_middleware(GuardChainMiddleware, guards=guards)

    register_exception_handlers(app, logger)

    for router in routers:
        app.include_router(router)

    return app


def create_hello_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Hello-world demo: no guards, tracing only."""
    settings = settings or default_settings
    logger = logger or logging.getLogger(APP_LOGGER_NAME)
    return _build_app(
        title="Hello World",
        settings=settings,
        logger=logger,
        routers=[hello.router, todos.router],
        guards=[],
    )


def create_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
    verify: Optional[CredentialVerifier] = None,
) -> FastAPI:
    """
    Todo app: every route behind the content-length and authorization guards.

    Args:
        settings: Configuration; defaults to the environment-loaded singleton
        logger:   Root logger of the pipeline; guards log to `<name>.security`,
                  tracing to `<name>.access`
        verify:   Credential check replacing the shared-secret comparison
    """
    settings = settings or default_settings
    logger = logger or logging.getLogger(APP_LOGGER_NAME)
    return _build_app(
        title="Todo App",
        settings=settings,
        logger=logger,
        routers=[hello.router, todos.router, stubs.router],
        guards=build_guards(settings, logger.getChild("security"), verify),
    )


app = create_app()
