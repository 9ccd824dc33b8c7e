"""
Todo App: Status Stub Routes
============================

What:  Fixed responses used to demonstrate status handling in the todo app.

    GET /404   → 404 Not Found, empty body
    GET /500   → 200 OK, body "500"

Note: /500 is a demonstration of a handler returning arbitrary text; it
does not simulate a server error.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from todoapp.exceptions import NotFoundError

router = APIRouter(tags=["Stubs"])


@router.get("/404", status_code=404, summary="Always not found")
async def return_404() -> None:
    raise NotFoundError("page")


@router.get("/500", response_class=PlainTextResponse, summary="Literal 500 body")
async def return_500() -> str:
    return "500"
