"""
Todo App: Hello-World Route Handlers
====================================

What:  The first lesson of the series: plain text, a static HTML page and a
       random number drawn from a range given in the query string.

    GET /                        → "Hello, world!"
    GET /html                    → static/index.html
    GET /rand?start=N&end=M      → <h1>Random Number: X</h1>, N <= X < M
"""

import logging
import random
from pathlib import Path
from typing import Annotated

import aiofiles
from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from todoapp.exceptions import InvalidRangeError
from todoapp.schemas.todo import RangeParameters

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Hello"])

INDEX_HTML = Path(__file__).resolve().parent.parent / "static" / "index.html"


@router.get("/", response_class=PlainTextResponse, summary="Plain-text greeting")
async def hello() -> str:
    return "Hello, world!"


@router.get("/html", response_class=HTMLResponse, summary="Static HTML document")
async def html() -> HTMLResponse:
    """Serve the HTML page shipped inside the package."""
    async with aiofiles.open(INDEX_HTML, mode="r", encoding="utf-8") as f:
        content = await f.read()
    return HTMLResponse(content)


@router.get(
    "/rand",
    response_class=HTMLResponse,
    responses={400: {"description": "Missing, non-numeric or empty range"}},
    summary="Random integer from a half-open range",
)
async def rand(range_: Annotated[RangeParameters, Query()]) -> HTMLResponse:
    """
    Draw a uniformly distributed integer from `[start, end)`.

    Missing or non-numeric bounds never get here (the query model rejects
    them). An empty or inverted range raises InvalidRangeError instead of
    letting `randrange` fail.
    """
    if range_.start >= range_.end:
        raise InvalidRangeError(range_.start, range_.end)

    random_number = random.randrange(range_.start, range_.end)
    return HTMLResponse(f"<h1>Random Number: {random_number}</h1>")
