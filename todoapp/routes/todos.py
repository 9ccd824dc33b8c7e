"""
Todo App: Todo Echo Route
=========================

What:  POST /json decodes a Todo from the body and returns it unchanged.
How:   FastAPI decodes and validates the body against `Todo`; a syntax
       error becomes 400 and a shape error 422 (see the
       RequestValidationError handler in main.py). Nothing is stored.
"""

from fastapi import APIRouter

from todoapp.schemas.todo import Todo

router = APIRouter(tags=["Todos"])


@router.post(
    "/json",
    response_model=Todo,
    responses={
        400: {"description": "Body is not valid JSON"},
        422: {"description": "Body is JSON but not a Todo"},
    },
    summary="Echo a todo",
)
async def echo_todo(payload: Todo) -> Todo:
    return payload
