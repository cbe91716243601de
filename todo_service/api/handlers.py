"""
HTTP handlers for the todo service.

Each handler calls exactly one store operation and maps its outcome to a status
code. Failure responses carry no body; success responses are JSON.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from todo_service.domain.errors import TodoNotFoundError
from todo_service.domain.models import Todo
from todo_service.store.abstract import TodoStore

log = logging.getLogger(__name__)


def decode_todo(raw: bytes) -> Todo:
    """
    Decode a request body into a Todo whatever its content type.

    A JSON `null` decodes to a todo with every field at its default. Anything
    that is not a JSON object of the right field types raises ValidationError.
    """
    if raw.strip() == b"null":
        return Todo()
    return Todo.model_validate_json(raw)


def _empty(status_code: int) -> Response:
    return Response(status_code=status_code)


def _ok_empty() -> Response:
    return Response(status_code=status.HTTP_200_OK, media_type="application/json")


def _json(content: Any) -> Response:
    try:
        return JSONResponse(content=content, status_code=status.HTTP_200_OK)
    except (PydanticSerializationError, TypeError, ValueError):
        log.exception("Failed to serialize response")
        return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_todo_router(store: TodoStore) -> APIRouter:
    """Create the todo API router bound to `store`."""
    router = APIRouter(tags=["todo"])

    @router.get("/todo")
    def list_todos() -> Response:
        try:
            content = [todo.to_wire() for todo in store.list()]
        except PydanticSerializationError:
            log.exception("Failed to serialize todo list")
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _json(content)

    @router.get("/todo/{todo_id}")
    def get_todo(todo_id: str) -> Response:
        try:
            todo = store.get(todo_id)
        except TodoNotFoundError:
            return _empty(status.HTTP_204_NO_CONTENT)
        try:
            content = todo.to_wire()
        except PydanticSerializationError:
            log.exception("Failed to serialize todo", extra={"todo_id": todo_id})
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _json(content)

    @router.post("/todo")
    async def create_todo(request: Request) -> Response:
        try:
            todo = decode_todo(await request.body())
        except ValidationError:
            return _empty(status.HTTP_400_BAD_REQUEST)
        stored = await run_in_threadpool(store.add, todo)
        if not stored.id:
            log.error("Store returned a todo without an id")
            return _empty(status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _json(stored.id)

    @router.put("/todo/{todo_id}")
    async def update_todo(todo_id: str, request: Request) -> Response:
        try:
            todo = decode_todo(await request.body())
        except ValidationError:
            return _empty(status.HTTP_400_BAD_REQUEST)
        # The path decides which todo is replaced; a body id is ignored.
        try:
            await run_in_threadpool(store.update, todo.model_copy(update={"id": todo_id}))
        except TodoNotFoundError:
            return _empty(status.HTTP_404_NOT_FOUND)
        return _ok_empty()

    @router.delete("/todo/{todo_id}")
    def delete_todo(todo_id: str) -> Response:
        try:
            store.delete(todo_id)
        except TodoNotFoundError:
            return _empty(status.HTTP_404_NOT_FOUND)
        return _ok_empty()

    def missing_todo_id() -> Response:
        return _empty(status.HTTP_400_BAD_REQUEST)

    router.add_api_route(
        "/todo/",
        missing_todo_id,
        methods=["GET", "PUT", "DELETE"],
        include_in_schema=False,
    )

    return router


__all__ = ["create_todo_router"]
