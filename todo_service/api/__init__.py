"""HTTP layer for the todo service."""

from todo_service.api.app import create_app
from todo_service.api.handlers import create_todo_router

__all__ = ["create_app", "create_todo_router"]
