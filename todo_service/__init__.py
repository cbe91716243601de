"""
Todo Service - an in-memory todo list exposed over HTTP.

Clients create, read, update and delete small todo records identified by an
opaque id. The package is split into:

- Domain models and errors (`todo_service.domain`)
- A lock-protected in-memory store and id generator (`todo_service.store`)
- FastAPI handlers and the application factory (`todo_service.api`)
- A Typer CLI to serve and inspect the list (`todo_service.main`)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from todo_service.api import create_app, create_todo_router
from todo_service.config import Settings, get_settings
from todo_service.domain import (
    AlreadyPopulatedError,
    IdGenerationError,
    PopulationFailedError,
    Todo,
    TodoNotFoundError,
    TodoServiceError,
)
from todo_service.store import AbstractTodoStore, IdGenerator, InMemoryTodoStore, TodoStore
from todo_service.utils.logging import configure_logging

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Todo",
    "TodoServiceError",
    "TodoNotFoundError",
    "AlreadyPopulatedError",
    "PopulationFailedError",
    "IdGenerationError",
    # Store
    "TodoStore",
    "AbstractTodoStore",
    "IdGenerator",
    "InMemoryTodoStore",
    # HTTP
    "create_app",
    "create_todo_router",
    # Logging
    "configure_logging",
]
