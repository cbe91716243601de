"""
Store package for the todo service.

Re-exports the store interfaces, the in-memory implementation, and the id
generator so downstream code can import from `todo_service.store` directly.
"""

from todo_service.store.abstract import AbstractTodoStore, TodoStore
from todo_service.store.ids import ID_ALPHABET, ID_LENGTH, IdGenerator, default_id_generator
from todo_service.store.memory import MAX_ID_ATTEMPTS, SEED_TODOS, InMemoryTodoStore

__all__ = [
    # Abstracts
    "AbstractTodoStore",
    "TodoStore",
    # Ids
    "ID_ALPHABET",
    "ID_LENGTH",
    "IdGenerator",
    "default_id_generator",
    # Implementations
    "InMemoryTodoStore",
    "MAX_ID_ATTEMPTS",
    "SEED_TODOS",
]
