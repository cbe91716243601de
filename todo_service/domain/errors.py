"""
Error hierarchy for the todo service.

Store operations raise these; the HTTP layer translates each kind into a fixed
status code and never forwards the message to clients.
"""
from __future__ import annotations


class TodoServiceError(Exception):
    """Base class for all todo service errors."""


class TodoNotFoundError(TodoServiceError):
    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo not found: {todo_id!r}")
        self.todo_id = todo_id


class AlreadyPopulatedError(TodoServiceError):
    def __init__(self, count: int) -> None:
        super().__init__(f"The store is already populated ({count} todos)")
        self.count = count


class PopulationFailedError(TodoServiceError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Populating the store failed: expected {expected} todos, found {actual}")
        self.expected = expected
        self.actual = actual


class IdGenerationError(TodoServiceError):
    def __init__(self, attempts: int) -> None:
        super().__init__(f"Could not generate a unique todo id after {attempts} attempts")
        self.attempts = attempts


__all__ = [
    "TodoServiceError",
    "TodoNotFoundError",
    "AlreadyPopulatedError",
    "PopulationFailedError",
    "IdGenerationError",
]
