"""
Domain package for the todo service.

Exports the todo model and the error hierarchy used by the store and the
HTTP layer. Keep this package focused on data definitions.
"""

from todo_service.domain.errors import (
    AlreadyPopulatedError,
    IdGenerationError,
    PopulationFailedError,
    TodoNotFoundError,
    TodoServiceError,
)
from todo_service.domain.models import Todo

__all__ = [
    "Todo",
    "TodoServiceError",
    "TodoNotFoundError",
    "AlreadyPopulatedError",
    "PopulationFailedError",
    "IdGenerationError",
]
