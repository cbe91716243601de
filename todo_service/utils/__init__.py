"""
Utilities package for the todo service.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from todo_service.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
