"""
Store interfaces for the todo service.

The HTTP layer depends only on the TodoStore protocol so alternative backends
can be injected at startup. Class-based implementations may subclass
AbstractTodoStore to get the contract enforced.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from todo_service.domain.models import Todo


@runtime_checkable
class TodoStore(Protocol):
    """
    Common interface every todo store must implement.

    Lookups that miss raise `TodoNotFoundError`.
    """

    def count(self) -> int:
        """Number of todos currently held."""
        ...

    def list(self) -> List[Todo]:
        """All todos in insertion order."""
        ...

    def get(self, todo_id: str) -> Todo:
        """Return the todo with `todo_id`."""
        ...

    def add(self, todo: Todo) -> Todo:
        """
        Store a new todo under a freshly generated id.

        Parameters
        ----------
        todo : Todo
            Field values for the new todo. Its `id` is ignored.

        Returns
        -------
        Todo
            The stored todo with its id populated.
        """
        ...

    def update(self, todo: Todo) -> Todo:
        """Replace the fields of the todo with the same id, keeping its position."""
        ...

    def delete(self, todo_id: str) -> None:
        """Remove the todo with `todo_id`."""
        ...

    def populate(self) -> List[Todo]:
        """Seed an empty store with the example todos."""
        ...


class AbstractTodoStore(abc.ABC):
    """
    Optional ABC helper for class-based implementations.
    """

    @abc.abstractmethod
    def count(self) -> int:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def list(self) -> List[Todo]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, todo_id: str) -> Todo:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def add(self, todo: Todo) -> Todo:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, todo: Todo) -> Todo:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, todo_id: str) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def populate(self) -> List[Todo]:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = [
    "TodoStore",
    "AbstractTodoStore",
]
