"""
In-memory todo store.

Todos live in a plain list guarded by a single lock. Every operation holds the
lock for its whole duration, so concurrent callers are fully serialized. Lookups
are linear scans; the list is expected to stay small.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from todo_service.domain.errors import (
    AlreadyPopulatedError,
    IdGenerationError,
    PopulationFailedError,
    TodoNotFoundError,
)
from todo_service.domain.models import Todo
from todo_service.store.abstract import AbstractTodoStore
from todo_service.store.ids import IdGenerator, default_id_generator

log = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 5

SEED_TODOS = (
    Todo(title="Water flowers", message="They're really dry..."),
    Todo(title="Pay bills", message="Better get it done."),
    Todo(title="Buy food", message="Out of pasta."),
    Todo(title="Make someone's day better", message="I'm starting with the man in the mirror."),
)


class InMemoryTodoStore(AbstractTodoStore):
    """
    Process-local todo store.

    Records are immutable, so `list()` and `get()` hand out the stored
    instances directly; `update()` swaps the record in its slot.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._todos: List[Todo] = []
        self._ids = id_generator or default_id_generator()
        self._lock = threading.Lock()

    @property
    def id_generator(self) -> IdGenerator:
        return self._ids

    def count(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> List[Todo]:
        with self._lock:
            return list(self._todos)

    def get(self, todo_id: str) -> Todo:
        with self._lock:
            return self._todos[self._index_of(todo_id)]

    def add(self, todo: Todo) -> Todo:
        with self._lock:
            stored = self._append(todo)
        log.debug("Todo added", extra={"todo_id": stored.id})
        return stored

    def update(self, todo: Todo) -> Todo:
        with self._lock:
            index = self._index_of(todo.id)
            self._todos[index] = todo
        log.debug("Todo updated", extra={"todo_id": todo.id})
        return todo

    def delete(self, todo_id: str) -> None:
        with self._lock:
            del self._todos[self._index_of(todo_id)]
        log.debug("Todo deleted", extra={"todo_id": todo_id})

    def populate(self) -> List[Todo]:
        """
        Fill an empty store with the example todos.

        Raises
        ------
        AlreadyPopulatedError
            If the store holds any todo.
        PopulationFailedError
            If the store does not hold exactly the seeded todos afterwards.
        """
        with self._lock:
            before = len(self._todos)
            if before > 0:
                raise AlreadyPopulatedError(before)

            seeded = [self._append(todo) for todo in SEED_TODOS]

            expected = before + len(SEED_TODOS)
            if len(self._todos) != expected:
                raise PopulationFailedError(expected, len(self._todos))

        log.info("Store populated", extra={"count": len(seeded)})
        return seeded

    # Callers must hold self._lock.

    def _index_of(self, todo_id: str) -> int:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        raise TodoNotFoundError(todo_id)

    def _append(self, todo: Todo) -> Todo:
        stored = todo.model_copy(update={"id": self._new_id()})
        self._todos.append(stored)
        return stored

    def _new_id(self) -> str:
        taken = {todo.id for todo in self._todos}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._ids.generate()
            if candidate not in taken:
                return candidate
            log.warning("Generated todo id collided; drawing again", extra={"todo_id": candidate})
        raise IdGenerationError(MAX_ID_ATTEMPTS)


__all__ = ["InMemoryTodoStore", "MAX_ID_ATTEMPTS", "SEED_TODOS"]
