from __future__ import annotations

import pytest
from pydantic import ValidationError

from todo_service.domain.models import Todo


def test_defaults():
    todo = Todo()
    assert todo.id == ""
    assert todo.title == ""
    assert todo.message == ""
    assert todo.done is False


def test_message_travels_as_msg():
    todo = Todo.model_validate({"id": "abc", "title": "t", "msg": "m", "done": True})
    assert todo.message == "m"
    assert todo.to_wire() == {"id": "abc", "title": "t", "msg": "m", "done": True}


def test_unknown_keys_are_ignored():
    todo = Todo.model_validate({"title": "t", "priority": 3})
    assert todo.title == "t"
    assert "priority" not in todo.to_wire()


def test_types_are_strict():
    with pytest.raises(ValidationError):
        Todo.model_validate({"done": "yes"})
    with pytest.raises(ValidationError):
        Todo.model_validate({"title": 5})


def test_todos_are_immutable():
    todo = Todo(title="t")
    with pytest.raises(ValidationError):
        todo.title = "changed"
