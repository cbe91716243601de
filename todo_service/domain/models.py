"""
Domain models for the todo service.

Defines the todo record exchanged over HTTP and held by the store. Instances
are immutable; the store swaps whole records when a todo is updated.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """
    A single todo item.

    The `message` field travels as `msg` on the wire.
    """

    id: str = Field("", description="Opaque identifier assigned by the store.")
    title: str = Field("", description="Short title.")
    message: str = Field("", alias="msg", description="Free-form message body.")
    done: bool = Field(False, description="Whether the todo is completed.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "strict": True,
    }

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON shape clients see."""
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["Todo"]
