"""Domain primitives that enforce validity at creation time."""

import uuid
from dataclasses import dataclass
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event, shared by both of its storage locations."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid.uuid4())

    def __str__(self) -> str:
        return str(self.value)
