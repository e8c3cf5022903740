"""Data models shared by the task store, the manager and the HTTP layer."""

from enum import IntEnum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_serializer, field_validator

from tasktracker.utils.errors import InvalidStatusError


MAX_TASK_ID = 2**32 - 1


class TaskStatus(IntEnum):
    """Status of a task. Any value may replace any other on update."""

    ongoing = 0
    completed = 1
    closed = 2

    @property
    def label(self) -> str:
        """Canonical lowercase name used in serialized tasks."""
        return self.name

    def __str__(self) -> str:
        return self.label

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Returns True only for the ordinals 0, 1 and 2."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value in cls._value2member_map_

    @classmethod
    def parse(cls, value: Any) -> 'TaskStatus':
        """Coerces an ordinal, a decimal string or a status name.

        Raises:
            InvalidStatusError: If the value does not name one of the statuses.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            member = cls.__members__.get(text.lower())
            if member is not None:
                return member
            try:
                value = int(text)
            except ValueError:
                raise InvalidStatusError(value) from None
        if not cls.is_valid(value):
            raise InvalidStatusError(value)
        return cls(value)


class Task(BaseModel):
    """A single unit of work."""

    id: int = Field(ge=0, le=MAX_TASK_ID)
    title: str = Field(min_length=1)
    status: TaskStatus = TaskStatus.ongoing

    @field_validator('status', mode='before')
    @classmethod
    def coerce_status(cls, value: Any) -> TaskStatus:
        try:
            return TaskStatus.parse(value)
        except InvalidStatusError as e:
            # pydantic only converts ValueError into a ValidationError
            raise ValueError(str(e)) from e

    @field_serializer('status', when_used='json')
    def serialize_status(self, status: TaskStatus) -> str:
        return status.label


class ApiResponse(BaseModel):
    """Envelope for every HTTP response body."""

    status: Literal['success', 'error']
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
