"""Custom exceptions raised by the task store and the task manager."""

from typing import Any


class TaskTrackerError(Exception):
    """Base exception for task tracker errors."""


class InvalidInputError(TaskTrackerError):
    """Raised when a request carries an unusable value, such as an empty title."""

    def __init__(self, message: str = 'Empty title'):
        """Initializes the InvalidInputError.

        Args:
            message: A descriptive error message.
        """
        self.message = message
        super().__init__(message)


class InvalidIdError(TaskTrackerError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f'No task found with id: {task_id}')


class DuplicateIdError(TaskTrackerError):
    """Raised when a task is added under an id that is already taken."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f'Duplicate id: {task_id}')


class InvalidStatusError(TaskTrackerError):
    """Raised for a status value outside the known ordinals."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'Invalid task status: {value!r}')


class TaskOperationError(TaskTrackerError):
    """Wrapper raised by the task manager for every failed operation.

    The underlying error is kept on `error` so callers can match on its type
    while the message says which operation was attempted.
    """

    def __init__(self, operation: str, error: TaskTrackerError):
        """Initializes the TaskOperationError.

        Args:
            operation: What the manager was doing, e.g. 'retrieving'.
            error: The underlying store or validation error.
        """
        self.operation = operation
        self.error = error
        target = 'tasks' if operation == 'listing' else 'task'
        super().__init__(f'Error {operation} {target}: {error}')

    @property
    def kind(self) -> type[TaskTrackerError]:
        """Class of the underlying error."""
        return type(self.error)
