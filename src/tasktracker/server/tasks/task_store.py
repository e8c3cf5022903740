from abc import ABC, abstractmethod

from tasktracker.types import Task, TaskStatus


class TaskStore(ABC):
    """Task Store interface.

    Defines the methods for holding and retrieving `Task` objects. The store
    owns its records; implementations must hand out copies and must be safe
    to call from several threads at once.
    """

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Retrieves a task by ID. Raises InvalidIdError if it is absent."""

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Retrieves every task in the store, in no particular order."""

    @abstractmethod
    def add(self, task: Task) -> None:
        """Adds a new task. Raises DuplicateIdError if the ID is taken."""

    @abstractmethod
    def update(self, task_id: int, title: str, status: TaskStatus) -> None:
        """Replaces title and status of a task. Raises InvalidIdError if absent."""

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Deletes a task by ID. Raises InvalidIdError if it is absent."""
