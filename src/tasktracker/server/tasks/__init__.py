"""Components for storing and managing tasks."""

from tasktracker.server.tasks.inmemory_task_store import InMemoryTaskStore
from tasktracker.server.tasks.task_manager import TaskManager
from tasktracker.server.tasks.task_store import TaskStore


__all__ = [
    'InMemoryTaskStore',
    'TaskManager',
    'TaskStore',
]
