"""Server-side components: task storage, the task manager and the HTTP app."""

from tasktracker.server.apps import TaskTrackerStarletteApplication
from tasktracker.server.tasks import InMemoryTaskStore, TaskManager, TaskStore


__all__ = [
    'InMemoryTaskStore',
    'TaskManager',
    'TaskStore',
    'TaskTrackerStarletteApplication',
]
