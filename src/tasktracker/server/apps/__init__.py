"""HTTP application components for the task tracker."""

from tasktracker.server.apps.http_app import HttpApp
from tasktracker.server.apps.starlette_app import TaskTrackerStarletteApplication


__all__ = ['HttpApp', 'TaskTrackerStarletteApplication']
