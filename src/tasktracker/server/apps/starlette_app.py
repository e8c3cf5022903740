import logging
import re

from collections.abc import Callable
from typing import Any

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from tasktracker.config import Settings
from tasktracker.server.apps.http_app import HttpApp
from tasktracker.server.tasks import InMemoryTaskStore, TaskManager
from tasktracker.types import MAX_TASK_ID, ApiResponse, TaskStatus
from tasktracker.utils.errors import TaskOperationError


logger = logging.getLogger(__name__)

_DIGITS = re.compile(r'[0-9]+')
_METHODS = ['GET', 'POST']


class TaskTrackerStarletteApplication(HttpApp):
    """A Starlette application exposing the task manager over HTTP.

    Parameters are read from the query string. Every body is an
    `ApiResponse` envelope; failures are reported with status 400, or 500
    for unexpected errors. Manager calls run in Starlette's thread pool, so
    concurrent requests reach the store from several threads.
    """

    def __init__(self, task_manager: TaskManager):
        """Initializes the TaskTrackerStarletteApplication.

        Args:
            task_manager: The manager all routes delegate to.
        """
        self.task_manager = task_manager

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None
    ) -> 'TaskTrackerStarletteApplication':
        """Creates the process-wide store and a manager over it."""
        settings = settings or Settings()
        store = InMemoryTaskStore()
        manager = TaskManager(
            store, max_create_attempts=settings.max_create_attempts
        )
        return cls(manager)

    @staticmethod
    def _respond(
        status_code: int,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> JSONResponse:
        body = ApiResponse(
            status='success' if status_code < 400 else 'error',
            message=message,
            data=data or {},
        )
        return JSONResponse(body.model_dump(mode='json'), status_code=status_code)

    @staticmethod
    def _parse_id(raw: str) -> int | None:
        if not _DIGITS.fullmatch(raw):
            return None
        value = int(raw)
        return value if value <= MAX_TASK_ID else None

    @staticmethod
    def _parse_status(raw: str) -> TaskStatus | None:
        try:
            value = int(raw)
        except ValueError:
            return None
        return TaskStatus(value) if TaskStatus.is_valid(value) else None

    async def _run(
        self, message: str, call: Callable[[], dict[str, Any] | None]
    ) -> JSONResponse:
        """Runs a manager call off the event loop and wraps its outcome."""
        try:
            data = await run_in_threadpool(call)
        except TaskOperationError as e:
            logger.warning('Request failed: %s', e)
            return self._respond(400, str(e))
        except Exception:
            logger.exception('Unhandled exception while handling request')
            return self._respond(500, 'internal error')
        return self._respond(200, message, data)

    async def _handle_health(self, request: Request) -> JSONResponse:
        return self._respond(200, 'server running')

    async def _handle_create_task(self, request: Request) -> JSONResponse:
        title = request.query_params.get('title', '')
        if not title:
            return self._respond(400, 'Missing parameters')

        return await self._run(
            'task created',
            lambda: {'id': self.task_manager.create_task(title)},
        )

    async def _handle_get_task(self, request: Request) -> JSONResponse:
        raw_id = request.query_params.get('id', '')
        if not raw_id:
            return self._respond(400, 'Missing parameters')
        task_id = self._parse_id(raw_id)
        if task_id is None:
            return self._respond(400, 'id is not an valid integer')

        return await self._run(
            'task retrieved',
            lambda: {
                'task': self.task_manager.get_task(task_id).model_dump(
                    mode='json'
                )
            },
        )

    async def _handle_update_task(self, request: Request) -> JSONResponse:
        params = request.query_params
        raw_id = params.get('id', '')
        title = params.get('title', '')
        raw_status = params.get('status', '')
        if not raw_id or not title or not raw_status:
            return self._respond(400, 'Missing parameters')
        task_id = self._parse_id(raw_id)
        if task_id is None:
            return self._respond(400, 'id is not an valid integer')
        status = self._parse_status(raw_status)
        if status is None:
            return self._respond(400, 'status is not an valid integer')

        return await self._run(
            'task updated',
            lambda: self.task_manager.update_task(task_id, title, status),
        )

    async def _handle_delete_task(self, request: Request) -> JSONResponse:
        raw_id = request.query_params.get('id', '')
        if not raw_id:
            return self._respond(400, 'Missing parameters')
        task_id = self._parse_id(raw_id)
        if task_id is None:
            return self._respond(400, 'id is not an valid integer')

        return await self._run(
            'task deleted', lambda: self.task_manager.delete_task(task_id)
        )

    async def _handle_list_tasks(self, request: Request) -> JSONResponse:
        return await self._run(
            'tasks retrieved',
            lambda: {
                'tasks': [
                    task.model_dump(mode='json')
                    for task in self.task_manager.get_all_tasks()
                ]
            },
        )

    def routes(self, prefix: str = '') -> list[Route]:
        """Returns the Starlette Routes for the task endpoints.

        Args:
            prefix: Path prefix prepended to every route, e.g. '/api'.

        Returns:
            A list of Starlette Route objects.
        """
        table = [
            ('/health', self._handle_health, 'health'),
            ('/task/create', self._handle_create_task, 'create_task'),
            ('/task/get', self._handle_get_task, 'get_task'),
            ('/task/update', self._handle_update_task, 'update_task'),
            ('/task/delete', self._handle_delete_task, 'delete_task'),
            ('/task/list', self._handle_list_tasks, 'list_tasks'),
        ]
        return [
            Route(f'{prefix}{path}', endpoint, methods=_METHODS, name=name)
            for path, endpoint, name in table
        ]

    def build(self, prefix: str = '', **kwargs: Any) -> Starlette:
        """Builds and returns the Starlette application instance.

        Args:
            prefix: Path prefix prepended to every task route.
            **kwargs: Additional keyword arguments to pass to the Starlette
              constructor. Routes given here are kept alongside ours.

        Returns:
            A configured Starlette application instance.
        """
        app_routes = self.routes(prefix)
        if 'routes' in kwargs:
            kwargs['routes'] = [*kwargs['routes'], *app_routes]
        else:
            kwargs['routes'] = app_routes

        logger.info('Building task tracker application')
        return Starlette(**kwargs)
