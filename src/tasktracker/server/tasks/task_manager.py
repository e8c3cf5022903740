import logging

from collections.abc import Callable

from tasktracker.server.tasks.task_store import TaskStore
from tasktracker.types import Task, TaskStatus
from tasktracker.utils.errors import (
    DuplicateIdError,
    InvalidInputError,
    TaskOperationError,
    TaskTrackerError,
)
from tasktracker.utils.task import new_task, new_task_id
from tasktracker.utils.telemetry import SpanKind, trace_class


logger = logging.getLogger(__name__)

DEFAULT_MAX_CREATE_ATTEMPTS = 5


@trace_class(kind=SpanKind.SERVER)
class TaskManager:
    """Validates requests and forwards them to a TaskStore.

    The manager keeps no task state of its own and does no locking, so any
    number of managers may share one store. Every failure is raised as a
    `TaskOperationError` wrapping the underlying error.
    """

    def __init__(
        self,
        task_store: TaskStore,
        id_generator: Callable[[], int] | None = None,
        max_create_attempts: int = DEFAULT_MAX_CREATE_ATTEMPTS,
    ):
        """Initializes the TaskManager.

        Args:
            task_store: The store holding all tasks.
            id_generator: Returns candidate ids for new tasks. Defaults to a
              uniform random 32-bit generator.
            max_create_attempts: How many ids `create_task` tries before
              giving up on repeated collisions.
        """
        if max_create_attempts < 1:
            raise ValueError('max_create_attempts must be at least 1')
        self.task_store = task_store
        self._id_generator = id_generator or new_task_id
        self.max_create_attempts = max_create_attempts
        logger.debug(
            'TaskManager initialized with store %s, max_create_attempts: %s',
            type(task_store).__name__,
            max_create_attempts,
        )

    def create_task(self, title: str) -> int:
        """Creates a task in the 'ongoing' state and returns its id.

        A colliding id is replaced with a freshly generated one, up to
        `max_create_attempts` ids in total.

        Raises:
            TaskOperationError: Wrapping InvalidInputError for an empty
              title, or DuplicateIdError once every attempt collided.
        """
        if not title:
            raise TaskOperationError('creating', InvalidInputError())

        error: DuplicateIdError | None = None
        for attempt in range(1, self.max_create_attempts + 1):
            task = new_task(title, task_id=self._id_generator())
            try:
                self.task_store.add(task)
            except DuplicateIdError as e:
                logger.warning(
                    'Id collision on attempt %d/%d for id %s',
                    attempt,
                    self.max_create_attempts,
                    task.id,
                )
                error = e
                continue
            logger.info('New task created with id: %s', task.id)
            return task.id

        logger.error(
            'Giving up creating task after %d colliding ids',
            self.max_create_attempts,
        )
        raise TaskOperationError('creating', error) from error

    def get_task(self, task_id: int) -> Task:
        try:
            return self.task_store.get(task_id)
        except TaskTrackerError as e:
            raise TaskOperationError('retrieving', e) from e

    def update_task(
        self, task_id: int, title: str, status: TaskStatus | int
    ) -> None:
        """Replaces the title and status of a task.

        Status changes are unrestricted; any status may follow any other.
        """
        if not title:
            raise TaskOperationError('updating', InvalidInputError())
        try:
            self.task_store.update(task_id, title, TaskStatus.parse(status))
        except TaskTrackerError as e:
            raise TaskOperationError('updating', e) from e

    def delete_task(self, task_id: int) -> None:
        try:
            self.task_store.delete(task_id)
        except TaskTrackerError as e:
            raise TaskOperationError('deleting', e) from e

    def get_all_tasks(self) -> list[Task]:
        try:
            return self.task_store.get_all()
        except TaskTrackerError as e:
            raise TaskOperationError('listing', e) from e
