import logging

from tasktracker.server.tasks.task_store import TaskStore
from tasktracker.types import Task, TaskStatus
from tasktracker.utils.errors import DuplicateIdError, InvalidIdError
from tasktracker.utils.rwlock import ReadWriteLock


logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """In-memory implementation of TaskStore.

    A single reader/writer lock covers the whole map: reads run concurrently,
    a write excludes every other read and write.
    """

    def __init__(self) -> None:
        logger.debug('Initializing InMemoryTaskStore')
        self.tasks: dict[int, Task] = {}
        self.lock = ReadWriteLock()

    def __len__(self) -> int:
        with self.lock.read_lock():
            return len(self.tasks)

    def get(self, task_id: int) -> Task:
        with self.lock.read_lock():
            logger.debug('Attempting to get task with id: %s', task_id)
            task = self.tasks.get(task_id)
            if task is None:
                logger.debug('Task %s not found in store.', task_id)
                raise InvalidIdError(task_id)
            logger.debug('Task %s retrieved successfully.', task_id)
            return task.model_copy()

    def get_all(self) -> list[Task]:
        with self.lock.read_lock():
            tasks = [task.model_copy() for task in self.tasks.values()]
        logger.debug('Retrieved %d tasks.', len(tasks))
        return tasks

    def add(self, task: Task) -> None:
        with self.lock.write_lock():
            if task.id in self.tasks:
                logger.warning('Attempted to add duplicate task id: %s', task.id)
                raise DuplicateIdError(task.id)
            self.tasks[task.id] = task.model_copy()
            logger.info('Task %s added successfully.', task.id)

    def update(self, task_id: int, title: str, status: TaskStatus) -> None:
        with self.lock.write_lock():
            current = self.tasks.get(task_id)
            if current is None:
                logger.warning(
                    'Attempted to update nonexistent task with id: %s', task_id
                )
                raise InvalidIdError(task_id)
            # Swap in a new record so both fields change together.
            self.tasks[task_id] = current.model_copy(
                update={'title': title, 'status': status}
            )
            logger.info('Task %s updated successfully.', task_id)

    def delete(self, task_id: int) -> None:
        with self.lock.write_lock():
            logger.debug('Attempting to delete task with id: %s', task_id)
            if task_id not in self.tasks:
                logger.warning(
                    'Attempted to delete nonexistent task with id: %s', task_id
                )
                raise InvalidIdError(task_id)
            del self.tasks[task_id]
            logger.info('Task %s deleted successfully.', task_id)
