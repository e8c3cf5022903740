"""Utility functions for creating Task objects."""

import random

from tasktracker.types import Task, TaskStatus


_rng = random.SystemRandom()


def new_task_id() -> int:
    """Returns a uniformly distributed random unsigned 32-bit id.

    Ids are not derived from a counter, so uniqueness is only probabilistic;
    the manager handles the rare collision.
    """
    return _rng.getrandbits(32)


def new_task(title: str, task_id: int | None = None) -> Task:
    """Creates a new Task in the 'ongoing' state.

    Args:
        title: The task title.
        task_id: Id to use. A random one is generated when omitted.

    Returns:
        A new `Task` object.
    """
    return Task(
        id=new_task_id() if task_id is None else task_id,
        title=title,
        status=TaskStatus.ongoing,
    )
