"""Utility modules for the task tracker."""

from tasktracker.utils.errors import (
    DuplicateIdError,
    InvalidIdError,
    InvalidInputError,
    InvalidStatusError,
    TaskOperationError,
    TaskTrackerError,
)
from tasktracker.utils.rwlock import ReadWriteLock


__all__ = [
    'DuplicateIdError',
    'InvalidIdError',
    'InvalidInputError',
    'InvalidStatusError',
    'ReadWriteLock',
    'TaskOperationError',
    'TaskTrackerError',
]
