import pytest

from tasktracker.utils.errors import (
    DuplicateIdError,
    InvalidIdError,
    InvalidInputError,
    InvalidStatusError,
    TaskOperationError,
    TaskTrackerError,
)


class TestStoreErrors:
    """Test cases for the low-level error classes."""

    def test_invalid_id(self):
        error = InvalidIdError(17)
        assert isinstance(error, TaskTrackerError)
        assert error.task_id == 17
        assert str(error) == 'No task found with id: 17'

    def test_duplicate_id(self):
        error = DuplicateIdError(17)
        assert error.task_id == 17
        assert str(error) == 'Duplicate id: 17'

    def test_invalid_input_default_message(self):
        error = InvalidInputError()
        assert error.message == 'Empty title'
        assert str(error) == 'Empty title'

    def test_invalid_status(self):
        error = InvalidStatusError(9)
        assert error.value == 9
        assert '9' in str(error)


class TestTaskOperationError:
    """Test cases for the manager-level wrapper."""

    @pytest.mark.parametrize(
        'operation, error, expected',
        [
            ('retrieving', InvalidIdError(1), 'Error retrieving task: No task found with id: 1'),
            ('creating', DuplicateIdError(2), 'Error creating task: Duplicate id: 2'),
            ('updating', InvalidInputError(), 'Error updating task: Empty title'),
            ('listing', InvalidIdError(3), 'Error listing tasks: No task found with id: 3'),
        ],
    )
    def test_message_formatting(self, operation, error, expected):
        assert str(TaskOperationError(operation, error)) == expected

    def test_keeps_underlying_error(self):
        inner = InvalidIdError(5)
        error = TaskOperationError('deleting', inner)
        assert error.error is inner
        assert error.kind is InvalidIdError
        assert error.operation == 'deleting'
        assert isinstance(error, TaskTrackerError)
