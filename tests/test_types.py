from typing import Any

import pytest

from pydantic import ValidationError

from tasktracker.types import MAX_TASK_ID, ApiResponse, Task, TaskStatus
from tasktracker.utils.errors import InvalidStatusError


MINIMAL_TASK: dict[str, Any] = {'id': 1, 'title': 'write spec'}


def test_status_ordinals():
    assert [int(status) for status in TaskStatus] == [0, 1, 2]
    assert TaskStatus(0) is TaskStatus.ongoing
    assert TaskStatus(1) is TaskStatus.completed
    assert TaskStatus(2) is TaskStatus.closed


def test_status_labels():
    assert TaskStatus.ongoing.label == 'ongoing'
    assert str(TaskStatus.completed) == 'completed'
    assert str(TaskStatus.closed) == 'closed'


@pytest.mark.parametrize('value', [0, 1, 2])
def test_status_is_valid(value):
    assert TaskStatus.is_valid(value)


@pytest.mark.parametrize('value', [-1, 3, 100, True, '1', 1.0, None])
def test_status_is_not_valid(value):
    assert not TaskStatus.is_valid(value)


@pytest.mark.parametrize(
    'value, expected',
    [
        (0, TaskStatus.ongoing),
        ('1', TaskStatus.completed),
        ('closed', TaskStatus.closed),
        ('Ongoing', TaskStatus.ongoing),
        (TaskStatus.completed, TaskStatus.completed),
    ],
)
def test_status_parse(value, expected):
    assert TaskStatus.parse(value) is expected


@pytest.mark.parametrize('value', [3, -1, 'done', '', None, False])
def test_status_parse_invalid(value):
    with pytest.raises(InvalidStatusError):
        TaskStatus.parse(value)


def test_task_defaults_to_ongoing():
    task = Task(**MINIMAL_TASK)
    assert task.status is TaskStatus.ongoing


def test_task_serializes_status_by_name():
    task = Task(**MINIMAL_TASK, status=TaskStatus.closed)
    assert task.model_dump(mode='json') == {
        'id': 1,
        'title': 'write spec',
        'status': 'closed',
    }
    assert task.model_dump()['status'] is TaskStatus.closed


def test_task_accepts_status_name_or_ordinal():
    assert Task(**MINIMAL_TASK, status='completed').status is TaskStatus.completed
    assert Task(**MINIMAL_TASK, status=2).status is TaskStatus.closed


def test_task_json_round_trip():
    task = Task(**MINIMAL_TASK, status=TaskStatus.completed)
    assert Task.model_validate_json(task.model_dump_json()) == task


@pytest.mark.parametrize(
    'overrides',
    [
        {'title': ''},
        {'id': -1},
        {'id': MAX_TASK_ID + 1},
        {'status': 3},
        {'status': 'done'},
    ],
)
def test_task_invalid(overrides):
    with pytest.raises(ValidationError):
        Task(**(MINIMAL_TASK | overrides))


def test_task_max_id():
    assert Task(id=MAX_TASK_ID, title='edge').id == 2**32 - 1


def test_api_response():
    response = ApiResponse(status='success', message='ok')
    assert response.model_dump() == {
        'status': 'success',
        'message': 'ok',
        'data': {},
    }
    with pytest.raises(ValidationError):
        ApiResponse(status='maybe', message='ok')
