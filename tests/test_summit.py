import pytest

from ent.data.summit import BuildStatus, Task, TaskEnumerateResponse


def _task(**overrides):
    data = {
        "id": 42,
        "projectID": 1,
        "repoID": 2,
        "profileID": 3,
        "slug": "volatile/x86_64",
        "pkgID": "nano",
        "architecture": "x86_64",
        "buildID": "volatile/nano-8.0-1",
        "description": "Build nano",
        "commitRef": "abc123",
        "sourcePath": "n/nano",
        "status": 2,
        "tsStarted": 100,
        "tsUpdated": 200,
        "tsEnded": 300,
        "blockedBy": ["other"],
        "allocatedBuilder": "builder-a",
        "logPath": "logs/42.log",
    }
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "code,status",
    [
        (0, BuildStatus.NEW),
        (1, BuildStatus.FAILED),
        (2, BuildStatus.BUILDING),
        (3, BuildStatus.PUBLISHING),
        (4, BuildStatus.COMPLETED),
        (5, BuildStatus.BLOCKED),
    ],
)
def test_known_codes(code, status):
    assert BuildStatus.from_code(code) is status


@pytest.mark.parametrize("code", [-1, 6, 99])
def test_unknown_codes_are_failed(code):
    assert BuildStatus.from_code(code) is BuildStatus.FAILED


def test_task_from_dict():
    task = Task.from_dict(_task())
    assert task.id == 42
    assert task.build_id == "volatile/nano-8.0-1"
    assert task.status is BuildStatus.BUILDING
    assert task.blocked_by == ["other"]
    assert task.log_path == "logs/42.log"


def test_task_blocked_by_defaults_to_empty():
    data = _task()
    del data["blockedBy"]
    assert Task.from_dict(data).blocked_by == []


def test_task_missing_required_field():
    data = _task()
    del data["architecture"]
    with pytest.raises(KeyError):
        Task.from_dict(data)


def test_enumerate_response():
    response = TaskEnumerateResponse.from_dict(
        {
            "items": [_task(), _task(id=43, status=9)],
            "numPages": 5,
            "page": 0,
            "hasPrevious": False,
            "hasNext": True,
        }
    )
    assert [t.id for t in response.items] == [42, 43]
    assert response.items[1].status is BuildStatus.FAILED
    assert response.num_pages == 5
    assert response.has_next is True
    assert response.has_previous is False