"""Pytest configuration and fixtures for taskwarrior-server tests."""

import json
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from taskwarrior_server.config import set_config

TASK_UUID = "a1b2c3d4-e5f6-7890-abcd-ef1234567890"
OTHER_UUID = "0f9e8d7c-6b5a-4321-8765-fedcba987654"


class ScriptedRunner:
    """Command runner that replays scripted outputs and records every call.

    Each scripted response is either the text the task command would print
    or an exception instance to raise.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str]) -> str:
        self.calls.append(list(args))
        if not self.responses:
            raise AssertionError(f"Unexpected task command: {args}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def mutating_calls(self) -> list[list[str]]:
        return [c for c in self.calls if c[-1] != "export"]


def make_task(**overrides) -> dict:
    """A Taskwarrior export record as a dict."""
    task = {
        "id": 1,
        "uuid": TASK_UUID,
        "description": "Test task",
        "status": "pending",
        "entry": "20250101T090000Z",
        "modified": "20250102T090000Z",
        "urgency": 5.0,
        "project": "test-project",
        "priority": "H",
        "tags": ["tag1", "tag2"],
        "due": "20250201T120000Z",
    }
    task.update(overrides)
    return {k: v for k, v in task.items() if v is not None}


def export_of(*tasks: dict) -> str:
    """Render tasks the way `task export` prints them with json.array=off."""
    return "\n".join(json.dumps(t) for t in tasks)


@pytest.fixture(autouse=True)
def reset_config():
    """Make every test read configuration from a clean environment."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def sample_task():
    """A single sample task as dict."""
    return make_task()


@pytest.fixture
def sample_tasks():
    """A list of sample tasks as dicts."""
    return [
        make_task(id=1, uuid=TASK_UUID, description="Task one", urgency=8.0, project="work", tags=["urgent"]),
        make_task(id=2, uuid=OTHER_UUID, description="Task two", urgency=3.0, project="personal", priority=None),
        make_task(
            id=3,
            uuid="11111111-2222-3333-4444-555555555555",
            description="Task three",
            urgency=12.5,
            project="work",
            tags=["review"],
        ),
    ]


@pytest.fixture
def mock_subprocess_success():
    """Mock subprocess.run to return successful task output."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=0, stdout="", stderr="")
        yield mock_run


@pytest.fixture
def mock_subprocess_error():
    """Mock subprocess.run to simulate a Taskwarrior error."""
    with patch("subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(returncode=2, stdout="", stderr="Database is locked.")
        yield mock_run


@pytest.fixture
def mock_subprocess_timeout():
    """Mock subprocess.run to simulate a timeout."""
    with patch("subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="task", timeout=30)
        yield mock_run
