from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from task_api.api.app import create_app
from task_api.infra.repository import InMemoryTaskRepository
from task_api.services.task_service import TaskService


class FakeClock:
    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repo(clock: FakeClock) -> InMemoryTaskRepository:
    return InMemoryTaskRepository(clock=clock)


@pytest.fixture
def service(repo: InMemoryTaskRepository) -> TaskService:
    return TaskService(repo)


@pytest.fixture
def client(repo: InMemoryTaskRepository):
    app = create_app(repo=repo)
    app.config["TESTING"] = True
    return app.test_client()
