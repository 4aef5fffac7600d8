from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

from task_api.domain.enums import Priority, SortOrder
from task_api.domain.filters import TaskFilters
from task_api.infra.repository import InMemoryTaskRepository
from task_api.infra.seed import DEMO_TASKS, seed_demo_tasks


def _add(repo: InMemoryTaskRepository, title: str, **extra):
    return repo.create_task({"title": title, "description": f"{title} details", **extra})


def test_ids_start_at_one_and_follow_the_maximum(repo: InMemoryTaskRepository) -> None:
    first = _add(repo, "first")
    second = _add(repo, "second")
    third = _add(repo, "third")
    repo.delete_task(second.id)

    fourth = _add(repo, "fourth")

    assert (first.id, third.id, fourth.id) == (1, 3, 4)


def test_id_assignment_restarts_after_store_is_emptied(repo: InMemoryTaskRepository) -> None:
    for title in ("a", "b"):
        _add(repo, title)
    repo.delete_task(1)
    repo.delete_task(2)

    assert _add(repo, "again").id == 1


def test_deleting_the_highest_id_lets_it_be_assigned_again(repo: InMemoryTaskRepository) -> None:
    _add(repo, "a")
    _add(repo, "b")
    repo.delete_task(2)

    assert _add(repo, "c").id == 2


def test_create_stamps_equal_timestamps_and_defaults(repo: InMemoryTaskRepository) -> None:
    task = _add(repo, "one")

    assert task.created_at == task.updated_at
    assert task.completed is False
    assert task.priority is Priority.MEDIUM


def test_update_replaces_snapshot_and_refreshes_updated_at(repo: InMemoryTaskRepository) -> None:
    original = _add(repo, "one")

    updated = repo.update_task(original.id, {"priority": "high"})

    assert updated is not None
    assert updated.priority is Priority.HIGH
    assert updated.updated_at > original.updated_at
    assert updated.created_at == original.created_at
    assert original.priority is Priority.MEDIUM
    assert repo.get_task(original.id) == updated


def test_update_never_moves_updated_at_before_created_at() -> None:
    times = iter(
        [
            datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc),
            datetime(2026, 1, 1, 11, 0, tzinfo=timezone.utc),
        ]
    )
    repo = InMemoryTaskRepository(clock=lambda: next(times))
    task = _add(repo, "skewed")

    updated = repo.update_task(task.id, {})

    assert updated is not None
    assert updated.updated_at == task.created_at


def test_missing_tasks_return_none(repo: InMemoryTaskRepository) -> None:
    assert repo.get_task(5) is None
    assert repo.update_task(5, {"title": "x"}) is None
    assert repo.delete_task(5) is None


def test_list_filters_combine(repo: InMemoryTaskRepository) -> None:
    _add(repo, "low-open", priority="low")
    _add(repo, "high-done", priority="high", completed=True)
    _add(repo, "high-open", priority="high")

    done = repo.list_tasks(TaskFilters(completed=True))
    high_open = repo.list_tasks(TaskFilters(completed=False, priority="high"))
    unknown = repo.list_tasks(TaskFilters(priority="urgent"))

    assert [t.title for t in done] == ["high-done"]
    assert [t.title for t in high_open] == ["high-open"]
    assert unknown == []


def test_list_sorts_by_created_at(clock) -> None:
    repo = InMemoryTaskRepository(clock=clock)
    clock.now = datetime(2026, 3, 1, tzinfo=timezone.utc)
    _add(repo, "late")
    clock.now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    _add(repo, "early")
    clock.now = datetime(2026, 2, 1, tzinfo=timezone.utc)
    _add(repo, "middle")

    unsorted = [t.title for t in repo.list_tasks()]
    ascending = repo.list_tasks(TaskFilters(sort_by=SortOrder.CREATED_ASC))
    descending = repo.list_tasks(TaskFilters(sort_by=SortOrder.CREATED_DESC))

    assert unsorted == ["late", "early", "middle"]
    assert [t.title for t in ascending] == ["early", "middle", "late"]
    assert [t.title for t in descending] == ["late", "middle", "early"]


def test_sorting_keeps_store_order_for_equal_timestamps(clock) -> None:
    clock.step = timedelta(0)
    repo = InMemoryTaskRepository(clock=clock)
    for title in ("a", "b", "c"):
        _add(repo, title)

    descending = repo.list_tasks(TaskFilters(sort_by=SortOrder.CREATED_DESC))

    assert [t.title for t in descending] == ["a", "b", "c"]


def test_list_returns_a_copy(repo: InMemoryTaskRepository) -> None:
    _add(repo, "one")

    listed = repo.list_tasks()
    listed.clear()

    assert repo.count_tasks() == 1


def test_seed_demo_tasks_only_fills_an_empty_store(repo: InMemoryTaskRepository) -> None:
    assert seed_demo_tasks(repo) == len(DEMO_TASKS)
    assert seed_demo_tasks(repo) == 0

    tasks = repo.list_tasks()
    assert [t.id for t in tasks] == [1, 2, 3]
    assert [t.title for t in tasks] == [d["title"] for d in DEMO_TASKS]
    assert tasks[1].completed is True


def test_clear_empties_the_store(repo: InMemoryTaskRepository) -> None:
    _add(repo, "one")
    repo.clear()

    assert repo.count_tasks() == 0


def test_concurrent_creates_get_unique_ids(repo: InMemoryTaskRepository) -> None:
    workers, per_worker = 8, 50
    start = threading.Barrier(workers)

    def create_many(worker: int) -> None:
        start.wait()
        for i in range(per_worker):
            _add(repo, f"w{worker}-{i}")

    threads = [threading.Thread(target=create_many, args=(n,)) for n in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [task.id for task in repo.list_tasks()]
    assert len(ids) == workers * per_worker
    assert len(set(ids)) == len(ids)
    assert sorted(ids) == list(range(1, workers * per_worker + 1))
