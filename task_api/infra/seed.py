from __future__ import annotations

import logging

from task_api.domain.enums import Priority

from .repository import InMemoryTaskRepository

logger = logging.getLogger(__name__)

DEMO_TASKS = (
    {
        "title": "Complete Node.js homework",
        "description": "Finish the Node.js assignment",
        "completed": False,
        "priority": Priority.MEDIUM,
    },
    {
        "title": "Learn Express.js basics",
        "description": "Study Express.js fundamentals",
        "completed": True,
        "priority": Priority.HIGH,
    },
    {
        "title": "Build task manager application",
        "description": "Create a complete task manager",
        "completed": False,
        "priority": Priority.HIGH,
    },
)


def seed_demo_tasks(repo: InMemoryTaskRepository) -> int:
    if repo.count_tasks():
        return 0
    for data in DEMO_TASKS:
        repo.create_task(dict(data))
    logger.info("Seeded %s demo tasks", len(DEMO_TASKS))
    return len(DEMO_TASKS)
