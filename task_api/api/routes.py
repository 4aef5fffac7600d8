from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from task_api.domain.errors import ValidationError
from task_api.domain.filters import TaskFilters
from task_api.services.task_service import TaskService

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__)

ENDPOINTS = (
    ("GET", "/tasks", "Get all tasks"),
    ("GET", "/tasks/:id", "Get a specific task"),
    ("POST", "/tasks", "Create a new task"),
    ("PUT", "/tasks/:id", "Update a task"),
    ("DELETE", "/tasks/:id", "Delete a task"),
    ("GET", "/tasks/priority/:level", "Get tasks by priority level"),
)


def _service() -> TaskService:
    return current_app.extensions["task_service"]


def _payload() -> dict:
    if request.mimetype == "application/x-www-form-urlencoded":
        return request.form.to_dict()
    if not request.get_data():
        return {}
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _listing(tasks):
    return jsonify(success=True, data=[task.to_dict() for task in tasks], count=len(tasks))


@tasks_bp.get("/tasks")
def list_tasks():
    tasks = _service().list_tasks(TaskFilters.from_query(request.args))
    return _listing(tasks)


@tasks_bp.get("/tasks/<task_id>")
def get_task(task_id: str):
    task = _service().get_task(task_id)
    return jsonify(success=True, data=task.to_dict())


@tasks_bp.post("/tasks")
def create_task():
    task = _service().create_task(_payload())
    logger.info("Created task id=%s", task.id)
    return jsonify(success=True, data=task.to_dict(), message="Task created successfully"), 201


@tasks_bp.put("/tasks/<task_id>")
def update_task(task_id: str):
    task = _service().update_task(task_id, _payload())
    logger.info("Updated task id=%s", task.id)
    return jsonify(success=True, data=task.to_dict(), message="Task updated successfully")


@tasks_bp.delete("/tasks/<task_id>")
def delete_task(task_id: str):
    task = _service().delete_task(task_id)
    logger.info("Deleted task id=%s", task.id)
    return jsonify(success=True, data=task.to_dict(), message="Task deleted successfully")


@tasks_bp.get("/tasks/priority/<level>")
def list_by_priority(level: str):
    return _listing(_service().list_by_priority(level))
