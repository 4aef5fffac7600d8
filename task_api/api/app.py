from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound as RouteNotFound

from task_api.config import SETTINGS, Settings
from task_api.domain.errors import InternalError, TaskApiError
from task_api.infra.repository import Clock, InMemoryTaskRepository, utcnow
from task_api.infra.seed import seed_demo_tasks
from task_api.services.task_service import TaskService

from .routes import tasks_bp

logger = logging.getLogger(__name__)


def _error(message: str, status: int):
    return jsonify(error=message), status


def _requested_url() -> str:
    query = request.query_string.decode("utf-8", "replace")
    return f"{request.path}?{query}" if query else request.path


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(TaskApiError)
    def handle_task_error(exc: TaskApiError):
        return _error(exc.message, exc.status_code)

    @app.errorhandler(RouteNotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unknown_route(exc: HTTPException):
        return _error(f"Route {_requested_url()} not found", 404)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return _error(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        error = InternalError("Something went wrong on the server!")
        return _error(error.message, error.status_code)


def create_app(
    repo: InMemoryTaskRepository | None = None,
    settings: Settings | None = None,
    clock: Clock | None = None,
) -> Flask:
    """Build the Flask application around a single task store.

    ``settings`` defaults to the process-wide ``SETTINGS`` and ``clock`` to
    UTC wall time. When ``repo`` is omitted a fresh in-memory store is
    created with that clock and, if ``settings.seed_demo_tasks`` is set,
    filled with the demo tasks.
    """
    settings = settings or SETTINGS
    if repo is None:
        repo = InMemoryTaskRepository(clock=clock or utcnow)
        if settings.seed_demo_tasks:
            seed_demo_tasks(repo)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["task_repository"] = repo
    app.extensions["task_service"] = TaskService(repo)

    app.register_blueprint(tasks_bp)
    _register_error_handlers(app)
    return app
