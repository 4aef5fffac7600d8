from __future__ import annotations


class TaskApiError(Exception):
    """Base for errors that map to a JSON ``{"error": ...}`` response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskApiError):
    status_code = 400


class RequiredFieldError(ValidationError):
    pass


class InvalidIdentifier(TaskApiError):
    status_code = 400


class InvalidPriority(TaskApiError):
    status_code = 400


class NotFound(TaskApiError):
    status_code = 404


class InternalError(TaskApiError):
    status_code = 500
