from __future__ import annotations

import re
from typing import Any, Mapping

from .enums import PRIORITY_CHOICES, Priority
from .errors import InvalidIdentifier, InvalidPriority, RequiredFieldError, ValidationError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500

_TASK_ID_RE = re.compile(r"[+-]?\d+")
INVALID_TASK_ID = "Invalid task ID. ID must be a number."


def _check_text(value: Any, label: str, max_length: int) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} must be a non-empty string")
    if len(value.strip()) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")


def validate_task_fields(data: Mapping[str, Any]) -> None:
    """Check the task fields present in ``data``; absent fields are skipped.

    Fields are checked in the order title, description, completed, priority
    and the first violation is raised as :class:`ValidationError`.
    """
    if "title" in data:
        _check_text(data["title"], "Title", TITLE_MAX_LENGTH)

    if "description" in data:
        _check_text(data["description"], "Description", DESCRIPTION_MAX_LENGTH)

    if "completed" in data and not isinstance(data["completed"], bool):
        raise ValidationError("Completed field must be a boolean value")

    if "priority" in data:
        priority = data["priority"]
        if not isinstance(priority, str) or priority not in {p.value for p in Priority}:
            raise ValidationError(f"Priority must be one of: {PRIORITY_CHOICES}")


def validate_new_task(data: Mapping[str, Any]) -> None:
    validate_task_fields(data)

    for key, label in (("title", "Title"), ("description", "Description")):
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            raise RequiredFieldError(f"{label} is required and must be a non-empty string")


def parse_task_id(raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str) or not _TASK_ID_RE.fullmatch(raw.strip()):
        raise InvalidIdentifier(INVALID_TASK_ID)
    try:
        return int(raw.strip())
    except ValueError:
        # digit count over the interpreter's int conversion limit
        raise InvalidIdentifier(INVALID_TASK_ID) from None


def parse_priority_level(raw: Any) -> Priority:
    try:
        return Priority(raw)
    except ValueError:
        raise InvalidPriority(f"Priority level must be one of: {PRIORITY_CHOICES}") from None
