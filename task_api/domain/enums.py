from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SortOrder(StrEnum):
    CREATED_ASC = "createdAt"
    CREATED_DESC = "-createdAt"


PRIORITY_CHOICES = ", ".join(p.value for p in Priority)
