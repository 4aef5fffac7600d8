from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import SortOrder


@dataclass(frozen=True)
class TaskFilters:
    completed: Optional[bool] = None
    priority: str | None = None
    sort_by: Optional[SortOrder] = None

    @classmethod
    def from_query(cls, args) -> TaskFilters:
        """Build filters from request query parameters.

        ``completed`` is true only for the literal ``"true"``; an empty
        ``priority`` is ignored; unknown ``sortBy`` values are ignored.
        """
        completed_raw = args.get("completed")
        completed = None if completed_raw is None else completed_raw == "true"

        priority = args.get("priority") or None

        sort_raw = args.get("sortBy")
        try:
            sort_by = SortOrder(sort_raw) if sort_raw else None
        except ValueError:
            sort_by = None

        return cls(completed=completed, priority=priority, sort_by=sort_by)
