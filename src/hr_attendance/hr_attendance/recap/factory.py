from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError
from .grouping.base import RecapGrouping
from .grouping.id_grouping import EmployeeIdGrouping
from .grouping.name_grouping import EmployeeNameGrouping


@dataclass
class RecapGroupingFactory:
    """Factory Pattern: choose the recap grouping from a config value."""

    def for_key(self, group_by: str) -> RecapGrouping:
        value = (group_by or "").strip().lower()
        if value in {"", "name", "employee_name"}:
            return EmployeeNameGrouping()
        if value in {"id", "employee_id"}:
            return EmployeeIdGrouping()
        raise ValidationError(f"Unknown recap grouping: {group_by!r}")
