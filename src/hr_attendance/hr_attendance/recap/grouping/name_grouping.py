from __future__ import annotations

from typing import Hashable

from ...attendance.model import DayRecord
from .base import RecapGrouping


class EmployeeNameGrouping(RecapGrouping):
    """Group by display name (two ids sharing a name merge into one row)."""

    def key(self, record: DayRecord) -> Hashable:
        return record.employee_name
