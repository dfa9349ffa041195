from __future__ import annotations

from typing import Hashable

from ...attendance.model import DayRecord
from .base import RecapGrouping


class EmployeeIdGrouping(RecapGrouping):
    """Group by employee id; the row takes the first name seen for that id."""

    def key(self, record: DayRecord) -> Hashable:
        return record.employee_id
