from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeRecap:
    """Tổng hợp chấm công theo nhân viên."""

    employee_name: str
    present_day_count: int
    late_event_count: int
    total_late_minutes: int
    average_late_minutes: int
    overtime_event_count: int
    total_overtime_minutes: int
    average_overtime_minutes: int
