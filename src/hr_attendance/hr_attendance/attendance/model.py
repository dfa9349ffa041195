from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import CHECK_IN_PUNCH_LABEL, CHECK_OUT_PUNCH_LABEL
from ..core.enums import CheckInLabel, CheckOutLabel, PunchType


@dataclass(frozen=True)
class RawPunch:
    """Thực thể miền (domain): một lần chấm công thô từ máy chấm công."""

    employee_id: str
    employee_name: str
    date: str
    time: str
    punch_type_label: str
    cloud_id: str = ""
    verification: str = ""
    position: str = ""
    location: str = ""

    @property
    def punch_type(self) -> Optional[PunchType]:
        if self.punch_type_label == CHECK_IN_PUNCH_LABEL:
            return PunchType.CHECK_IN
        if self.punch_type_label == CHECK_OUT_PUNCH_LABEL:
            return PunchType.CHECK_OUT
        return None


@dataclass(frozen=True)
class PairedDay:
    """One employee-day before classification: first check-in/check-out times."""

    employee_id: str
    employee_name: str
    position: str
    date: str
    check_in: str = ""
    check_out: str = ""


@dataclass(frozen=True)
class DayRecord:
    """Read-model phục vụ báo cáo/xuất file: one classified employee-day."""

    employee_id: str
    employee_name: str
    position: str
    date: str
    check_in_target_minutes: int
    check_in_actual: str
    late_minutes: int
    check_in_label: Optional[CheckInLabel]
    check_out_target_minutes: int
    check_out_actual: str
    overtime_minutes: int
    check_out_label: CheckOutLabel
