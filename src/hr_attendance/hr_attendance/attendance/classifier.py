from __future__ import annotations

from ..common.datetime_utils import parse_time_to_minutes
from ..core.enums import CheckInLabel, CheckOutLabel
from .model import DayRecord, PairedDay
from .policy import DEFAULT_POLICY, AttendancePolicy


def classify(day: PairedDay, policy: AttendancePolicy = DEFAULT_POLICY) -> DayRecord:
    """Compute lateness/overtime for one employee-day.

    A missing check-in leaves the label empty (None); a missing check-out
    is ON_TIME.
    """
    late_minutes = 0
    check_in_label = None
    if day.check_in:
        late_minutes = max(0, parse_time_to_minutes(day.check_in) - policy.check_in_target_minutes)
        check_in_label = CheckInLabel.LATE if late_minutes > 0 else CheckInLabel.ON_TIME

    overtime_minutes = 0
    check_out_label = CheckOutLabel.ON_TIME
    if day.check_out:
        overtime_minutes = max(0, parse_time_to_minutes(day.check_out) - policy.check_out_target_minutes)
        if overtime_minutes > 0:
            check_out_label = CheckOutLabel.OVERTIME

    return DayRecord(
        employee_id=day.employee_id,
        employee_name=day.employee_name,
        position=day.position,
        date=day.date,
        check_in_target_minutes=policy.check_in_target_minutes,
        check_in_actual=day.check_in,
        late_minutes=late_minutes,
        check_in_label=check_in_label,
        check_out_target_minutes=policy.check_out_target_minutes,
        check_out_actual=day.check_out,
        overtime_minutes=overtime_minutes,
        check_out_label=check_out_label,
    )
