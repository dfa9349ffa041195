from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Optional

from ..attendance.model import DayRecord, RawPunch
from ..attendance.pipeline import process
from ..attendance.policy import DEFAULT_POLICY, AttendancePolicy
from ..common.datetime_utils import round_half_up
from .grouping.base import RecapGrouping
from .grouping.name_grouping import EmployeeNameGrouping
from .model import EmployeeRecap


@dataclass
class _Bucket:
    employee_name: str
    dates: set[str] = field(default_factory=set)
    late: list[int] = field(default_factory=list)
    overtime: list[int] = field(default_factory=list)


def _average(values: list[int]) -> int:
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def aggregate(days: Iterable[DayRecord], grouping: Optional[RecapGrouping] = None) -> list[EmployeeRecap]:
    """Reduce daily records to one recap row per employee, sorted by name."""
    grouping = grouping or EmployeeNameGrouping()

    buckets: dict[Hashable, _Bucket] = {}
    for record in days:
        key = grouping.key(record)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = _Bucket(employee_name=record.employee_name)
            buckets[key] = bucket

        bucket.dates.add(record.date)
        if record.late_minutes > 0:
            bucket.late.append(record.late_minutes)
        if record.overtime_minutes > 0:
            bucket.overtime.append(record.overtime_minutes)

    recap = [
        EmployeeRecap(
            employee_name=b.employee_name,
            present_day_count=len(b.dates),
            late_event_count=len(b.late),
            total_late_minutes=sum(b.late),
            average_late_minutes=_average(b.late),
            overtime_event_count=len(b.overtime),
            total_overtime_minutes=sum(b.overtime),
            average_overtime_minutes=_average(b.overtime),
        )
        for b in buckets.values()
    ]
    recap.sort(key=lambda r: r.employee_name)
    return recap


def build_recap(
    rows: Iterable[RawPunch],
    policy: AttendancePolicy = DEFAULT_POLICY,
    grouping: Optional[RecapGrouping] = None,
) -> list[EmployeeRecap]:
    return aggregate(process(rows, policy), grouping)
