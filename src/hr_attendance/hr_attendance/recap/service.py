from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import DayRecord
from ..attendance.pipeline import process
from ..attendance.policy import DEFAULT_POLICY, AttendancePolicy
from ..attendance.repository import PunchRepository
from ..common.datetime_utils import format_minutes_as_clock
from ..core.enums import CheckInLabel, CheckOutLabel
from .aggregator import aggregate
from .grouping.base import RecapGrouping
from .model import EmployeeRecap

# (export header, row key) in the column order of the exported workbook.
DAILY_COLUMNS = [
    ("ID", "employee_id"),
    ("Nama", "employee_name"),
    ("Jabatan", "position"),
    ("Tanggal Absensi", "date"),
    ("Jam Masuk (Target)", "check_in_target"),
    ("Jam Masuk (Actual)", "check_in_actual"),
    ("Keterlambatan (menit)", "late_minutes"),
    ("Keterangan Masuk", "check_in_label"),
    ("Jam Pulang (Target)", "check_out_target"),
    ("Jam Pulang (Actual)", "check_out_actual"),
    ("Overtime (menit)", "overtime_minutes"),
    ("Keterangan Pulang", "check_out_label"),
]

RECAP_COLUMNS = [
    ("Nama Karyawan", "employee_name"),
    ("Jumlah Hadir", "present_day_count"),
    ("Jumlah Keterlambatan", "late_event_count"),
    ("Total Keterlambatan (Menit)", "total_late_minutes"),
    ("Rata-rata Keterlambatan", "average_late_minutes"),
    ("Jumlah Overtime", "overtime_event_count"),
    ("Total Overtime (Menit)", "total_overtime_minutes"),
    ("Rata-rata Overtime", "average_overtime_minutes"),
]

CHECK_IN_LABELS = {
    CheckInLabel.ON_TIME: "Tepat Waktu",
    CheckInLabel.LATE: "Terlambat",
}

CHECK_OUT_LABELS = {
    CheckOutLabel.ON_TIME: "Tepat Waktu",
    CheckOutLabel.OVERTIME: "Overtime",
}


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def daily_row(r: DayRecord) -> dict:
    return {
        "employee_id": r.employee_id,
        "employee_name": r.employee_name,
        "position": r.position,
        "date": r.date,
        "check_in_target": format_minutes_as_clock(r.check_in_target_minutes),
        "check_in_actual": r.check_in_actual,
        "late_minutes": r.late_minutes,
        "check_in_label": CHECK_IN_LABELS.get(r.check_in_label, ""),
        "check_out_target": format_minutes_as_clock(r.check_out_target_minutes),
        "check_out_actual": r.check_out_actual,
        "overtime_minutes": r.overtime_minutes,
        "check_out_label": CHECK_OUT_LABELS[r.check_out_label],
    }


def recap_row(r: EmployeeRecap) -> dict:
    return {key: getattr(r, key) for _, key in RECAP_COLUMNS}


class AttendanceReportService:
    """Daily report + per-employee recap over the whole punch feed."""

    def __init__(
        self,
        punches: PunchRepository,
        *,
        policy: Optional[AttendancePolicy] = None,
        grouping: Optional[RecapGrouping] = None,
    ):
        self._punches = punches
        self._policy = policy or DEFAULT_POLICY
        self._grouping = grouping

    def daily_records(self) -> list[DayRecord]:
        return process(self._punches.list_punches(), self._policy)

    def recap(self) -> list[EmployeeRecap]:
        return aggregate(self.daily_records(), self._grouping)

    def build_attendance_report(self) -> ReportData:
        records = self.daily_records()
        summary = aggregate(records, self._grouping)
        return ReportData(
            rows=[daily_row(r) for r in records],
            summary=[recap_row(s) for s in summary],
        )
