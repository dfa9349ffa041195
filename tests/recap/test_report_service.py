from __future__ import annotations

from hr_attendance.attendance.policy import AttendancePolicy
from hr_attendance.recap.grouping.id_grouping import EmployeeIdGrouping
from hr_attendance.recap.service import DAILY_COLUMNS, RECAP_COLUMNS, AttendanceReportService


class FakePunchRepo:
    def __init__(self, rows):
        self._rows = rows
        self.calls = 0

    def list_punches(self):
        self.calls += 1
        return list(self._rows)

    def append_punches(self, punches):
        return 0


def test_report_rows_use_display_labels(punch):
    repo = FakePunchRepo([punch(time="08:15"), punch(time="17:30", kind="out")])

    report = AttendanceReportService(repo).build_attendance_report()

    assert report.rows == [
        {
            "employee_id": "E1",
            "employee_name": "Alice",
            "position": "Staff",
            "date": "2024-01-10",
            "check_in_target": "08:00",
            "check_in_actual": "08:15",
            "late_minutes": 15,
            "check_in_label": "Terlambat",
            "check_out_target": "17:00",
            "check_out_actual": "17:30",
            "overtime_minutes": 30,
            "check_out_label": "Overtime",
        }
    ]
    assert report.summary[0]["employee_name"] == "Alice"
    assert report.summary[0]["average_overtime_minutes"] == 30


def test_missing_punches_render_blank_and_on_time(punch):
    repo = FakePunchRepo([punch(time="17:00", kind="out"), punch(date="2024-01-11", time="07:50")])

    rows = AttendanceReportService(repo).build_attendance_report().rows

    assert rows[0]["check_in_label"] == ""
    assert rows[0]["check_out_label"] == "Tepat Waktu"
    assert rows[1]["check_in_label"] == "Tepat Waktu"
    assert rows[1]["check_out_actual"] == ""


def test_report_reads_feed_once(punch):
    repo = FakePunchRepo([punch()])

    AttendanceReportService(repo).build_attendance_report()

    assert repo.calls == 1


def test_policy_and_grouping_are_forwarded(punch):
    repo = FakePunchRepo(
        [
            punch(employee_id="E1", employee_name="Dewi", time="09:10"),
            punch(employee_id="E2", employee_name="Dewi", time="09:20"),
        ]
    )
    svc = AttendanceReportService(
        repo,
        policy=AttendancePolicy.from_clock(check_in="09:00", check_out="18:00"),
        grouping=EmployeeIdGrouping(),
    )

    recap = svc.recap()

    assert [r.total_late_minutes for r in recap] == [10, 20]
    assert svc.daily_records()[0].check_in_target_minutes == 540


def test_every_export_column_has_a_row_key(punch):
    report = AttendanceReportService(FakePunchRepo([punch()])).build_attendance_report()

    assert {key for _, key in DAILY_COLUMNS} == set(report.rows[0])
    assert {key for _, key in RECAP_COLUMNS} == set(report.summary[0])
