from hr_attendance.attendance.classifier import classify
from hr_attendance.attendance.model import PairedDay
from hr_attendance.attendance.policy import AttendancePolicy
from hr_attendance.core.enums import CheckInLabel, CheckOutLabel


def _day(check_in="", check_out=""):
    return PairedDay(employee_id="E1", employee_name="Alice", position="Staff", date="2024-01-10", check_in=check_in, check_out=check_out)


def test_late_and_overtime():
    r = classify(_day("08:15", "17:30"))

    assert r.late_minutes == 15
    assert r.check_in_label == CheckInLabel.LATE
    assert r.overtime_minutes == 30
    assert r.check_out_label == CheckOutLabel.OVERTIME
    assert r.check_in_target_minutes == 480
    assert r.check_out_target_minutes == 1020


def test_early_check_in_is_on_time_with_zero_minutes():
    r = classify(_day("07:45", "17:00"))

    assert r.late_minutes == 0
    assert r.check_in_label == CheckInLabel.ON_TIME
    assert r.overtime_minutes == 0
    assert r.check_out_label == CheckOutLabel.ON_TIME


def test_leaving_early_is_not_negative_overtime():
    r = classify(_day("08:00", "16:00"))

    assert r.overtime_minutes == 0
    assert r.check_out_label == CheckOutLabel.ON_TIME


def test_missing_check_in_leaves_label_blank():
    r = classify(_day(check_out="17:00"))

    assert r.check_in_actual == ""
    assert r.late_minutes == 0
    assert r.check_in_label is None


def test_missing_check_out_defaults_to_on_time():
    r = classify(_day(check_in="08:00"))

    assert r.check_out_actual == ""
    assert r.overtime_minutes == 0
    assert r.check_out_label == CheckOutLabel.ON_TIME


def test_spreadsheet_fraction_times():
    r = classify(_day("0.3409722222", "0.7083333333"))

    assert r.late_minutes == 11
    assert r.overtime_minutes == 0


def test_after_midnight_check_out_is_not_detected():
    r = classify(_day("22:00", "01:30"))

    assert r.overtime_minutes == 0
    assert r.late_minutes == 14 * 60


def test_garbled_check_in_counts_as_midnight():
    r = classify(_day("??", "17:00"))

    assert r.late_minutes == 0
    assert r.check_in_label == CheckInLabel.ON_TIME
    assert r.check_in_actual == "??"


def test_custom_policy():
    policy = AttendancePolicy.from_clock(check_in="09:00", check_out="18:00")
    r = classify(_day("09:05", "18:10"), policy)

    assert r.late_minutes == 5
    assert r.overtime_minutes == 10
    assert r.check_in_target_minutes == 540
    assert r.check_out_target_minutes == 1080
