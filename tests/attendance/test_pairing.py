from hr_attendance.attendance.model import PairedDay
from hr_attendance.attendance.pairing import pair
from hr_attendance.core.enums import PunchType


def test_check_in_and_out_collapse_into_one_day(punch):
    days = pair([punch(time="08:15", kind="in"), punch(time="17:30", kind="out")])

    assert days == [
        PairedDay(employee_id="E1", employee_name="Alice", position="Staff", date="2024-01-10", check_in="08:15", check_out="17:30")
    ]


def test_first_check_in_wins(punch):
    days = pair([punch(time="08:05"), punch(time="07:50"), punch(time="17:00", kind="out")])

    assert len(days) == 1
    assert days[0].check_in == "08:05"


def test_first_check_out_wins(punch):
    days = pair([punch(time="17:10", kind="out"), punch(time="18:45", kind="out")])

    assert days[0].check_out == "17:10"
    assert days[0].check_in == ""


def test_check_out_before_check_in_in_input_order(punch):
    days = pair([punch(time="17:00", kind="out"), punch(time="08:00", kind="in")])

    assert days[0].check_in == "08:00"
    assert days[0].check_out == "17:00"


def test_unknown_punch_type_sets_no_slot(punch):
    days = pair([punch(kind="Istirahat"), punch(time="08:20", kind="in")])

    assert len(days) == 1
    assert days[0].check_in == "08:20"


def test_day_with_only_unknown_punches_is_dropped(punch):
    assert pair([punch(kind="Istirahat"), punch(kind="Lembur")]) == []


def test_punch_type_derivation(punch):
    assert punch(kind="in").punch_type == PunchType.CHECK_IN
    assert punch(kind="out").punch_type == PunchType.CHECK_OUT
    assert punch(kind="absensi masuk").punch_type is None


def test_position_comes_from_first_row_of_the_day(punch):
    days = pair([punch(kind="Istirahat", position="Supervisor"), punch(time="08:00", position="Staff")])

    assert days[0].position == "Supervisor"


def test_one_day_per_employee_and_date(punch):
    rows = [
        punch(date="2024-01-10"),
        punch(date="2024-01-11"),
        punch(employee_id="E2", employee_name="Budi", date="2024-01-10"),
        punch(date="2024-01-10", kind="out", time="17:00"),
    ]

    keys = [(d.employee_id, d.date) for d in pair(rows)]

    assert sorted(keys) == [("E1", "2024-01-10"), ("E1", "2024-01-11"), ("E2", "2024-01-10")]


def test_name_typo_forms_separate_group_on_other_dates(punch):
    rows = [
        punch(employee_name="Alice", date="2024-01-10"),
        punch(employee_name="Alicee", date="2024-01-11"),
    ]

    names = sorted((d.employee_name, d.date) for d in pair(rows))

    assert names == [("Alice", "2024-01-10"), ("Alicee", "2024-01-11")]


def test_name_typo_on_same_date_never_duplicates_the_day(punch):
    rows = [
        punch(employee_name="Alice", time="08:10"),
        punch(employee_name="Alicee", time="08:30"),
    ]

    days = pair(rows)

    assert len(days) == 1
    assert days[0].employee_name == "Alice"
    assert days[0].check_in == "08:10"


def test_pairing_is_idempotent(punch):
    rows = [
        punch(time="08:10"),
        punch(time="17:20", kind="out"),
        punch(employee_id="E2", employee_name="Budi", time="09:00"),
        punch(date="2024-01-11", time="17:00", kind="out"),
    ]

    assert set(pair(rows)) == set(pair(rows))


def test_empty_input():
    assert pair([]) == []


def test_shared_date_goes_to_the_row_that_introduced_it(punch):
    rows = [
        punch(employee_name="Alice", date="2024-01-11", time="08:00"),
        punch(employee_name="Alicee", date="2024-01-10", time="08:30", position="Lead"),
        punch(employee_name="Alice", date="2024-01-10", time="08:10"),
    ]

    days = {d.date: d for d in pair(rows)}

    assert len(days) == 2
    assert days["2024-01-11"].employee_name == "Alice"
    assert days["2024-01-10"].employee_name == "Alicee"
    assert days["2024-01-10"].check_in == "08:30"
    assert days["2024-01-10"].position == "Lead"


def test_shared_date_falls_to_next_group_when_first_has_no_slots(punch):
    rows = [
        punch(employee_name="Alicee", kind="Istirahat", position="Lead"),
        punch(employee_name="Alice", time="08:10"),
    ]

    days = pair(rows)

    assert len(days) == 1
    assert days[0].employee_name == "Alice"
    assert days[0].check_in == "08:10"
