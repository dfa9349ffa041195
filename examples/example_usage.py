"""Example: build the daily report and recap from a clock export (no Flask).

Usage: python examples/example_usage.py punches.xlsx
"""

import sys

from hr_attendance.attendance.importer import read_punch_file
from hr_attendance.attendance.pipeline import process
from hr_attendance.recap.aggregator import aggregate


def main(path: str) -> None:
    with open(path, "rb") as fh:
        punches = read_punch_file(fh, path)

    records = process(punches)
    for r in records:
        print(r.employee_name, r.date, r.check_in_actual or "-", r.late_minutes, r.check_out_actual or "-", r.overtime_minutes)

    print()
    for s in aggregate(records):
        print(s)


if __name__ == "__main__":
    main(sys.argv[1])
