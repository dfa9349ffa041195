from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..core.enums import PunchType
from .model import PairedDay, RawPunch

logger = logging.getLogger(__name__)

EmployeeKey = tuple[str, str]
EmployeeDay = tuple[EmployeeKey, str]


@dataclass
class _DaySlots:
    position: str
    check_in: str = ""
    check_out: str = ""

    def populated(self) -> bool:
        return bool(self.check_in or self.check_out)


def _group(rows: Iterable[RawPunch]) -> tuple[dict[EmployeeKey, dict[str, _DaySlots]], list[EmployeeDay]]:
    """Build employee -> date -> slots, keeping the first punch of each type.

    The employee key is the literal (id, name) pair, so the same id with a
    differently spelled name forms its own group. Also returns every
    (employee, date) in the order its first row arrived.
    """
    grouped: dict[EmployeeKey, dict[str, _DaySlots]] = {}
    arrival: list[EmployeeDay] = []

    for row in rows:
        employee = (row.employee_id, row.employee_name)
        days = grouped.setdefault(employee, {})
        slots = days.get(row.date)
        if slots is None:
            slots = _DaySlots(position=row.position)
            days[row.date] = slots
            arrival.append((employee, row.date))

        punch_type = row.punch_type
        if punch_type == PunchType.CHECK_IN and not slots.check_in:
            slots.check_in = row.time
        elif punch_type == PunchType.CHECK_OUT and not slots.check_out:
            slots.check_out = row.time

    return grouped, arrival


def pair(rows: Iterable[RawPunch]) -> list[PairedDay]:
    """Reduce raw punches to one PairedDay per (employee_id, date).

    Days where no row carried a check-in or check-out punch are dropped.
    When two name-groups share an id and a date, the group whose row
    introduced that date first wins; a group with empty slots yields to
    the next one.
    """
    grouped, arrival = _group(rows)

    emitted: set[tuple[str, str]] = set()
    out: list[PairedDay] = []
    for (employee_id, employee_name), day in arrival:
        slots = grouped[(employee_id, employee_name)][day]
        if not slots.populated():
            continue
        if (employee_id, day) in emitted:
            logger.debug("Skipping duplicate employee-day %s/%s (%s)", employee_id, day, employee_name)
            continue
        emitted.add((employee_id, day))
        out.append(
            PairedDay(
                employee_id=employee_id,
                employee_name=employee_name,
                position=slots.position,
                date=day,
                check_in=slots.check_in,
                check_out=slots.check_out,
            )
        )

    return out
