from __future__ import annotations

import logging
from typing import Iterable

from .classifier import classify
from .model import DayRecord, RawPunch
from .pairing import pair
from .policy import DEFAULT_POLICY, AttendancePolicy

logger = logging.getLogger(__name__)


def process(rows: Iterable[RawPunch], policy: AttendancePolicy = DEFAULT_POLICY) -> list[DayRecord]:
    """Raw punches -> classified daily records ordered by (name, date)."""
    rows = list(rows)
    records = [classify(day, policy) for day in pair(rows)]
    records.sort(key=lambda r: (r.employee_name, r.date))
    logger.debug("Processed %d punches into %d daily records", len(rows), len(records))
    return records
