from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Loại chấm công suy ra từ cột "Tipe Absensi"."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"


class CheckInLabel(str, Enum):
    ON_TIME = "ON_TIME"
    LATE = "LATE"


class CheckOutLabel(str, Enum):
    ON_TIME = "ON_TIME"
    OVERTIME = "OVERTIME"
