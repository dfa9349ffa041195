from __future__ import annotations

import pytest

from hr_attendance.attendance.model import RawPunch
from hr_attendance.core.constants import CHECK_IN_PUNCH_LABEL, CHECK_OUT_PUNCH_LABEL


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def punch():
    """Factory for RawPunch rows with sensible defaults."""

    def _make(
        employee_id: str = "E1",
        employee_name: str = "Alice",
        date: str = "2024-01-10",
        time: str = "08:00",
        kind: str = "in",
        position: str = "Staff",
    ) -> RawPunch:
        label = {"in": CHECK_IN_PUNCH_LABEL, "out": CHECK_OUT_PUNCH_LABEL}.get(kind, kind)
        return RawPunch(
            employee_id=employee_id,
            employee_name=employee_name,
            date=date,
            time=time,
            punch_type_label=label,
            position=position,
            cloud_id="C-01",
            verification="Fingerprint",
            location="Head Office",
        )

    return _make
