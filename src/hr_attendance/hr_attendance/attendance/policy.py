from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import parse_time_to_minutes
from ..core.constants import DEFAULT_CHECK_IN_TARGET, DEFAULT_CHECK_OUT_TARGET


@dataclass(frozen=True)
class AttendancePolicy:
    """Office clock targets, in minutes since midnight."""

    check_in_target_minutes: int = 8 * 60
    check_out_target_minutes: int = 17 * 60

    @classmethod
    def from_clock(
        cls,
        *,
        check_in: str = DEFAULT_CHECK_IN_TARGET,
        check_out: str = DEFAULT_CHECK_OUT_TARGET,
    ) -> "AttendancePolicy":
        return cls(
            check_in_target_minutes=parse_time_to_minutes(check_in),
            check_out_target_minutes=parse_time_to_minutes(check_out),
        )


DEFAULT_POLICY = AttendancePolicy()
