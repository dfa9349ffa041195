from __future__ import annotations

from dataclasses import dataclass

from .attendance.policy import AttendancePolicy
from .attendance.repository import PunchRepository
from .attendance.service import AttendanceService
from .attendance.sheets_punch_repository import SheetsPunchRepository
from .core.constants import DEFAULT_CHECK_IN_TARGET, DEFAULT_CHECK_OUT_TARGET, DEFAULT_PUNCH_WORKSHEET, DEFAULT_RECAP_GROUP_BY
from .recap.factory import RecapGroupingFactory
from .recap.service import AttendanceReportService
from .sheets.connection import SheetsConfig, SheetsConnection


@dataclass(frozen=True)
class Container:
    punches_repo: PunchRepository

    attendance_service: AttendanceService
    report_service: AttendanceReportService


def build_services(
    punches_repo: PunchRepository,
    *,
    check_in_target: str = DEFAULT_CHECK_IN_TARGET,
    check_out_target: str = DEFAULT_CHECK_OUT_TARGET,
    recap_group_by: str = DEFAULT_RECAP_GROUP_BY,
) -> Container:
    policy = AttendancePolicy.from_clock(check_in=check_in_target, check_out=check_out_target)
    grouping = RecapGroupingFactory().for_key(recap_group_by)

    return Container(
        punches_repo=punches_repo,
        attendance_service=AttendanceService(punches_repo),
        report_service=AttendanceReportService(punches_repo, policy=policy, grouping=grouping),
    )


def build_container(
    *,
    sheets_config: dict,
    check_in_target: str = DEFAULT_CHECK_IN_TARGET,
    check_out_target: str = DEFAULT_CHECK_OUT_TARGET,
    recap_group_by: str = DEFAULT_RECAP_GROUP_BY,
) -> Container:
    config = SheetsConfig(
        service_account_json=str(sheets_config.get("service_account_json") or ""),
        spreadsheet_id=str(sheets_config.get("spreadsheet_id") or ""),
        punch_worksheet=str(sheets_config.get("punch_worksheet") or DEFAULT_PUNCH_WORKSHEET),
    )
    conn = SheetsConnection.get_instance(config)

    return build_services(
        SheetsPunchRepository(conn),
        check_in_target=check_in_target,
        check_out_target=check_out_target,
        recap_group_by=recap_group_by,
    )
