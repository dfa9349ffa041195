from __future__ import annotations

import logging
from typing import List, Sequence

from ..sheets.connection import SheetsConnection
from ..sheets.sheets_base import cell, data_rows, sheet_errors
from .model import RawPunch
from .repository import PunchRepository

logger = logging.getLogger(__name__)

# Column order of the attendance_import worksheet:
# A: cloud_id  B: id  C: nama  D: tanggal_absensi  E: jam_absensi
# F: verifikasi  G: tipe_absensi  H: jabatan  I: kantor
COL_CLOUD_ID = 0
COL_ID = 1
COL_NAME = 2
COL_DATE = 3
COL_TIME = 4
COL_VERIFICATION = 5
COL_PUNCH_TYPE = 6
COL_POSITION = 7
COL_LOCATION = 8


def row_to_punch(row: Sequence[str]) -> RawPunch:
    return RawPunch(
        cloud_id=cell(row, COL_CLOUD_ID),
        employee_id=cell(row, COL_ID),
        employee_name=cell(row, COL_NAME),
        date=cell(row, COL_DATE),
        time=cell(row, COL_TIME),
        verification=cell(row, COL_VERIFICATION),
        punch_type_label=cell(row, COL_PUNCH_TYPE),
        position=cell(row, COL_POSITION),
        location=cell(row, COL_LOCATION),
    )


def punch_to_row(p: RawPunch) -> List[str]:
    return [
        p.cloud_id,
        p.employee_id,
        p.employee_name,
        p.date,
        p.time,
        p.verification,
        p.punch_type_label,
        p.position,
        p.location,
    ]


class SheetsPunchRepository(PunchRepository):
    def __init__(self, conn: SheetsConnection, *, worksheet: str | None = None):
        self._conn = conn
        self._worksheet = worksheet or conn.config.punch_worksheet

    def list_punches(self) -> Sequence[RawPunch]:
        with sheet_errors("fetch attendance data"):
            values = self._conn.worksheet(self._worksheet).get_all_values()
        punches = [row_to_punch(r) for r in data_rows(values)]
        logger.info("Read %d punches from worksheet %s", len(punches), self._worksheet)
        return punches

    def append_punches(self, punches: Sequence[RawPunch]) -> int:
        if not punches:
            return 0
        values = [punch_to_row(p) for p in punches]
        with sheet_errors("import attendance data"):
            self._conn.worksheet(self._worksheet).append_rows(values, value_input_option="USER_ENTERED")
        logger.info("Appended %d punches to worksheet %s", len(values), self._worksheet)
        return len(values)
