from __future__ import annotations

import logging
import zipfile
from typing import IO, Any, Iterable, List, Mapping

import pandas as pd

from ..common.validators import require_extension
from ..core.exceptions import ValidationError
from .model import RawPunch

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"csv", "xlsx"}

# Header in the clock-device export -> RawPunch field.
FILE_COLUMNS = {
    "Cloud ID": "cloud_id",
    "ID": "employee_id",
    "Nama": "employee_name",
    "Tanggal Absensi": "date",
    "Jam Absensi": "time",
    "Verifikasi": "verification",
    "Tipe Absensi": "punch_type_label",
    "Jabatan": "position",
    "Kantor": "location",
}

# JSON key used by the dashboard API -> RawPunch field.
PAYLOAD_KEYS = {
    "cloud_id": "cloud_id",
    "id": "employee_id",
    "nama": "employee_name",
    "tanggal_absensi": "date",
    "jam_absensi": "time",
    "verifikasi": "verification",
    "tipe_absensi": "punch_type_label",
    "jabatan": "position",
    "kantor": "location",
}


def _text(value: Any) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value).strip()


def _punch_from_mapping(item: Mapping[str, Any], keys: Mapping[str, str]) -> RawPunch:
    fields = {field: _text(item.get(key)) for key, field in keys.items()}
    return RawPunch(**fields)


def punches_from_payload(data: Any) -> List[RawPunch]:
    """JSON body of POST /api/attendance -> RawPunch list.

    Accepts the dashboard keys (id, nama, ...) or the RawPunch field names.
    """
    if not isinstance(data, list):
        raise ValidationError("Invalid data format")

    out: List[RawPunch] = []
    for item in data:
        if not isinstance(item, Mapping):
            raise ValidationError("Invalid data format")
        if "employee_id" in item or "employee_name" in item:
            out.append(_punch_from_mapping(item, {f: f for f in PAYLOAD_KEYS.values()}))
        else:
            out.append(_punch_from_mapping(item, PAYLOAD_KEYS))
    return out


def punch_to_payload(p: RawPunch) -> dict:
    return {key: getattr(p, field) for key, field in PAYLOAD_KEYS.items()}


def _frame_to_punches(df: pd.DataFrame) -> List[RawPunch]:
    df = df.rename(columns=lambda c: str(c).strip())
    records: Iterable[dict] = df.to_dict(orient="records")
    return [_punch_from_mapping(r, FILE_COLUMNS) for r in records]


def read_punch_file(stream: IO[bytes], filename: str) -> List[RawPunch]:
    """Parse a clock-device export (.csv or .xlsx) into RawPunch rows.

    All cells are read as text so times like "0.3409722222" or "08.15" reach
    the time parser untouched.
    """
    ext = require_extension(filename, ALLOWED_EXTENSIONS)

    try:
        if ext == "csv":
            df = pd.read_csv(stream, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(stream, sheet_name=0, dtype=str, keep_default_na=False, engine="openpyxl")
    except (ValueError, zipfile.BadZipFile, pd.errors.ParserError) as e:
        logger.warning("Could not parse %s: %s", filename, e)
        raise ValidationError("No data found in file") from e

    punches = _frame_to_punches(df)
    if not punches:
        raise ValidationError("No data found in file")

    logger.info("Parsed %d punches from %s", len(punches), filename)
    return punches
