from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Sequence

import gspread
from google.auth.exceptions import GoogleAuthError

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def sheet_errors(action: str) -> Iterator[None]:
    """Translate gspread/credential failures into StoreError."""
    try:
        yield
    except (gspread.exceptions.GSpreadException, GoogleAuthError, RuntimeError, ValueError) as e:
        logger.exception("Google Sheets %s failed", action)
        raise StoreError(f"Failed to {action}") from e


def data_rows(values: Sequence[Sequence[str]]) -> List[List[str]]:
    """Drop the header row; a sheet with only a header yields no rows."""
    if not values or len(values) < 2:
        return []
    return [list(r) for r in values[1:]]


def cell(row: Sequence[str], index: int) -> str:
    """Read a cell by 0-based index; short rows (trailing blanks) read as ""."""
    if index >= len(row):
        return ""
    value = row[index]
    return "" if value is None else str(value)
