from __future__ import annotations

import math
import re

from ..core.constants import MINUTES_PER_DAY

# Absent or garbled punch times resolve to midnight.
UNPARSEABLE_TIME_MINUTES = 0

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _leading_int(value: str):
    """Parse the leading signed integer of a string, like "08 " -> 8, "+8" -> 8 or "15abc" -> 15.

    Returns None when there is no integer prefix.
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _leading_float(value: str):
    """Numeric prefix of a string ("0.70833x" -> 0.70833), None when absent."""
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return None
    return float(match.group(1))


def _is_day_fraction(text: str) -> bool:
    return text.startswith("0.")


def _is_dot_separated_clock(text: str) -> bool:
    dot = text.find(".")
    return 0 < dot < 3


def parse_time_to_minutes(raw) -> int:
    """Convert a punch time into minutes since midnight.

    Supported encodings:
    - spreadsheet day fraction, e.g. "0.7083333333" -> 1020
    - colon clock, e.g. "17:00" or "17:00:59" -> 1020
    - dot clock, e.g. "17.00" -> 1020

    Numeric parts are read by prefix, so trailing junk is ignored ("0.70833x",
    "08 :15abc") and a leading sign is accepted ("+8:00").
    Anything else resolves to UNPARSEABLE_TIME_MINUTES; this never raises.
    """
    if raw is None:
        return UNPARSEABLE_TIME_MINUTES

    text = str(raw).strip()
    if not text:
        return UNPARSEABLE_TIME_MINUTES

    if _is_day_fraction(text):
        fraction = _leading_float(text)
        if fraction is not None and fraction < 1:
            return round_half_up(fraction * MINUTES_PER_DAY)

    if _is_dot_separated_clock(text):
        text = text.replace(".", ":", 1)

    parts = text.split(":")
    if len(parts) >= 2:
        hours = _leading_int(parts[0])
        minutes = _leading_int(parts[1])
        if hours is not None and minutes is not None:
            return hours * 60 + minutes

    return UNPARSEABLE_TIME_MINUTES


def format_minutes_as_clock(minutes: int) -> str:
    """480 -> "08:00"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
