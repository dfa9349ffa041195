from __future__ import annotations

from ..core.exceptions import ValidationError


def require_extension(filename: str, allowed: set[str]) -> str:
    """Return the lower-cased extension of filename, or raise if not allowed."""
    ext = filename.rsplit(".", 1)[-1].lower() if "." in (filename or "") else ""
    if ext not in allowed:
        raise ValidationError("Please select a valid CSV or Excel file")
    return ext
