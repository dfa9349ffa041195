from __future__ import annotations

import logging
from typing import IO, Any

from .importer import punch_to_payload, punches_from_payload, read_punch_file
from .repository import PunchRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases around the raw punch feed (list + import)."""

    def __init__(self, punches: PunchRepository):
        self._punches = punches

    def list_punches(self) -> list[dict]:
        return [punch_to_payload(p) for p in self._punches.list_punches()]

    def import_payload(self, data: Any) -> int:
        punches = punches_from_payload(data)
        count = self._punches.append_punches(punches)
        logger.info("Imported %d punches from JSON payload", count)
        return count

    def import_file(self, stream: IO[bytes], filename: str) -> int:
        punches = read_punch_file(stream, filename)
        count = self._punches.append_punches(punches)
        logger.info("Imported %d punches from %s", count, filename)
        return count
