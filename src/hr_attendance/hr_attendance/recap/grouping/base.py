from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable

from ...attendance.model import DayRecord


class RecapGrouping(ABC):
    """Strategy Pattern: decide which daily records belong to one recap row."""

    @abstractmethod
    def key(self, record: DayRecord) -> Hashable:
        raise NotImplementedError
