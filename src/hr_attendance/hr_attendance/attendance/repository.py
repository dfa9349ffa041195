from __future__ import annotations

from typing import Protocol, Sequence

from .model import RawPunch


class PunchRepository(Protocol):
    def list_punches(self) -> Sequence[RawPunch]:
        raise NotImplementedError

    def append_punches(self, punches: Sequence[RawPunch]) -> int:
        """Append rows to the store and return how many were written."""

        raise NotImplementedError
