from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    """Persistence for the single process-wide overtime threshold cell."""

    def get_overtime_threshold(self) -> Optional[int]:
        """Stored value, or None if it was never written."""

        raise NotImplementedError

    def set_overtime_threshold(self, hours: int) -> None:
        raise NotImplementedError
