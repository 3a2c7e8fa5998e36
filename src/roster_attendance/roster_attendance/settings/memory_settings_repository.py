from __future__ import annotations

from typing import Optional

from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, overtime_threshold: Optional[int] = None):
        self._overtime_threshold = overtime_threshold

    def get_overtime_threshold(self) -> Optional[int]:
        return self._overtime_threshold

    def set_overtime_threshold(self, hours: int) -> None:
        self._overtime_threshold = int(hours)
