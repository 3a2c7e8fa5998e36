from __future__ import annotations

import logging

from ..common.validators import require_threshold
from ..core.constants import DEFAULT_OVERTIME_THRESHOLD
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class OvertimeSettingsService:
    """Use case: read/update the daily overtime threshold.

    Who may update it is decided by the caller (controller layer).
    """

    def __init__(self, settings: SettingsRepository, *, default_threshold: int = DEFAULT_OVERTIME_THRESHOLD):
        self._settings = settings
        self._default = require_threshold(default_threshold)

    def get_threshold(self) -> int:
        stored = self._settings.get_overtime_threshold()
        return self._default if stored is None else int(stored)

    def set_threshold(self, hours) -> int:
        hours = require_threshold(hours)
        self._settings.set_overtime_threshold(hours)
        logger.info("overtime threshold set to %d h/day", hours)
        return hours
