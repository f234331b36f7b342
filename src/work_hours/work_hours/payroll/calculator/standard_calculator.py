from __future__ import annotations

from .base import PayrollCalculator
from ...settings.model import Settings


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hours * current hourly rate."""

    def earnings(self, hours: float, settings: Settings) -> float:
        return hours * settings.hourly_rate
