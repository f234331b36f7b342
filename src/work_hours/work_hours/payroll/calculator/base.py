from __future__ import annotations

from abc import ABC, abstractmethod

from ...settings.model import Settings


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def earnings(self, hours: float, settings: Settings) -> float:
        raise NotImplementedError
