from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping

from ..common.validators import require_non_negative, require_non_negative_int
from ..core.exceptions import ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Settings

# Field names as they arrive from the presentation layer
_FIELDS = ("hourlyRate", "dailyHours", "workingDays", "targetHoursPerCycle")


class SettingsService:
    """Use case: view and edit a user's pay settings."""

    def __init__(self, users: UserRepository):
        self._users = users

    def _get_user(self, username: str) -> User:
        user = self._users.get_by_username(username)
        if not user:
            raise ValidationError("User does not exist")
        return user

    def get_settings(self, username: str) -> Settings:
        return self._get_user(username).settings

    def update_settings(self, username: str, changes: Mapping[str, Any]) -> Settings:
        """Apply field edits in a fixed order.

        Every value is validated before anything is saved, so a bad field
        leaves the stored settings untouched.
        """
        unknown = set(changes) - set(_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

        user = self._get_user(username)
        settings = user.settings
        if "hourlyRate" in changes:
            settings = settings.with_hourly_rate(require_non_negative(changes["hourlyRate"], "Hourly rate"))
        if "dailyHours" in changes:
            settings = settings.with_daily_hours(require_non_negative(changes["dailyHours"], "Daily hours"))
        if "workingDays" in changes:
            settings = settings.with_working_days(require_non_negative_int(changes["workingDays"], "Working days"))
        if "targetHoursPerCycle" in changes:
            settings = settings.with_target_hours(
                require_non_negative(changes["targetHoursPerCycle"], "Target hours per cycle")
            )

        if settings != user.settings:
            self._users.update(replace(user, settings=settings))
        return settings

    def set_hourly_rate(self, username: str, hourly_rate: Any) -> Settings:
        return self.update_settings(username, {"hourlyRate": hourly_rate})

    def set_daily_hours(self, username: str, daily_hours: Any) -> Settings:
        return self.update_settings(username, {"dailyHours": daily_hours})

    def set_working_days(self, username: str, working_days: Any) -> Settings:
        return self.update_settings(username, {"workingDays": working_days})

    def set_target_hours(self, username: str, target_hours: Any) -> Settings:
        return self.update_settings(username, {"targetHoursPerCycle": target_hours})
