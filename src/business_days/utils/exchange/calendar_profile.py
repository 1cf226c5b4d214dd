"""Typed and validated description of the national calendar being served.

A profile ties together the market code, the country, the fixed civil-time
offset every date is anchored to and the working week.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List

from business_days.utils.exchange.week_schedule import WeekSchedule


@dataclass
class ProfileConfig:
    """Typed configuration container for initializing a CalendarProfile."""

    code: str
    country: str
    utc_offset: str
    week_schedule: WeekSchedule


class CalendarProfile:
    """Container for a market calendar's identity, offset and working week.

    * code: Market code (for example ``KRX``).
    * country: Country whose public holidays apply.
    * utc_offset: Fixed civil offset in ``±HH:MM`` form.
    * week_schedule: Working days of the week.
    """

    __slots__ = ("_code", "_country", "_utc_offset", "_week_schedule")

    def __init__(self, config: ProfileConfig) -> None:
        self._code = self._validate_str(config.code, "code")
        self._country = self._validate_str(config.country, "country")
        self._utc_offset = self._validate_offset(config.utc_offset)
        if not isinstance(config.week_schedule, WeekSchedule):
            raise TypeError("`week_schedule` must be an instance of WeekSchedule")
        self._week_schedule = config.week_schedule

    @staticmethod
    def _validate_str(value: str, field_name: str) -> str:
        if not isinstance(value, str) or len(value.strip()) == 0:
            raise ValueError(f"`{field_name}` must be a non-empty string")
        return value.strip().upper()

    @staticmethod
    def _validate_offset(value: str) -> str:
        if not isinstance(value, str):
            raise TypeError("`utc_offset` must be a string")
        value = value.strip()
        if not re.fullmatch(r"[+-]\d{2}:\d{2}", value):
            raise ValueError("`utc_offset` must be in '±HH:MM' format")
        hours, minutes = map(int, value[1:].split(":"))
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ValueError("`utc_offset` must be between -23:59 and +23:59")
        return value

    @property
    def code(self) -> str:
        """Return the market code."""
        return self._code

    @property
    def country(self) -> str:
        """Return the country code."""
        return self._country

    @property
    def utc_offset(self) -> str:
        """Return the fixed offset as ``±HH:MM``."""
        return self._utc_offset

    @property
    def utc_offset_minutes(self) -> int:
        """Return the fixed offset in minutes east of UTC."""
        hours, minutes = map(int, self._utc_offset[1:].split(":"))
        total = hours * 60 + minutes
        return -total if self._utc_offset.startswith("-") else total

    @property
    def week_schedule(self) -> WeekSchedule:
        """Return the working week of this calendar."""
        return self._week_schedule

    def to_json(self) -> Any:
        """Object to JSON."""
        return {
            "code": self.code,
            "country": self.country,
            "utc_offset": self.utc_offset,
            "sessions_days": self.week_schedule.to_json(),
        }

    @staticmethod
    def _get_validated_profiles(profiles: Any) -> List[Any]:
        if profiles is None:
            raise ValueError("Parameter 'calendar_profiles' is not defined")
        if not isinstance(profiles, list):
            raise ValueError(f"Parameter 'calendar_profiles' is invalid: {profiles}")
        cleaned: List[Any] = [p for p in profiles if p is not None]
        if len(cleaned) == 0:
            raise ValueError("Parameter 'calendar_profiles' is empty")
        return cleaned

    @staticmethod
    def _get_validated_default_code(profile_default: Any) -> str:
        if profile_default is None:
            raise ValueError("Parameter 'calendar_profile_default' is not defined.")
        if not isinstance(profile_default, str):
            raise ValueError(
                f"Parameter 'calendar_profile_default' is invalid: {profile_default}."
            )
        profile_default = profile_default.strip().upper()
        if len(profile_default) == 0:
            raise ValueError("Parameter 'calendar_profile_default' is empty.")
        return profile_default

    @staticmethod
    def _find_profile(code: str, profiles: List[Any]) -> Dict[str, Any]:
        found: Any = None
        for profile in profiles:
            tmp_code = profile.get("code") if isinstance(profile, dict) else None
            if isinstance(tmp_code, str) and tmp_code.strip().upper() == code:
                if found is not None:
                    raise ValueError(
                        f"Parameter 'calendar_profiles' has duplicated items: {code}"
                    )
                found = profile
        if found is None:
            raise ValueError(f"'{code}' is not defined in parameter 'calendar_profiles'")
        for key in ("country", "utc_offset"):
            value = found.get(key)
            if value is None:
                raise ValueError(f"{key.capitalize()} of '{code}' is not defined")
            if not isinstance(value, str):
                raise ValueError(f"{key.capitalize()} of '{code}' is invalid: '{value}'")
        sessions_days = found.get("sessions_days")
        if not isinstance(sessions_days, dict):
            raise ValueError(f"The sessions days of '{code}' are invalid: '{sessions_days}'")
        return found

    @staticmethod
    def from_parameter(
        profile_default: Any, profiles: Any, weekdays: List[str]
    ) -> CalendarProfile:
        """Select and validate the profile named *profile_default* from *profiles*."""
        code = CalendarProfile._get_validated_default_code(profile_default)
        profile = CalendarProfile._find_profile(
            code, CalendarProfile._get_validated_profiles(profiles)
        )
        return CalendarProfile(
            ProfileConfig(
                code=code,
                country=profile["country"],
                utc_offset=profile["utc_offset"],
                week_schedule=WeekSchedule(profile["sessions_days"], weekdays),
            )
        )
