"""Central configuration manager.

This module loads the static calendar parameters, merges the values that can
be overridden from the environment (optionally through a ``.env`` file) and
exposes them through dictionary-style and method-based access.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from business_days.utils.config.path_utils import PathUtils
from business_days.utils.exchange.calendar_profile import CalendarProfile

_TRUE_VALUES = ("1", "true", "yes", "on")


class ParameterLoader:
    """Centralized configuration manager for the calendar parameters."""

    _HOLIDAYS_FILEPATH = "kr_holidays.json"

    _ENV_FILEPATH = ".env"

    def __init__(self, env_filepath: Optional[str] = None):
        self.env_filepath = Path(env_filepath or ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()
        self._profile: CalendarProfile = CalendarProfile.from_parameter(
            self.get("calendar_profile_default"),
            self.get("calendar_profiles"),
            self.get("weekdays"),
        )

    @staticmethod
    def _env_flag(name: str) -> bool:
        return os.getenv(name, "").strip().lower() in _TRUE_VALUES

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging constant and environment values."""
        constant_params = {
            "calendar_profile_default": "KRX",
            "calendar_profiles": [
                {
                    "code": "KRX",
                    "country": "KR",
                    "utc_offset": "+09:00",
                    "sessions_days": {
                        "monday": True,
                        "tuesday": True,
                        "wednesday": True,
                        "thursday": True,
                        "friday": True,
                        "saturday": False,
                        "sunday": False,
                    },
                },
            ],
            "weekdays": [
                "monday",
                "tuesday",
                "wednesday",
                "thursday",
                "friday",
                "saturday",
                "sunday",
            ],
        }
        env_params: Dict[str, Any] = {
            "strict_year_coverage": self._env_flag("STRICT_YEAR_COVERAGE"),
        }
        profile_override = os.getenv("CALENDAR_PROFILE", "").strip()
        if profile_override:
            env_params["calendar_profile_default"] = profile_override
        holidays_override = os.getenv("HOLIDAYS_FILEPATH", "").strip()
        path_params = {
            "holidays_filepath": holidays_override
            or PathUtils.build(self._HOLIDAYS_FILEPATH),
        }
        return {**constant_params, **env_params, **path_params}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]

    def profile(self) -> CalendarProfile:
        """Return the selected calendar profile."""
        return self._profile
