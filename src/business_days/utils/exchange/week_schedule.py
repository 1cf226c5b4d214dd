"""Typed and validated representation of a calendar's working week.

Each weekday carries a boolean flag telling whether it is a working day. Days
flagged ``False`` are the rest days (the weekend) of the calendar.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Iterator, List, Tuple

WEEK_ORDER: Tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class WeekSchedule:
    """Working-day flags indexed Monday = 0 … Sunday = 6."""

    __slots__ = ("_flags",)

    def __init__(self, days: Dict[str, bool], weekdays: List[str]) -> None:
        """Create a :class:`WeekSchedule` from a *day → bool* mapping."""
        if not isinstance(days, dict):
            raise TypeError("`days` must be `Dict[str, bool]`")
        allowed = [d.lower() for d in weekdays]
        if sorted(allowed) != sorted(WEEK_ORDER):
            raise ValueError(f"`weekdays` must name the seven days once: {weekdays}")
        normalized: Dict[str, bool] = {}
        for key, val in days.items():
            if not isinstance(key, str) or key.lower() not in allowed:
                raise ValueError(f"Unexpected key in `days`: '{key}'")
            if not isinstance(val, bool):
                raise TypeError(
                    f"Value for '{key}' must be bool, got {type(val).__name__}"
                )
            normalized[key.lower()] = val
        missing = [d for d in WEEK_ORDER if d not in normalized]
        if missing:
            raise ValueError(f"Missing keys in `days`: {', '.join(missing)}")
        flags = tuple(normalized[d] for d in WEEK_ORDER)
        if not any(flags):
            raise ValueError("At least one weekday must be a working day")
        self._flags: Tuple[bool, ...] = flags

    @staticmethod
    def monday_to_friday() -> WeekSchedule:
        """Return the usual Saturday/Sunday weekend schedule."""
        return WeekSchedule(
            {day: day not in ("saturday", "sunday") for day in WEEK_ORDER},
            list(WEEK_ORDER),
        )

    def is_workday(self, value: date | datetime) -> bool:
        """Return ``True`` if *value* falls on a working weekday."""
        return self._flags[value.weekday()]

    def is_rest_day(self, value: date | datetime) -> bool:
        """Return ``True`` if *value* falls on a weekend day."""
        return not self.is_workday(value)

    def workdays(self) -> List[str]:
        """Return the names of the working weekdays in calendar order."""
        return [day for day, flag in zip(WEEK_ORDER, self._flags) if flag]

    def rest_days(self) -> List[str]:
        """Return the names of the weekend days in calendar order."""
        return [day for day, flag in zip(WEEK_ORDER, self._flags) if not flag]

    def to_json(self) -> Dict[str, bool]:
        """Return a JSON-serialisable mapping of weekday flags."""
        return dict(zip(WEEK_ORDER, self._flags))

    def __iter__(self) -> Iterator[bool]:
        """Iterate over the seven weekday flags in calendar order."""
        yield from self._flags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekSchedule):
            return NotImplemented
        return self._flags == other._flags

    def __hash__(self) -> int:
        return hash(self._flags)

    def __repr__(self) -> str:
        return f"WeekSchedule(workdays={self.workdays()})"
