"""Business-day and trading-day classification and day walking.

A :class:`BusinessCalendar` combines the working week with a
:class:`HolidayLookup`:

* business day: a working weekday that is not a public holiday;
* trading day: a working weekday on which the exchange is not closed.

The walkers start one day after (or before) the reference date and step one
civil day at a time until the requested number of qualifying days has been
seen. No iteration cap is applied; the holiday tables never contain runs of
closed days long enough to strand a walk.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

import pandas as pd  # type: ignore

from business_days.core.datetime.date_normalizer import DateLike, DateNormalizer
from business_days.core.holidays.holiday_lookup import HolidayLookup
from business_days.utils.config.parameters import ParameterLoader
from business_days.utils.exchange.week_schedule import WeekSchedule


class BusinessCalendar:
    """Stateless classifier and walker over one holiday lookup."""

    __slots__ = ("_lookup", "_normalizer", "_schedule")

    def __init__(
        self,
        lookup: HolidayLookup,
        normalizer: Optional[DateNormalizer] = None,
        schedule: Optional[WeekSchedule] = None,
    ) -> None:
        if not isinstance(lookup, HolidayLookup):
            raise TypeError("`lookup` must be an instance of HolidayLookup")
        self._lookup = lookup
        self._normalizer = normalizer or DateNormalizer()
        self._schedule = schedule or WeekSchedule.monday_to_friday()

    @staticmethod
    def from_parameters(params: ParameterLoader) -> BusinessCalendar:
        """Build the calendar described by the loaded configuration."""
        profile = params.profile()
        return BusinessCalendar(
            HolidayLookup.from_file(
                params.get("holidays_filepath"),
                strict_coverage=params.get("strict_year_coverage", False),
            ),
            DateNormalizer(profile.utc_offset_minutes),
            profile.week_schedule,
        )

    @property
    def lookup(self) -> HolidayLookup:
        """Return the holiday lookup."""
        return self._lookup

    @property
    def normalizer(self) -> DateNormalizer:
        """Return the date normalizer."""
        return self._normalizer

    def _is_weekend(self, day: datetime) -> bool:
        return self._schedule.is_rest_day(day)

    def _is_business(self, day: datetime) -> bool:
        return not self._is_weekend(day) and not self._lookup.is_public_holiday(
            self._normalizer.format(day)
        )

    def _is_trading(self, day: datetime) -> bool:
        return not self._is_weekend(day) and not self._lookup.is_market_closure(
            self._normalizer.format(day)
        )

    def is_weekend(self, value: DateLike) -> bool:
        """Return ``True`` if *value* is a Saturday or Sunday in the home offset."""
        return self._is_weekend(self._normalizer.to_home(value))

    def is_public_holiday(self, value: DateLike) -> bool:
        """Return ``True`` if *value* is a public holiday."""
        day = self._normalizer.to_home(value)
        return self._lookup.is_public_holiday(self._normalizer.format(day))

    def is_market_closure(self, value: DateLike) -> bool:
        """Return ``True`` if the exchange is closed on *value*."""
        day = self._normalizer.to_home(value)
        return self._lookup.is_market_closure(self._normalizer.format(day))

    def is_business_day(self, value: DateLike) -> bool:
        """Return ``True`` for a weekday that is not a public holiday."""
        return self._is_business(self._normalizer.to_home(value))

    def is_trading_day(self, value: DateLike) -> bool:
        """Return ``True`` for a weekday on which the exchange is open."""
        return self._is_trading(self._normalizer.to_home(value))

    @staticmethod
    def _validate_count(count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count <= 0:
            raise ValueError("count must be a positive number")

    def _walk(
        self,
        value: DateLike,
        step: int,
        count: int,
        qualifies: Callable[[datetime], bool],
    ) -> str:
        self._validate_count(count)
        day = self._normalizer.to_home(value)
        found = 0
        while found < count:
            day = DateNormalizer.add_days(day, step)
            if qualifies(day):
                found += 1
        return self._normalizer.format(day)

    def next_business_day(self, value: DateLike, count: int = 1) -> str:
        """Return the *count*-th business day after *value*."""
        return self._walk(value, 1, count, self._is_business)

    def previous_business_day(self, value: DateLike, count: int = 1) -> str:
        """Return the *count*-th business day before *value*."""
        return self._walk(value, -1, count, self._is_business)

    def next_trading_day(self, value: DateLike, count: int = 1) -> str:
        """Return the *count*-th trading day after *value*."""
        return self._walk(value, 1, count, self._is_trading)

    def previous_trading_day(self, value: DateLike, count: int = 1) -> str:
        """Return the *count*-th trading day before *value*."""
        return self._walk(value, -1, count, self._is_trading)

    def _days_between(
        self, start: DateLike, end: DateLike, qualifies: Callable[[datetime], bool]
    ) -> List[str]:
        start_day = self._normalizer.to_home(start)
        end_day = self._normalizer.to_home(end)
        if start_day > end_day:
            return []
        days = pd.date_range(start=start_day, end=end_day, freq="D")
        return [
            self._normalizer.format(ts.to_pydatetime())
            for ts in days
            if qualifies(ts.to_pydatetime())
        ]

    def business_days_between(self, start: DateLike, end: DateLike) -> List[str]:
        """Return the business days from *start* to *end*, both inclusive."""
        return self._days_between(start, end, self._is_business)

    def trading_days_between(self, start: DateLike, end: DateLike) -> List[str]:
        """Return the trading days from *start* to *end*, both inclusive."""
        return self._days_between(start, end, self._is_trading)
