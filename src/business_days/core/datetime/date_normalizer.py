"""Conversion between canonical ``YYYY-MM-DD`` strings and offset-anchored dates.

Every date handled by the calendar is a timezone-aware :class:`datetime` set to
midnight in one fixed civil offset (``+09:00`` for Korea). Day-of-week and
day arithmetic are therefore identical whatever timezone the host runs in.
"""

from datetime import date, datetime, timedelta
from typing import Union

import pytz  # type: ignore

from business_days.utils.io.logger import Logger

DateLike = Union[str, date, datetime]

CANONICAL_FORMAT = "%Y-%m-%d"


class DateNormalizer:
    """Parses, renders and shifts calendar dates in a fixed civil offset."""

    __slots__ = ("_offset_minutes", "_tz")

    def __init__(self, utc_offset_minutes: int = 540):
        if isinstance(utc_offset_minutes, bool) or not isinstance(
            utc_offset_minutes, int
        ):
            raise TypeError("`utc_offset_minutes` must be an int")
        if not -1440 < utc_offset_minutes < 1440:
            raise ValueError(
                f"`utc_offset_minutes` out of range: {utc_offset_minutes}"
            )
        self._offset_minutes = utc_offset_minutes
        self._tz = pytz.FixedOffset(utc_offset_minutes)

    @property
    def utc_offset_minutes(self) -> int:
        """Return the anchoring offset in minutes east of UTC."""
        return self._offset_minutes

    def parse(self, text: str) -> datetime:
        """Return midnight of the ``YYYY-MM-DD`` *text* in the home offset.

        Malformed strings are not validated here; whatever
        :meth:`datetime.strptime` raises propagates to the caller.
        """
        return self._tz.localize(datetime.strptime(text, CANONICAL_FORMAT))

    def format(self, value: datetime) -> str:
        """Render *value* as ``YYYY-MM-DD``, dropping the time of day."""
        return value.date().isoformat()

    @staticmethod
    def add_days(value: datetime, days: int) -> datetime:
        """Shift *value* by *days* civil days (negative moves backwards)."""
        return value + timedelta(days=days)

    def to_home(self, value: DateLike) -> datetime:
        """Normalize a string, ``date`` or ``datetime`` to home-offset midnight.

        Naive datetimes are read as home civil time; aware ones are converted
        to the home offset before the time of day is dropped.
        """
        if isinstance(value, str):
            return self.parse(value)
        if isinstance(value, datetime):
            if value.tzinfo is not None and value.utcoffset() is not None:
                value = value.astimezone(self._tz)
            return self._tz.localize(datetime(value.year, value.month, value.day))
        if isinstance(value, date):
            return self._tz.localize(datetime(value.year, value.month, value.day))
        Logger.error(f"Unsupported date value: {value!r}")
        raise TypeError(
            f"Expected str, date or datetime, got {type(value).__name__}"
        )

    def weekday(self, value: DateLike) -> int:
        """Return the weekday (Monday = 0) of *value* in the home offset."""
        return self.to_home(value).weekday()
