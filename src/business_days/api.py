"""Module-level calendar functions bound to the configured default calendar.

The default :class:`BusinessCalendar` is built once, at import time, from
:class:`ParameterLoader` and the bundled holiday tables. Every function takes
and returns canonical ``YYYY-MM-DD`` strings (``date`` and ``datetime``
arguments are accepted too).
"""

from datetime import datetime
from typing import List

from business_days.core.datetime.date_normalizer import DateLike
from business_days.core.walker.business_calendar import BusinessCalendar
from business_days.utils.config.parameters import ParameterLoader

_CALENDAR: BusinessCalendar = BusinessCalendar.from_parameters(ParameterLoader())


def default_calendar() -> BusinessCalendar:
    """Return the calendar the module functions delegate to."""
    return _CALENDAR


def parse_date(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` string into a home-offset midnight datetime."""
    return _CALENDAR.normalizer.parse(text)


def format_date(value: datetime) -> str:
    """Render a datetime as ``YYYY-MM-DD``."""
    return _CALENDAR.normalizer.format(value)


def add_days(value: DateLike, days: int) -> str:
    """Shift *value* by *days* civil days."""
    normalizer = _CALENDAR.normalizer
    return normalizer.format(normalizer.add_days(normalizer.to_home(value), days))


def is_weekend(value: DateLike) -> bool:
    """Return ``True`` on Saturdays and Sundays."""
    return _CALENDAR.is_weekend(value)


def is_public_holiday(value: DateLike) -> bool:
    """Return ``True`` on public holidays."""
    return _CALENDAR.is_public_holiday(value)


def is_market_closure(value: DateLike) -> bool:
    """Return ``True`` when the exchange is closed."""
    return _CALENDAR.is_market_closure(value)


def is_business_day(value: DateLike) -> bool:
    """Return ``True`` on weekdays that are not public holidays."""
    return _CALENDAR.is_business_day(value)


def is_trading_day(value: DateLike) -> bool:
    """Return ``True`` on weekdays the exchange is open."""
    return _CALENDAR.is_trading_day(value)


def next_business_day(value: DateLike, count: int = 1) -> str:
    """Return the *count*-th business day after *value*."""
    return _CALENDAR.next_business_day(value, count)


def previous_business_day(value: DateLike, count: int = 1) -> str:
    """Return the *count*-th business day before *value*."""
    return _CALENDAR.previous_business_day(value, count)


def next_trading_day(value: DateLike, count: int = 1) -> str:
    """Return the *count*-th trading day after *value*."""
    return _CALENDAR.next_trading_day(value, count)


def previous_trading_day(value: DateLike, count: int = 1) -> str:
    """Return the *count*-th trading day before *value*."""
    return _CALENDAR.previous_trading_day(value, count)


def business_days_between(start: DateLike, end: DateLike) -> List[str]:
    """Return the business days in the inclusive range."""
    return _CALENDAR.business_days_between(start, end)


def trading_days_between(start: DateLike, end: DateLike) -> List[str]:
    """Return the trading days in the inclusive range."""
    return _CALENDAR.trading_days_between(start, end)
