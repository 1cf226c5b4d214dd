"""Public-holiday and market-closure lookups backed by static tables.

Two independent questions are answered for a canonical date string: is it a
public holiday, and is the exchange closed. The market-closure table is a
superset of the public-holiday table for every year the two share.

Years the tables do not cover are reported as "not a holiday". That keeps
walks going past the data horizon but silently gives wrong answers there, so
callers needing certainty can enable ``strict_coverage`` to get a
``ValueError`` instead.
"""

from __future__ import annotations

from typing import Any, Mapping

from business_days.core.holidays.holiday_table import HolidayTable
from business_days.utils.io.json_manager import JsonManager
from business_days.utils.io.logger import Logger

PUBLIC_HOLIDAYS_KEY = "public_holidays"
MARKET_CLOSURES_KEY = "market_closures"


class HolidayLookup:
    """Answers holiday questions against an immutable pair of tables."""

    __slots__ = ("_public", "_market", "_strict_coverage")

    def __init__(
        self,
        public: HolidayTable,
        market: HolidayTable,
        strict_coverage: bool = False,
    ) -> None:
        if not isinstance(public, HolidayTable) or not isinstance(market, HolidayTable):
            raise TypeError("`public` and `market` must be HolidayTable instances")
        if not public.issubset(market):
            year = next(
                y for y in public.years if market.covers(y) and public[y] - market[y]
            )
            raise ValueError(
                f"Market closures of {year} are missing public holidays: "
                f"{', '.join(sorted(public[year] - market[year]))}"
            )
        self._public = public
        self._market = market
        self._strict_coverage = bool(strict_coverage)

    @property
    def public_holidays(self) -> HolidayTable:
        """Return the public-holiday table."""
        return self._public

    @property
    def market_closures(self) -> HolidayTable:
        """Return the market-closure table."""
        return self._market

    @property
    def strict_coverage(self) -> bool:
        """Return whether uncovered years raise instead of answering ``False``."""
        return self._strict_coverage

    def covers(self, date_str: str) -> bool:
        """Return ``True`` if both tables hold the year of *date_str*."""
        year = date_str[:4]
        return self._public.covers(year) and self._market.covers(year)

    def _lookup(self, table: HolidayTable, date_str: str) -> bool:
        year = date_str[:4]
        if not table.covers(year):
            if self._strict_coverage:
                Logger.error(f"Year {year} is not covered by '{table.name}'")
                raise ValueError(f"Year {year} is not covered by '{table.name}'")
            Logger.debug(f"Year {year} is not covered by '{table.name}'")
            return False
        return table.contains(date_str)

    def is_public_holiday(self, date_str: str) -> bool:
        """Return ``True`` if *date_str* is a public holiday."""
        return self._lookup(self._public, date_str)

    def is_market_closure(self, date_str: str) -> bool:
        """Return ``True`` if the exchange is closed on *date_str*."""
        return self._lookup(self._market, date_str)

    @staticmethod
    def from_mapping(data: Any, strict_coverage: bool = False) -> HolidayLookup:
        """Build a lookup from ``{"public_holidays": ..., "market_closures": ...}``."""
        if not isinstance(data, Mapping):
            raise ValueError(f"Holiday data is invalid: {data!r}")
        for key in (PUBLIC_HOLIDAYS_KEY, MARKET_CLOSURES_KEY):
            if key not in data:
                raise ValueError(f"Holiday data is missing '{key}'")
        return HolidayLookup(
            HolidayTable(PUBLIC_HOLIDAYS_KEY, data[PUBLIC_HOLIDAYS_KEY]),
            HolidayTable(MARKET_CLOSURES_KEY, data[MARKET_CLOSURES_KEY]),
            strict_coverage=strict_coverage,
        )

    @staticmethod
    def from_file(filepath: str, strict_coverage: bool = False) -> HolidayLookup:
        """Load the holiday tables from a JSON file."""
        data = JsonManager.load(filepath)
        if data is None:
            Logger.error(f"Holiday tables could not be loaded from {filepath}")
            raise ValueError(f"Holiday tables could not be loaded from {filepath}")
        lookup = HolidayLookup.from_mapping(data, strict_coverage=strict_coverage)
        Logger.debug(
            f"Loaded holiday tables for {', '.join(lookup.public_holidays.years)}"
        )
        return lookup
