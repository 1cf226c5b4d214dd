"""Immutable year-keyed table of holiday dates.

A :class:`HolidayTable` maps a four-digit year string to the frozen set of
canonical ``YYYY-MM-DD`` strings that are holidays in that year. It is built
once from static data and never mutated afterwards.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, List, Mapping

_YEAR_PATTERN = re.compile(r"\d{4}")
_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


class HolidayTable(Mapping[str, FrozenSet[str]]):
    """Read-only ``year -> dates`` mapping with validated entries."""

    __slots__ = ("_name", "_by_year")

    def __init__(self, name: str, by_year: Mapping[str, Iterable[str]]) -> None:
        if not isinstance(name, str) or len(name.strip()) == 0:
            raise ValueError("`name` must be a non-empty string")
        if not isinstance(by_year, Mapping):
            raise TypeError("`by_year` must be `Mapping[str, Iterable[str]]`")
        self._name = name.strip()
        self._by_year: Mapping[str, FrozenSet[str]] = MappingProxyType(
            {
                self._validate_year(year): self._validate_dates(year, dates)
                for year, dates in by_year.items()
            }
        )

    def _validate_year(self, year: str) -> str:
        if not isinstance(year, str) or not _YEAR_PATTERN.fullmatch(year):
            raise ValueError(f"Invalid year key in '{self._name}': {year!r}")
        return year

    def _validate_dates(self, year: str, dates: Iterable[str]) -> FrozenSet[str]:
        if isinstance(dates, str) or not isinstance(dates, Iterable):
            raise TypeError(f"Dates of {year} in '{self._name}' must be a list")
        validated = []
        for value in dates:
            match = _DATE_PATTERN.fullmatch(value) if isinstance(value, str) else None
            if match is None:
                raise ValueError(f"Invalid date in '{self._name}' {year}: {value!r}")
            if match.group(1) != year:
                raise ValueError(
                    f"Date {value} is listed under {year} in '{self._name}'"
                )
            validated.append(value)
        return frozenset(validated)

    @property
    def name(self) -> str:
        """Return the table label used in log and error messages."""
        return self._name

    @property
    def years(self) -> List[str]:
        """Return the covered years in ascending order."""
        return sorted(self._by_year)

    def covers(self, year: str) -> bool:
        """Return ``True`` if *year* has an entry in the table."""
        return year in self._by_year

    def contains(self, date_str: str) -> bool:
        """Return ``True`` if *date_str* is listed; unknown years yield ``False``."""
        dates = self._by_year.get(date_str[:4])
        if dates is None:
            return False
        return date_str in dates

    def issubset(self, other: HolidayTable) -> bool:
        """Return ``True`` if every year shared with *other* is contained in it."""
        return all(
            dates <= other[year]
            for year, dates in self._by_year.items()
            if other.covers(year)
        )

    def __getitem__(self, year: str) -> FrozenSet[str]:
        return self._by_year[year]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_year)

    def __len__(self) -> int:
        return len(self._by_year)

    def __repr__(self) -> str:
        return f"HolidayTable(name={self._name!r}, years={self.years})"
