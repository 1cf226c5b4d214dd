"""Unit tests for the DateNormalizer fixed-offset date helpers."""

import time
import unittest
from datetime import date, datetime, timedelta
from unittest.mock import patch

import pytz  # type: ignore

from business_days.core.datetime.date_normalizer import DateNormalizer


class TestDateNormalizer(unittest.TestCase):
    """Parsing, rendering and shifting of canonical date strings."""

    def setUp(self):
        self.normalizer = DateNormalizer()

    def test_parse_anchors_midnight_in_home_offset(self):
        """Parsed values are midnight at +09:00."""
        value = self.normalizer.parse("2025-08-25")
        self.assertEqual((value.year, value.month, value.day), (2025, 8, 25))
        self.assertEqual((value.hour, value.minute), (0, 0))
        self.assertEqual(value.utcoffset(), timedelta(hours=9))

    def test_format_round_trips_canonical_strings(self):
        """format(parse(s)) returns s for boundary dates."""
        for text in ("2024-02-29", "2024-12-31", "2025-01-01", "2000-02-29", "0999-12-31"):
            self.assertEqual(self.normalizer.format(self.normalizer.parse(text)), text)

    def test_format_zero_pads_short_years(self):
        """Years below 1000 keep four digits."""
        value = self.normalizer.parse("0999-12-31")
        self.assertEqual(value.year, 999)
        self.assertEqual(self.normalizer.format(value), "0999-12-31")
        self.assertEqual(
            self.normalizer.format(DateNormalizer.add_days(value, 1)), "1000-01-01"
        )

    def test_only_canonical_strings_are_parsed(self):
        """Day-first strings are rejected rather than misread."""
        with self.assertRaises(ValueError):
            self.normalizer.parse("15/08/2025")

    def test_format_drops_time_of_day(self):
        """Only the date portion is rendered."""
        value = self.normalizer.parse("2025-03-03") + timedelta(hours=23, minutes=59)
        self.assertEqual(self.normalizer.format(value), "2025-03-03")

    def test_add_days_rolls_over_month_and_leap_february(self):
        """Day shifts cross month, year and leap-day boundaries."""
        parse, fmt = self.normalizer.parse, self.normalizer.format
        self.assertEqual(fmt(DateNormalizer.add_days(parse("2024-02-28"), 1)), "2024-02-29")
        self.assertEqual(fmt(DateNormalizer.add_days(parse("2024-02-28"), 2)), "2024-03-01")
        self.assertEqual(fmt(DateNormalizer.add_days(parse("2023-02-28"), 1)), "2023-03-01")
        self.assertEqual(fmt(DateNormalizer.add_days(parse("2025-01-01"), -1)), "2024-12-31")
        self.assertEqual(fmt(DateNormalizer.add_days(parse("2024-12-31"), 366)), "2026-01-01")

    def test_weekday_is_computed_in_home_offset(self):
        """2025-08-23 is a Saturday, 2025-08-25 a Monday."""
        self.assertEqual(self.normalizer.weekday("2025-08-23"), 5)
        self.assertEqual(self.normalizer.weekday("2025-08-25"), 0)

    def test_to_home_converts_aware_datetimes(self):
        """20:00 UTC on a Friday is already Saturday in Seoul."""
        value = pytz.utc.localize(datetime(2025, 8, 22, 20, 0))
        home = self.normalizer.to_home(value)
        self.assertEqual(self.normalizer.format(home), "2025-08-23")
        self.assertEqual(home.utcoffset(), timedelta(hours=9))

    def test_to_home_reads_naive_values_as_home_time(self):
        """Naive datetimes and dates keep their calendar day."""
        self.assertEqual(
            self.normalizer.format(self.normalizer.to_home(datetime(2025, 8, 22, 23, 0))),
            "2025-08-22",
        )
        self.assertEqual(
            self.normalizer.format(self.normalizer.to_home(date(2025, 8, 22))),
            "2025-08-22",
        )

    def test_to_home_rejects_unsupported_types(self):
        """Non-date values raise TypeError and are logged."""
        with patch("business_days.utils.io.logger.Logger.error") as mock_log:
            with self.assertRaises(TypeError):
                self.normalizer.to_home(20250825)  # type: ignore
            self.assertIn("Unsupported date value", mock_log.call_args[0][0])

    def test_malformed_string_propagates_strptime_error(self):
        """Malformed input surfaces the parser's ValueError."""
        with self.assertRaises(ValueError):
            self.normalizer.parse("2025/08/25")

    def test_invalid_offsets(self):
        """Offsets must be integers within a day."""
        with self.assertRaises(TypeError):
            DateNormalizer(9.0)  # type: ignore
        with self.assertRaises(TypeError):
            DateNormalizer(True)  # type: ignore
        with self.assertRaises(ValueError):
            DateNormalizer(1440)

    def test_constructor_takes_only_the_offset(self):
        """The text format is fixed and no timezone object is exposed."""
        with self.assertRaises(TypeError):
            DateNormalizer(540, "%d/%m/%Y")  # type: ignore
        self.assertFalse(hasattr(self.normalizer, "tz"))
        self.assertEqual(self.normalizer.utc_offset_minutes, 540)

    def test_other_offsets(self):
        """A negative offset shifts the calendar day of aware values."""
        normalizer = DateNormalizer(-300)
        value = pytz.utc.localize(datetime(2025, 1, 1, 3, 0))
        self.assertEqual(normalizer.format(normalizer.to_home(value)), "2024-12-31")
        self.assertEqual(normalizer.utc_offset_minutes, -300)


@unittest.skipUnless(hasattr(time, "tzset"), "requires time.tzset")
class TestHostTimezoneIndependence(unittest.TestCase):
    """Results must not depend on the process TZ setting."""

    def test_same_results_under_different_host_timezones(self):
        """Parsing and weekday arithmetic ignore the host timezone."""
        normalizer = DateNormalizer()
        results = []
        with patch.dict("os.environ", {}):
            for tz_name in ("UTC", "America/Los_Angeles", "Pacific/Kiritimati"):
                with patch.dict("os.environ", {"TZ": tz_name}):
                    time.tzset()
                    day = normalizer.parse("2025-08-29")
                    results.append(
                        (
                            normalizer.format(DateNormalizer.add_days(day, 1)),
                            day.weekday(),
                        )
                    )
        time.tzset()
        self.assertEqual(results, [("2025-08-30", 4)] * 3)
