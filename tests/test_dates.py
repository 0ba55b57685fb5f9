"""
Tests for date parsing, day-of-year and elapsed years.
"""

from datetime import date, datetime, timezone

import pytest

from color_time.errors import InvalidArgument
from color_time.utils.dates import parse_date, day_of_year, elapsed_years


class TestParseDate:

    def test_free_form_string(self):
        assert parse_date('Aug 9th, 2015') == datetime(2015, 8, 9)

    def test_iso_string(self):
        assert parse_date('2015-08-09') == datetime(2015, 8, 9)

    def test_explicit_format(self):
        assert parse_date('09.08.2015', '%d.%m.%Y') == datetime(2015, 8, 9)

    def test_date_object(self):
        assert parse_date(date(2015, 8, 9)) == datetime(2015, 8, 9)

    def test_datetime_passthrough(self):
        value = datetime(2015, 8, 9, 13, 45)
        assert parse_date(value) is value

    def test_now(self, fixed_now):
        assert parse_date(None, now=fixed_now) == fixed_now
        assert parse_date('now', now=fixed_now) == fixed_now
        assert parse_date(' NOW ', now=fixed_now) == fixed_now

    def test_missing_year_from_reference_now(self):
        now = datetime(2030, 12, 31, 18, 30)
        assert parse_date('Aug 9', now=now) == datetime(2030, 8, 9)

    def test_now_defaults_to_current_time(self):
        before = datetime.now()
        assert parse_date() >= before

    @pytest.mark.parametrize("value,fmt", [
        ('not a date at all', None),
        ('2015-13-45', None),
        ('09.08.2015', '%Y-%m-%d'),
        ('09.08.2015', 42),
    ])
    def test_unparseable(self, value, fmt):
        with pytest.raises(InvalidArgument):
            parse_date(value, fmt)

    def test_unsupported_type(self):
        with pytest.raises(InvalidArgument):
            parse_date(['2015-08-09'])


class TestDayOfYear:

    def test_zero_indexed(self):
        assert day_of_year(parse_date('Aug 9th, 2015')) == 220
        assert day_of_year(date(2015, 1, 1)) == 0

    def test_year_end(self):
        assert day_of_year(date(2015, 12, 31)) == 364
        assert day_of_year(date(2016, 12, 31)) == 365


class TestElapsedYears:

    def test_whole_years(self):
        assert elapsed_years(date(2015, 8, 9), date(2025, 8, 9)) == 10

    def test_half_year(self):
        assert elapsed_years(date(2010, 1, 1), date(2015, 7, 1)) == 5.5

    def test_days_fraction(self):
        years = elapsed_years(date(2015, 1, 1), date(2015, 1, 11))
        assert years == pytest.approx(10 / 365.25)

    def test_negative_when_end_is_earlier(self):
        assert elapsed_years(date(2025, 8, 9), date(2015, 8, 9)) == -10

    def test_mixed_naive_and_aware(self):
        aware = datetime(2025, 8, 9, tzinfo=timezone.utc)
        assert elapsed_years(datetime(2015, 8, 9), aware) == 10
