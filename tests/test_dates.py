"""Tests for monitor date parsing and comparison."""

import pytest
from datetime import datetime

from tracker.errors import FormatError, ParseError
from tracker.scrapers.dates import compare_infoarena_dates, parse_infoarena_date


class TestParseInfoarenaDate:
    def test_reference_date(self):
        assert parse_infoarena_date('1 apr 25 13:06:35') == datetime(2025, 4, 1, 13, 6, 35)

    @pytest.mark.parametrize('abbrev, month', [
        ('ian', 1), ('feb', 2), ('mar', 3), ('apr', 4), ('mai', 5), ('iun', 6),
        ('iul', 7), ('aug', 8), ('sep', 9), ('oct', 10), ('nov', 11), ('dec', 12),
    ])
    def test_romanian_months(self, abbrev, month):
        assert parse_infoarena_date(f'15 {abbrev} 23 00:00:01').month == month

    def test_two_digit_day_and_year(self):
        assert parse_infoarena_date('28 dec 09 23:59:59') == datetime(2009, 12, 28, 23, 59, 59)

    def test_not_a_date(self):
        with pytest.raises(FormatError):
            parse_infoarena_date('not a date')

    def test_unknown_month(self):
        with pytest.raises(FormatError, match='invalid month'):
            parse_infoarena_date('1 apz 25 13:06:35')

    def test_english_month_rejected(self):
        with pytest.raises(FormatError):
            parse_infoarena_date('1 may 25 13:06:35')

    def test_extra_space_gives_wrong_token_count(self):
        with pytest.raises(FormatError, match='invalid date format'):
            parse_infoarena_date('1  apr 25 13:06:35')

    def test_invalid_day(self):
        with pytest.raises(FormatError):
            parse_infoarena_date('32 ian 25 10:00:00')

    def test_invalid_time(self):
        with pytest.raises(FormatError):
            parse_infoarena_date('1 ian 25 25:00:00')

    def test_format_error_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_infoarena_date('')


class TestCompareInfoarenaDates:
    def test_earlier(self):
        assert compare_infoarena_dates('3 feb 24 09:00:00', '10 mai 24 10:00:00') == -1

    def test_later(self):
        assert compare_infoarena_dates('1 ian 25 00:00:00', '31 dec 24 23:59:59') == 1

    def test_equal(self):
        assert compare_infoarena_dates('1 apr 25 13:06:35', '1 apr 25 13:06:35') == 0

    def test_same_day_compares_time(self):
        assert compare_infoarena_dates('1 apr 25 13:06:34', '1 apr 25 13:06:35') == -1

    def test_malformed_left_is_no_ordering(self):
        assert compare_infoarena_dates('garbage', '1 apr 25 13:06:35') == 0

    def test_malformed_right_is_no_ordering(self):
        assert compare_infoarena_dates('1 apr 25 13:06:35', '1 xyz 25 13:06:35') == 0
