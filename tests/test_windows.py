"""Tests for time window parsing and histogram bucket sizing."""

from datetime import datetime

import pytest

from data.windows import histogram_slice_minutes, parse_window


class TestParseWindow:
    def test_minute_on_the_ten_gives_ten_minute_window(self):
        assert parse_window("2015-02-02 03:00") == (
            datetime(2015, 2, 2, 3, 0),
            datetime(2015, 2, 2, 3, 10),
        )

    def test_other_minute_gives_one_minute_window(self):
        assert parse_window("2015-02-02 01:41") == (
            datetime(2015, 2, 2, 1, 41),
            datetime(2015, 2, 2, 1, 42),
        )

    def test_one_minute_bar_on_the_ten_widens_to_ten_minutes(self):
        assert parse_window("2015-02-02 01:40") == (
            datetime(2015, 2, 2, 1, 40),
            datetime(2015, 2, 2, 1, 50),
        )

    def test_seconds_are_truncated(self):
        start, end = parse_window("2015-02-02 01:41:59")
        assert start == datetime(2015, 2, 2, 1, 41)
        assert end == datetime(2015, 2, 2, 1, 42)

    def test_window_crossing_midnight(self):
        assert parse_window("2015-02-01 23:50") == (
            datetime(2015, 2, 1, 23, 50),
            datetime(2015, 2, 2, 0, 0),
        )

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_window("  2015-02-02 03:20\n") is not None

    @pytest.mark.parametrize(
        "text",
        ["invalid datetime string", "", "2015-02-02", "2015-02-30 03:00", "03:00", None, 42],
    )
    def test_unparsable_input_returns_none(self, text):
        assert parse_window(text) is None


class TestHistogramSlice:
    def test_one_hour_or_more_uses_ten_minutes(self):
        assert histogram_slice_minutes(datetime(2015, 2, 2, 1, 0), datetime(2015, 2, 2, 2, 0)) == 10
        assert histogram_slice_minutes(datetime(2015, 2, 2, 1, 0), datetime(2015, 2, 2, 8, 0)) == 10

    def test_less_than_one_hour_uses_one_minute(self):
        assert histogram_slice_minutes(datetime(2015, 2, 2, 1, 0), datetime(2015, 2, 2, 1, 50)) == 1
