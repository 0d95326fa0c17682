import pytest

from confluxscan_sdk.formatters import dates
from confluxscan_sdk.formatters.dates import (
    format_timestamp,
    get_24_hours_ago,
    get_current_timestamp,
    get_time_ago,
)

NOW = 1707307200


@pytest.fixture
def frozen_time(monkeypatch):
    monkeypatch.setattr(dates.time, "time", lambda: NOW + 0.75)


class TestFormatTimestamp:
    """Tests for format_timestamp"""

    def test_seconds(self):
        assert format_timestamp(1677649200) == "2023-03-01 05:40:00"

    def test_numeric_string(self):
        assert format_timestamp("1677649200") == "2023-03-01 05:40:00"

    def test_milliseconds(self):
        assert format_timestamp(1677649200000) == "2023-03-01 05:40:00"

    def test_iso_string(self):
        assert format_timestamp("2024-02-07T12:00:00Z") == "2024-02-07 12:00:00"

    def test_iso_with_offset_is_converted_to_utc(self):
        assert format_timestamp("2024-02-07T14:00:00+02:00") == "2024-02-07 12:00:00"

    def test_naive_iso_is_utc(self):
        assert format_timestamp("2024-02-07T12:00:00") == "2024-02-07 12:00:00"

    def test_year_below_1000_is_zero_padded(self):
        assert format_timestamp("0900-01-01T00:00:00") == "0900-01-01 00:00:00"

    @pytest.mark.parametrize("value", [
        None,
        "",
        "invalid",
        "2024-13-45",
        True,
        float("nan"),
        "0001-01-01T00:00:00+01:00",
        "9999-12-31T23:59:59-01:00",
    ])
    def test_invalid_is_not_available(self, value):
        assert format_timestamp(value) == "N/A"


class TestRelativeTimestamps:
    """Tests for timestamps relative to now"""

    def test_current_timestamp_is_whole_seconds(self, frozen_time):
        assert get_current_timestamp() == NOW

    def test_days_ago(self, frozen_time):
        assert get_time_ago(7) == NOW - 7 * 86400

    def test_fractional_days(self, frozen_time):
        assert get_time_ago(0.5) == NOW - 43200

    def test_24_hours_ago(self, frozen_time):
        assert get_24_hours_ago() == NOW - 86400
