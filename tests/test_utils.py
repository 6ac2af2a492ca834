import datetime

import pytest

from tlog.utils import calculate_reading_time, format_date, is_published

UTC = datetime.timezone.utc


def test_is_published_compares_with_now():
    now = datetime.datetime(2024, 6, 1, tzinfo=UTC)
    assert is_published(datetime.datetime(2024, 5, 31, tzinfo=UTC), now) is True
    assert is_published(now, now) is True
    assert is_published(datetime.datetime(2024, 6, 2, tzinfo=UTC), now) is False


def test_is_published_defaults_to_current_time():
    assert is_published(datetime.datetime(2000, 1, 1, tzinfo=UTC)) is True
    assert is_published(datetime.datetime(9999, 1, 1, tzinfo=UTC)) is False


def test_format_date_en_us():
    assert format_date(datetime.date(2026, 2, 11)) == "February 11, 2026"
    assert format_date(datetime.datetime(2024, 12, 1, 23, 0, tzinfo=UTC)) == "December 1, 2024"


@pytest.mark.parametrize(
    ("word_count", "expected"),
    [
        (0, "1 min"),
        (200, "1 min"),
        (201, "2 min"),
        (401, "3 min"),
    ],
)
def test_calculate_reading_time_rounds_up(word_count, expected):
    text = "word " * word_count
    assert calculate_reading_time(text.strip()) == expected
