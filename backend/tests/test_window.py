from datetime import date, timedelta

import pytest

from fitlog.services.stats import DEFAULT_WINDOW_DAYS, calendar_window


def test_default_window_is_seven_days_ending_today():
    window = calendar_window(date(2024, 6, 3))
    assert len(window) == DEFAULT_WINDOW_DAYS == 7
    assert window[0] == date(2024, 5, 28)
    assert window[-1] == date(2024, 6, 3)


@pytest.mark.parametrize("days", [1, 2, 7, 30, 366])
def test_window_is_contiguous_and_ascending(days: int):
    reference = date(2023, 12, 31)
    window = calendar_window(reference, days)

    assert len(window) == days
    assert window[-1] == reference
    for earlier, later in zip(window, window[1:]):
        assert later - earlier == timedelta(days=1)


def test_window_crosses_leap_day():
    window = calendar_window(date(2024, 3, 2), 3)
    assert window == [date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 2)]


def test_window_crosses_year_boundary():
    window = calendar_window(date(2025, 1, 2), 4)
    assert [d.isoformat() for d in window] == [
        "2024-12-30",
        "2024-12-31",
        "2025-01-01",
        "2025-01-02",
    ]


def test_window_is_deterministic():
    assert calendar_window(date(2024, 6, 3)) == calendar_window(date(2024, 6, 3))


@pytest.mark.parametrize("days", [0, -1])
def test_window_rejects_non_positive_size(days: int):
    with pytest.raises(ValueError):
        calendar_window(date(2024, 6, 3), days)
