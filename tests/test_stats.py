from datetime import datetime

import pytest

from jakoscpowietrza.api import DataPoint
from jakoscpowietrza.stats import Statistics, Trend, compute_statistics, filter_range, format_statistics


def _series(values):
    return [DataPoint(datetime(2024, 5, 1, hour), value) for hour, value in enumerate(values)]


def test_compute_statistics_extremes_take_first_occurrence():
    values = [3.0, 1.0, 5.0, 1.0, 5.0]
    points = _series(values)
    stats = compute_statistics(points)
    assert stats.minimum == 1.0
    assert stats.minimum_time == points[1].timestamp
    assert stats.maximum == 5.0
    assert stats.maximum_time == points[2].timestamp
    assert stats.average == pytest.approx(sum(values) / len(values))
    assert stats.trend is Trend.RISING


def test_trend_falling():
    stats = compute_statistics(_series([9.0, 2.0, 4.0]))
    assert stats.trend is Trend.FALLING
    assert stats.trend.value == "maleje"


def test_trend_none_when_ends_equal():
    stats = compute_statistics(_series([2.0, 8.0, 2.0]))
    assert stats.trend is Trend.NONE
    assert stats.trend.value == "brak"


def test_single_point():
    point = DataPoint(datetime(2024, 1, 1), 6.5)
    stats = compute_statistics([point])
    assert (stats.minimum, stats.maximum, stats.average) == (6.5, 6.5, 6.5)
    assert stats.minimum_time == stats.maximum_time == point.timestamp


def test_empty_series_raises():
    with pytest.raises(ValueError):
        compute_statistics([])


def test_average_lies_between_extremes():
    stats = compute_statistics(_series([4.2, 7.7, 0.3, 12.1, 5.5]))
    assert stats.minimum <= stats.average <= stats.maximum


def test_format_statistics():
    stats = Statistics(
        minimum=1.5,
        minimum_time=datetime(2024, 1, 2, 3, 0),
        maximum=7.25,
        maximum_time=datetime(2024, 1, 3, 4, 45),
        average=4.0,
        trend=Trend.RISING,
    )
    assert format_statistics(stats) == (
        "Min: 1.5 (2024-01-02 03:00)\n"
        "Max: 7.25 (2024-01-03 04:45)\n"
        "Średnia: 4\n"
        "Trend: rośnie"
    )


def test_filter_range_is_inclusive_and_sorted():
    late = DataPoint(datetime(2024, 5, 1, 12), 3.0)
    early = DataPoint(datetime(2024, 5, 1, 10), 1.0)
    middle = DataPoint(datetime(2024, 5, 1, 11), 2.0)
    outside = DataPoint(datetime(2024, 5, 1, 13), 4.0)
    result = filter_range([late, outside, early, middle], early.timestamp, late.timestamp)
    assert result == [early, middle, late]


def test_filter_range_empty_when_nothing_matches():
    points = _series([1.0, 2.0])
    assert filter_range(points, datetime(2025, 1, 1), datetime(2025, 1, 2)) == []