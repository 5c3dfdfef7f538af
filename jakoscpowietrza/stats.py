"""Summary statistics of a series of measurements."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from operator import attrgetter
from typing import Iterable

from jakoscpowietrza.api import DataPoint

_TIME_FORMAT = "%Y-%m-%d %H:%M"


class Trend(Enum):
    """Direction of change between the first and the last measurement."""

    RISING = "rośnie"
    FALLING = "maleje"
    NONE = "brak"


@dataclass(frozen=True)
class Statistics:
    """Minimum, maximum, average and trend of a series."""

    minimum: float
    minimum_time: datetime
    maximum: float
    maximum_time: datetime
    average: float
    trend: Trend


def compute_statistics(points: Iterable[DataPoint]) -> Statistics:
    """Summarise a series; ties for minimum and maximum go to the earliest point."""
    series = list(points)
    if not series:
        raise ValueError("cannot compute statistics of an empty series")
    lowest = min(series, key=attrgetter("value"))
    highest = max(series, key=attrgetter("value"))
    first, last = series[0].value, series[-1].value
    if last > first:
        trend = Trend.RISING
    elif last < first:
        trend = Trend.FALLING
    else:
        trend = Trend.NONE
    return Statistics(
        minimum=lowest.value,
        minimum_time=lowest.timestamp,
        maximum=highest.value,
        maximum_time=highest.timestamp,
        average=sum(point.value for point in series) / len(series),
        trend=trend,
    )


def format_statistics(stats: Statistics) -> str:
    """Render statistics as the four-line summary shown under a chart."""
    return (
        f"Min: {stats.minimum:g} ({stats.minimum_time.strftime(_TIME_FORMAT)})\n"
        f"Max: {stats.maximum:g} ({stats.maximum_time.strftime(_TIME_FORMAT)})\n"
        f"Średnia: {stats.average:g}\n"
        f"Trend: {stats.trend.value}"
    )


def filter_range(points: Iterable[DataPoint], date_from: datetime, date_to: datetime) -> list[DataPoint]:
    """Return the points within [date_from, date_to], ordered by time."""
    return sorted(
        (point for point in points if date_from <= point.timestamp <= date_to),
        key=attrgetter("timestamp"),
    )