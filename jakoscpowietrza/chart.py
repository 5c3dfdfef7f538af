"""Line chart of a measurement series with its summary statistics."""

from __future__ import annotations

from typing import Sequence

import matplotlib.dates as mdates
from matplotlib.figure import Figure
from matplotlib.ticker import LinearLocator

from jakoscpowietrza.api import DataPoint
from jakoscpowietrza.stats import Statistics, format_statistics

AXIS_DATE_FORMAT = "%Y-%m-%d %H:00"
X_AXIS_TITLE = "Data pomiaru"
TICK_COUNT = 4
FIGURE_WIDTH_PX = 700
FIGURE_HEIGHT_PX = 450
_DPI = 100


def chart_title(param_name: str, station_name: str) -> str:
    """Return the chart title for a parameter measured at a station."""
    return f"Wykres danych pomiarowych {param_name} dla stacji {station_name}"


def build_figure(
    points: Sequence[DataPoint],
    stats: Statistics,
    param_name: str,
    station_name: str,
) -> Figure:
    """Draw the series against time, with the statistics printed below the plot."""
    figure = Figure(figsize=(FIGURE_WIDTH_PX / _DPI, FIGURE_HEIGHT_PX / _DPI), dpi=_DPI)
    axes = figure.add_subplot()
    axes.plot([point.timestamp for point in points], [point.value for point in points])
    axes.set_title(chart_title(param_name, station_name))
    axes.set_xlabel(X_AXIS_TITLE)
    axes.set_ylabel(param_name)
    axes.xaxis.set_major_formatter(mdates.DateFormatter(AXIS_DATE_FORMAT))
    axes.xaxis.set_major_locator(LinearLocator(TICK_COUNT))
    axes.tick_params(axis="x", labelsize="small")
    figure.subplots_adjust(bottom=0.32)
    figure.text(0.02, 0.02, format_statistics(stats), va="bottom", ha="left")
    return figure