"""Step-by-step selection of a station, a sensor and a time range."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from jakoscpowietrza.api import ApiError, DataPoint, GiosClient
from jakoscpowietrza.stats import filter_range
from jakoscpowietrza.storage import JsonStorage

OFFLINE_NOTICE = "Nie udało się pobrać danych z sieci.\nZaładowano dane lokalne."
NO_STATIONS_MESSAGE = "Nie udało się pobrać danych z sieci.\nBrak zapisanych stacji."
NO_SENSORS_MESSAGE = "Nie udało się pobrać danych z sieci.\nBrak zapisanych danych dla wybranej stacji."
NO_MEASUREMENTS_MESSAGE = "Nie udało się pobrać danych z sieci.\nBrak danych lokalnych w podanym zakresie."

Option = tuple[int, str]


class Step(Enum):
    """Stage of the selection."""

    STATION = 1
    SENSOR = 2
    RANGE = 3


class NoDataError(Exception):
    """Raised when neither the service nor the local cache can provide data."""


def _as_object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


class Wizard:
    """Holds the selection state and fetches data, falling back to the local cache.

    After each operation ``notice`` holds a message when local data was used
    instead of the service, and None otherwise.
    """

    def __init__(self, client: GiosClient, storage: JsonStorage) -> None:
        self.client = client
        self.storage = storage
        self.step = Step.STATION
        self.station_id: int | None = None
        self.station_name = ""
        self.sensor_id: int | None = None
        self.param_name = ""
        self.air_quality = ""
        self.param_value = ""
        self.notice: str | None = None

    def _require(self, step: Step) -> None:
        if self.step is not step:
            raise ValueError(f"expected step {step.name}, current step is {self.step.name}")

    def load_stations(self) -> list[Option]:
        """Return (id, name) pairs of all stations."""
        self.notice = None
        try:
            stations = self.client.stations()
        except ApiError:
            stored = self.storage.load_stations()
            if not stored:
                raise NoDataError(NO_STATIONS_MESSAGE) from None
            self.notice = OFFLINE_NOTICE
            return [
                (_as_int(_as_object(entry).get("id")), _as_str(_as_object(entry).get("stationName")))
                for entry in stored
            ]
        options = []
        for entry in stations:
            station = _as_object(entry)
            name = _as_str(station.get("stationName"))
            if name:
                options.append((_as_int(station.get("id")), name))
        self.storage.save_stations(stations)
        return options

    def select_station(self, station_id: int, station_name: str) -> list[Option]:
        """Choose a station and return (id, parameter name) pairs of its sensors."""
        self._require(Step.STATION)
        self.notice = None
        self.step = Step.SENSOR
        self.station_id = station_id
        self.station_name = station_name
        try:
            level = self.client.air_quality_index(station_id)
        except ApiError:
            level = None
        if level is not None:
            self.air_quality = "\nObecny indeks jakości powietrza: " + level
        try:
            sensors = self.client.sensors(station_id)
        except ApiError:
            stored = self.storage.load_sensors(station_id)
            if not stored:
                self.step = Step.STATION
                raise NoDataError(NO_SENSORS_MESSAGE) from None
            self.notice = OFFLINE_NOTICE
            return [
                (_as_int(_as_object(entry).get("id")), _as_str(_as_object(entry).get("paramName")))
                for entry in stored
            ]
        options = [
            (
                _as_int(_as_object(entry).get("id")),
                _as_str(_as_object(_as_object(entry).get("param")).get("paramName")),
            )
            for entry in sensors
        ]
        self.storage.save_sensors(station_id, sensors)
        return options

    def select_sensor(self, sensor_id: int, param_name: str) -> None:
        """Choose a sensor and fetch its newest reading."""
        self._require(Step.SENSOR)
        self.notice = None
        self.step = Step.RANGE
        self.sensor_id = sensor_id
        self.param_name = param_name
        try:
            value = self.client.latest_data(sensor_id)
        except ApiError:
            value = None
        if value is not None:
            self.param_value = f"\nWartość najnowszego pomiaru: {value:g}"

    def back(self) -> Step:
        """Return to the previous step, if there is one."""
        if self.step is Step.SENSOR:
            self.step = Step.STATION
        elif self.step is Step.RANGE:
            self.step = Step.SENSOR
        return self.step

    def info_text(self) -> str:
        """Return the description of the current selection."""
        if self.step is Step.STATION:
            return "Wybierz stację pomiarową: "
        header = "Wybrana stacja pomiarowa: " + self.station_name + self.air_quality
        if self.step is Step.SENSOR:
            return header + "\nWybierz parametr: "
        return header + "\nWybrany parametr: " + self.param_name + self.param_value

    def measurements(self, date_from: datetime, date_to: datetime) -> list[DataPoint]:
        """Return measurements of the chosen sensor in the range and cache them."""
        self._require(Step.RANGE)
        self.notice = None
        station_id = self.station_id if self.station_id is not None else 0
        sensor_id = self.sensor_id if self.sensor_id is not None else 0
        try:
            data = self.client.archival_data(sensor_id, date_from, date_to)
        except ApiError:
            data = []
        if not data:
            data = filter_range(self.storage.load_measurements(station_id, sensor_id), date_from, date_to)
            if not data:
                raise NoDataError(NO_MEASUREMENTS_MESSAGE)
            self.notice = OFFLINE_NOTICE
        self.storage.save_measurements(station_id, sensor_id, data)
        return data