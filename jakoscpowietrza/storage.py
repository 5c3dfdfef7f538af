"""Local JSON cache of stations, sensors and measurements."""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from jakoscpowietrza.api import DataPoint

DEFAULT_DIRECTORY = "bazajson"
STATIONS_FILE = "listastacji.json"


def load_json_document(path: str | os.PathLike[str]) -> Any:
    """Read a JSON file; return None if it is missing, unreadable or invalid."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    try:
        return json.loads(data)
    except ValueError:
        return None


def save_json_document(path: str | os.PathLike[str], array: list[Any]) -> None:
    """Write an array to a file as indented UTF-8 JSON."""
    text = json.dumps(array, indent=4, ensure_ascii=False) + "\n"
    Path(path).write_text(text, encoding="utf-8")


def _as_array(document: Any) -> list[Any]:
    return document if isinstance(document, list) else []


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


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


class JsonStorage:
    """Keeps reduced copies of downloaded data in a directory of JSON files."""

    def __init__(self, directory: str | os.PathLike[str] = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)

    def path_for(self, filename: str) -> Path:
        """Return the path of a file in the storage directory, creating the directory."""
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory / filename

    @staticmethod
    def _sensors_file(station_id: int) -> str:
        return f"{station_id}-listasensorow.json"

    @staticmethod
    def _measurements_file(station_id: int, sensor_id: int) -> str:
        return f"{station_id}-{sensor_id}.json"

    def _load_array(self, filename: str) -> list[Any]:
        return _as_array(load_json_document(self.path_for(filename)))

    def save_stations(self, stations: Iterable[Any]) -> None:
        """Add stations not yet stored, keeping only their id and name."""
        path = self.path_for(STATIONS_FILE)
        current = _as_array(load_json_document(path))
        existing = {_as_int(_as_object(entry).get("id")) for entry in current}
        for entry in stations:
            original = _as_object(entry)
            station_id = _as_int(original.get("id"))
            if station_id not in existing:
                current.append({"id": station_id, "stationName": _as_str(original.get("stationName"))})
        save_json_document(path, current)

    def save_sensors(self, station_id: int, sensors: Iterable[Any]) -> None:
        """Add a station's sensors not yet stored, keeping their id and parameter name."""
        path = self.path_for(self._sensors_file(station_id))
        current = _as_array(load_json_document(path))
        existing = {_as_int(_as_object(entry).get("id")) for entry in current}
        for entry in sensors:
            original = _as_object(entry)
            sensor_id = _as_int(original.get("id"))
            if sensor_id not in existing:
                param_name = _as_str(_as_object(original.get("param")).get("paramName"))
                current.append({"id": sensor_id, "paramName": param_name})
                existing.add(sensor_id)
        save_json_document(path, current)

    def save_measurements(self, station_id: int, sensor_id: int, points: Iterable[DataPoint]) -> None:
        """Add measurements whose timestamps are not stored yet."""
        path = self.path_for(self._measurements_file(station_id, sensor_id))
        merged = _as_array(load_json_document(path))
        existing = {_as_object(entry).get("timestamp") for entry in merged}
        for point in points:
            stamp = point.timestamp.isoformat(timespec="seconds")
            if stamp not in existing:
                merged.append({"timestamp": stamp, "value": point.value})
        save_json_document(path, merged)

    def load_stations(self) -> list[Any]:
        """Return the stored stations."""
        return self._load_array(STATIONS_FILE)

    def load_sensors(self, station_id: int) -> list[Any]:
        """Return the stored sensors of a station."""
        return self._load_array(self._sensors_file(station_id))

    def load_measurements(self, station_id: int, sensor_id: int) -> list[DataPoint]:
        """Return stored measurements of a sensor; unreadable timestamps are left out."""
        points = []
        for entry in self._load_array(self._measurements_file(station_id, sensor_id)):
            item = _as_object(entry)
            stamp = item.get("timestamp")
            if not isinstance(stamp, str):
                continue
            try:
                timestamp = datetime.fromisoformat(stamp)
            except ValueError:
                continue
            points.append(DataPoint(timestamp, _as_float(item.get("value"))))
        return points