"""Client for the air quality monitoring REST service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import requests

DEFAULT_BASE_URL = "https://api.gios.gov.pl/pjp-api/rest"
DEFAULT_TIMEOUT = 30.0
ARCHIVAL_RESULTS_KEY = "Lista archiwalnych wyników pomiarów"
_ARCHIVAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class DataPoint:
    """A single measured value together with the time it was taken."""

    timestamp: datetime
    value: float


class ApiError(Exception):
    """Raised when the service cannot be reached or answers with unusable data."""


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _hour_stamp(moment: datetime) -> str:
    return f"{moment:%Y-%m-%d}%20{moment:%H}%3A00"


def archival_data_url(base_url: str, sensor_id: int, date_from: datetime, date_to: datetime) -> str:
    """Build the archival data query for a sensor between two full hours."""
    seconds = int((date_to - date_from).total_seconds())
    hours = int(seconds / 3600)
    return (
        f"{base_url.rstrip('/')}/archivalData/getDataBySensor/{sensor_id}"
        f"?size={hours}&dateFrom={_hour_stamp(date_from)}&dateTo={_hour_stamp(date_to)}"
    )


def parse_archival_data(document: Any) -> list[DataPoint]:
    """Extract measurements from an archival data response.

    Entries whose date cannot be read are left out; missing values count as 0.
    """
    if not isinstance(document, dict):
        return []
    results = document.get(ARCHIVAL_RESULTS_KEY)
    if not isinstance(results, list):
        return []
    points = []
    for item in results:
        entry = item if isinstance(item, dict) else {}
        date_text = entry.get("Data")
        if not isinstance(date_text, str):
            continue
        try:
            timestamp = datetime.strptime(date_text, _ARCHIVAL_DATE_FORMAT)
        except ValueError:
            continue
        points.append(DataPoint(timestamp, _as_float(entry.get("Wartość"))))
    return points


class GiosClient:
    """Fetches stations, sensors and measurements from the monitoring service."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get_json(self, url: str) -> Any:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc

    def _get_array(self, url: str) -> list[Any]:
        document = self._get_json(url)
        if not isinstance(document, list):
            raise ApiError(f"expected a JSON array from {url}")
        return document

    def stations(self) -> list[Any]:
        """Return all measuring stations, sorted by name on the server side."""
        return self._get_array(f"{self.base_url}/station/findAll?sort=stationName")

    def sensors(self, station_id: int) -> list[Any]:
        """Return the sensors installed at a station."""
        return self._get_array(f"{self.base_url}/station/sensors/{station_id}")

    def air_quality_index(self, station_id: int) -> str | None:
        """Return the station's current index level name, or None if not reported."""
        document = self._get_json(f"{self.base_url}/aqindex/getIndex/{station_id}")
        if not isinstance(document, dict) or "stIndexLevel" not in document:
            return None
        level = document["stIndexLevel"]
        name = level.get("indexLevelName") if isinstance(level, dict) else None
        return name if isinstance(name, str) else ""

    def latest_data(self, sensor_id: int) -> float | None:
        """Return the newest non-null reading of a sensor, or None if there is none."""
        document = self._get_json(f"{self.base_url}/data/getData/{sensor_id}")
        if not isinstance(document, dict) or "values" not in document:
            return None
        values = document["values"]
        if not isinstance(values, list):
            return None
        for item in values:
            entry = item if isinstance(item, dict) else {}
            if "value" in entry and entry["value"] is None:
                continue
            return _as_float(entry.get("value"))
        return None

    def archival_data(self, sensor_id: int, date_from: datetime, date_to: datetime) -> list[DataPoint]:
        """Return archived measurements of a sensor in the given range."""
        url = archival_data_url(self.base_url, sensor_id, date_from, date_to)
        return parse_archival_data(self._get_json(url))