from datetime import datetime

import pytest
import requests
import responses

from jakoscpowietrza.api import (
    ARCHIVAL_RESULTS_KEY,
    ApiError,
    DataPoint,
    GiosClient,
    archival_data_url,
    parse_archival_data,
)

BASE = "https://example.com/rest"


def test_archival_data_url_full_hours():
    url = archival_data_url(BASE, 92, datetime(2024, 1, 1, 10, 0), datetime(2024, 1, 2, 10, 30))
    assert url == (
        "https://example.com/rest/archivalData/getDataBySensor/92"
        "?size=24&dateFrom=2024-01-01%2010%3A00&dateTo=2024-01-02%2010%3A00"
    )


def test_archival_data_url_truncates_partial_hour():
    url = archival_data_url(BASE + "/", 5, datetime(2024, 1, 1, 10, 0), datetime(2024, 1, 1, 10, 59))
    assert "size=0&" in url
    assert url.startswith(BASE + "/archivalData/getDataBySensor/5?")


def test_parse_archival_data_reads_entries():
    document = {
        ARCHIVAL_RESULTS_KEY: [
            {"Data": "2024-01-01 10:00:00", "Wartość": 12.5},
            {"Data": "2024-01-01 11:00:00", "Wartość": None},
            {"Data": "not a date", "Wartość": 3.0},
        ]
    }
    points = parse_archival_data(document)
    assert points == [
        DataPoint(datetime(2024, 1, 1, 10), 12.5),
        DataPoint(datetime(2024, 1, 1, 11), 0.0),
    ]


@pytest.mark.parametrize("document", [None, [], "text", {"other": []}, {ARCHIVAL_RESULTS_KEY: {}}])
def test_parse_archival_data_unusable_documents(document):
    assert parse_archival_data(document) == []


def test_stations_returns_array():
    stations = [{"id": 1, "stationName": "Alpha"}, {"id": 2, "stationName": "Beta"}]
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/station/findAll", json=stations)
        assert GiosClient(BASE).stations() == stations
        assert "sort=stationName" in rsps.calls[0].request.url


def test_sensors_requests_station_path():
    sensors = [{"id": 7, "param": {"paramName": "pył zawieszony PM10"}}]
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/station/sensors/14", json=sensors)
        assert GiosClient(BASE).sensors(14) == sensors


def test_stations_non_array_raises():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/station/findAll", json={"error": "x"})
        with pytest.raises(ApiError):
            GiosClient(BASE).stations()


def test_air_quality_index_name():
    body = {"id": 3, "stIndexLevel": {"id": 1, "indexLevelName": "Dobry"}}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/aqindex/getIndex/3", json=body)
        assert GiosClient(BASE).air_quality_index(3) == "Dobry"


def test_air_quality_index_missing_level():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/aqindex/getIndex/3", json={"id": 3})
        assert GiosClient(BASE).air_quality_index(3) is None


def test_latest_data_skips_null_values():
    body = {"key": "PM10", "values": [{"date": "a", "value": None}, {"date": "b", "value": 21.4}, {"value": 3.0}]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/data/getData/9", json=body)
        assert GiosClient(BASE).latest_data(9) == 21.4


def test_latest_data_all_null():
    body = {"values": [{"value": None}, {"value": None}]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/data/getData/9", json=body)
        assert GiosClient(BASE).latest_data(9) is None


def test_archival_data_fetches_and_parses():
    body = {ARCHIVAL_RESULTS_KEY: [{"Data": "2024-02-01 05:00:00", "Wartość": 8.0}]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/archivalData/getDataBySensor/92", json=body)
        points = GiosClient(BASE).archival_data(92, datetime(2024, 2, 1, 4), datetime(2024, 2, 1, 6))
        assert points == [DataPoint(datetime(2024, 2, 1, 5), 8.0)]
        assert "dateFrom=2024-02-01%2004%3A00" in rsps.calls[0].request.url


def test_http_error_raises_api_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/station/sensors/1", status=500)
        with pytest.raises(ApiError):
            GiosClient(BASE).sensors(1)


def test_connection_error_raises_api_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/station/findAll", body=requests.ConnectionError("down"))
        with pytest.raises(ApiError):
            GiosClient(BASE).stations()


def test_invalid_json_raises_api_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/data/getData/2", body="not json")
        with pytest.raises(ApiError):
            GiosClient(BASE).latest_data(2)