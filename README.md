# jakoscpowietrza

A small desktop application (Tk) for browsing air-quality data published by a
public monitoring REST service: measuring stations, their sensors, and the
measurements of one sensor over a chosen time range, drawn as a chart.

## Installation

```
pip install .
```

The window is built with `tkinter`, so the Python installation must include Tk.

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
jakoscpowietrza
```

Options:

- `--data-dir DIR` – directory of the local JSON copy (default: `bazajson`)
- `--base-url URL` – address of the measurement service
- `--timeout SECONDS` – request timeout (default: `30.0`)

The window guides you through three steps:

1. **Choose a station** from the list fetched from the service, then press
   **Dalej**.
2. **Choose a parameter** from the station's sensors. The station's current
   air-quality index is shown when the service reports one. Press **Dalej**
   again, or **Cofnij** to go back.
3. **Choose a time range** by typing the start and end as `YYYY-MM-DD HH`
   (both default to the last 24 hours; times in the future are moved back to
   the present). The newest reading of the chosen sensor is shown above.
   **Wygeneruj wykres** opens a chart of the measurements with the minimum,
   maximum, average and trend (`rośnie`, `maleje` or `brak`) below it.

## Local copy and working offline

Everything downloaded is also written to JSON files in the data directory,
merged with what is already there rather than overwriting it:

- `listastacji.json` – station `id` and `stationName`
- `<station>-listasensorow.json` – sensor `id` and `paramName`
- `<station>-<sensor>.json` – measurement `timestamp` and `value`

When the service cannot be reached, the stations and sensors are read from
these files and a warning says so. When no measurements come back for the
range, the stored ones inside the range are used, ordered by time. If there is
nothing stored either, a message says so: at the first step the **Dalej**
button is then hidden, and at the second step the window returns to the
station list.

## Using the pieces from Python

- `jakoscpowietrza.api` – `GiosClient` fetches stations, sensors, the
  air-quality index, the newest reading and archival data, raising `ApiError`
  when a request fails or the answer is not usable; `DataPoint` holds one
  timestamped value; `archival_data_url` and `parse_archival_data` build the
  archival query and read its answer.
- `jakoscpowietrza.storage` – `JsonStorage` reads and writes the local JSON
  files described above; `load_json_document` and `save_json_document` read
  and write a single file.
- `jakoscpowietrza.stats` – `compute_statistics` summarises a list of
  `DataPoint` objects into `Statistics` (with a `Trend`), `format_statistics`
  turns it into the text shown under the chart, and `filter_range` keeps the
  points inside a date range, ordered by time.
- `jakoscpowietrza.chart` – `build_figure` draws the measurements as a
  matplotlib `Figure`; `chart_title` gives its title.
- `jakoscpowietrza.wizard` – `Wizard` holds the three-step flow without any
  user interface (`load_stations`, `select_station`, `select_sensor`, `back`,
  `info_text`, `measurements`), raising `NoDataError` when neither the service
  nor the local files have anything to show; its `notice` is set when local
  data was used.
- `jakoscpowietrza.app` – `AirQualityApp` is the Tk window; `main` starts it.

For example, summarising measurements saved earlier:

```python
from jakoscpowietrza.storage import JsonStorage
from jakoscpowietrza.stats import compute_statistics, format_statistics

storage = JsonStorage("bazajson")
points = storage.load_measurements(114, 642)
if points:
    print(format_statistics(compute_statistics(points)))
```

## What it does not do

There is no text-only mode: the command always opens a window. Charts are
shown on screen only and are not saved to files by the application.