"""Desktop window for browsing air quality measurements."""

from __future__ import annotations

import argparse
import tkinter as tk
from datetime import datetime, timedelta
from tkinter import messagebox, ttk
from typing import Sequence

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from jakoscpowietrza.api import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DataPoint, GiosClient
from jakoscpowietrza.chart import build_figure
from jakoscpowietrza.stats import compute_statistics
from jakoscpowietrza.storage import DEFAULT_DIRECTORY, JsonStorage
from jakoscpowietrza.wizard import NoDataError, Option, Step, Wizard

_WARNING_TITLE = "Brak połączenia"
_ENTRY_FORMAT = "%Y-%m-%d %H"


class AirQualityApp:
    """Main window: choose a station, a sensor and a range, then draw a chart."""

    def __init__(self, root: tk.Tk, wizard: Wizard) -> None:
        self.root = root
        self.wizard = wizard
        self._station_options: list[Option] = []
        self._sensor_options: list[Option] = []
        self._can_advance = True

        root.title("Jakość powietrza")
        frame = ttk.Frame(root, padding=8)
        frame.pack(fill=tk.BOTH, expand=True)
        frame.columnconfigure(0, weight=1)
        frame.columnconfigure(1, weight=1)

        now = datetime.now()
        self._from_text = tk.StringVar(value=(now - timedelta(days=1)).strftime(_ENTRY_FORMAT))
        self._to_text = tk.StringVar(value=now.strftime(_ENTRY_FORMAT))

        self._info = ttk.Label(frame, justify=tk.LEFT)
        self._stations = ttk.Combobox(frame, state="readonly", width=50)
        self._sensors = ttk.Combobox(frame, state="readonly", width=50)
        self._back = ttk.Button(frame, text="Cofnij", command=self._on_back)
        self._next = ttk.Button(frame, text="Dalej", command=self._on_next)
        self._from_label = ttk.Label(frame, text="Data i godzina OD: ")
        self._from_entry = ttk.Entry(frame, textvariable=self._from_text)
        self._to_label = ttk.Label(frame, text="Data i godzina DO: ")
        self._to_entry = ttk.Entry(frame, textvariable=self._to_text)
        self._generate = ttk.Button(frame, text="Wygeneruj wykres", command=self._on_generate)

        placement = [
            (self._info, 0, 0, 2),
            (self._stations, 1, 0, 2),
            (self._sensors, 2, 0, 2),
            (self._back, 3, 0, 1),
            (self._next, 3, 1, 1),
            (self._from_label, 4, 0, 2),
            (self._from_entry, 5, 0, 2),
            (self._to_label, 6, 0, 2),
            (self._to_entry, 7, 0, 2),
            (self._generate, 8, 0, 2),
        ]
        for widget, row, column, span in placement:
            widget.grid(row=row, column=column, columnspan=span, sticky="ew", pady=2)

        self._visible = {
            Step.STATION: {self._stations, self._next},
            Step.SENSOR: {self._back, self._sensors, self._next},
            Step.RANGE: {
                self._back,
                self._from_label,
                self._from_entry,
                self._to_label,
                self._to_entry,
                self._generate,
            },
        }
        self._refresh()
        self._load_stations()

    def _refresh(self) -> None:
        step = self.wizard.step
        shown = set(self._visible[step])
        if step is Step.STATION and not self._can_advance:
            shown.discard(self._next)
        for widgets in self._visible.values():
            for widget in widgets:
                if widget in shown:
                    widget.grid()
                else:
                    widget.grid_remove()
        self._info.configure(text=self.wizard.info_text())

    @staticmethod
    def _fill(combo: ttk.Combobox, options: list[Option]) -> None:
        combo.configure(values=[name for _, name in options])
        if options:
            combo.current(0)
        else:
            combo.set("")

    @staticmethod
    def _selected(combo: ttk.Combobox, options: list[Option]) -> Option | None:
        index = combo.current()
        if index < 0 or index >= len(options):
            return None
        return options[index]

    def _show_notice(self) -> None:
        if self.wizard.notice:
            messagebox.showwarning(_WARNING_TITLE, self.wizard.notice, parent=self.root)

    def _load_stations(self) -> None:
        try:
            options = self.wizard.load_stations()
        except NoDataError as exc:
            messagebox.showwarning(_WARNING_TITLE, str(exc), parent=self.root)
            self._can_advance = False
            self._refresh()
            return
        self._show_notice()
        self._station_options = options
        self._fill(self._stations, options)

    def _on_back(self) -> None:
        self.wizard.back()
        self._refresh()

    def _on_next(self) -> None:
        if self.wizard.step is Step.STATION:
            chosen = self._selected(self._stations, self._station_options)
            if chosen is None:
                return
            try:
                options = self.wizard.select_station(*chosen)
            except NoDataError as exc:
                messagebox.showwarning(_WARNING_TITLE, str(exc), parent=self.root)
                self._refresh()
                return
            self._show_notice()
            self._sensor_options = options
            self._fill(self._sensors, options)
        elif self.wizard.step is Step.SENSOR:
            chosen = self._selected(self._sensors, self._sensor_options)
            if chosen is None:
                return
            self.wizard.select_sensor(*chosen)
        self._refresh()

    def _read_range(self) -> tuple[datetime, datetime] | None:
        try:
            date_from = datetime.strptime(self._from_text.get().strip(), _ENTRY_FORMAT)
            date_to = datetime.strptime(self._to_text.get().strip(), _ENTRY_FORMAT)
        except ValueError:
            messagebox.showerror("Błędna data", "Podaj datę w formacie RRRR-MM-DD GG.", parent=self.root)
            return None
        now = datetime.now()
        date_from, date_to = min(date_from, now), min(date_to, now)
        self._from_text.set(date_from.strftime(_ENTRY_FORMAT))
        self._to_text.set(date_to.strftime(_ENTRY_FORMAT))
        return date_from, date_to

    def _on_generate(self) -> None:
        selected = self._read_range()
        if selected is None:
            return
        try:
            points = self.wizard.measurements(*selected)
        except NoDataError as exc:
            messagebox.showinfo(_WARNING_TITLE, str(exc), parent=self.root)
            return
        if self.wizard.notice:
            messagebox.showinfo(_WARNING_TITLE, self.wizard.notice, parent=self.root)
        self._show_chart(points)

    def _show_chart(self, points: list[DataPoint]) -> None:
        window = tk.Toplevel(self.root)
        window.title(self.wizard.param_name)
        figure = build_figure(
            points,
            compute_statistics(points),
            self.wizard.param_name,
            self.wizard.station_name,
        )
        canvas = FigureCanvasTkAgg(figure, master=window)
        canvas.draw()
        canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)


def parse_arguments(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the command line options."""
    parser = argparse.ArgumentParser(description="Przeglądanie danych o jakości powietrza.")
    parser.add_argument(
        "--data-dir",
        default=DEFAULT_DIRECTORY,
        help="katalog lokalnej kopii danych (domyślnie: %(default)s)",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="adres usługi z danymi pomiarowymi",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="limit czasu zapytania w sekundach (domyślnie: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    arguments = parse_arguments(argv)
    client = GiosClient(arguments.base_url, timeout=arguments.timeout)
    storage = JsonStorage(arguments.data_dir)
    root = tk.Tk()
    AirQualityApp(root, Wizard(client, storage))
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())