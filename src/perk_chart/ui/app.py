"""GTK4 + Libadwaita application bootstrap."""

from __future__ import annotations

import argparse

try:
    import gi
except ImportError as exc:  # pragma: no cover - import guard for missing system deps
    raise SystemExit(
        "PyGObject is required to run the UI. "
        "Install GTK4/Libadwaita bindings, then run `python -m perk_chart.ui.app`."
    ) from exc

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio, Gtk

from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.constants import DEFAULT_MAX_LEVEL_EXCLUSIVE
from perk_chart.models.perk_source import default_perk_sources
from perk_chart.ui.state import UiState
from perk_chart.ui.views.window import MainWindow


APP_ID = "io.github.perkchart.App"


class PerkChartApp(Adw.Application):
    """Application object and activation lifecycle."""

    def __init__(self, state: UiState | None = None) -> None:
        super().__init__(application_id=APP_ID, flags=Gio.ApplicationFlags.FLAGS_NONE)
        self._state = state or UiState()
        self._counter = PerkCounter(default_perk_sources())

    def do_activate(self) -> None:  # type: ignore[override]
        window = self.props.active_window
        if window is None:
            try:
                window = MainWindow(self, self._state, self._counter)
            except RuntimeError as exc:
                raise SystemExit(
                    "Gtk couldn't initialize a display. Run this app from a desktop session."
                ) from exc
        window.present()


def main(argv: list[str] | None = None) -> None:
    """Run the desktop app."""
    parser = argparse.ArgumentParser(description="Perks by level chart")
    parser.add_argument(
        "--max-level",
        type=int,
        default=DEFAULT_MAX_LEVEL_EXCLUSIVE,
        help="Chart levels 0..N-1 (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.max_level < 0:
        parser.error("--max-level must be >= 0")

    init_ok = Gtk.init_check()
    if isinstance(init_ok, tuple):
        init_ok = init_ok[0]
    if not init_ok:
        raise SystemExit(
            "Gtk display initialization failed. Run the UI inside a desktop session."
        )
    app = PerkChartApp(UiState(max_level_exclusive=args.max_level))
    try:
        app.run([])
    except KeyboardInterrupt:
        # Allow Ctrl+C to terminate cleanly without a traceback.
        return


if __name__ == "__main__":
    main()
