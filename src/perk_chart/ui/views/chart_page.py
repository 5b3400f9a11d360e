"""Chart page view."""

from gi.repository import Gtk
from matplotlib.backends.backend_gtk4agg import FigureCanvasGTK4Agg

from perk_chart.ui.controllers.chart_controller import ChartController


class ChartPage(Gtk.Box):
    """Multi-series line chart of cumulative perks by level."""

    def __init__(self, controller: ChartController) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        self._controller = controller
        self.set_hexpand(True)
        self.set_vexpand(True)
        self.set_margin_top(16)
        self.set_margin_bottom(16)
        self.set_margin_start(16)
        self.set_margin_end(16)

        title = Gtk.Label(label="Perks by Level")
        title.add_css_class("title-2")
        title.set_xalign(0)
        self.append(title)

        self._totals_label = Gtk.Label(xalign=0)
        self._totals_label.set_wrap(True)
        self.append(self._totals_label)

        config = controller.state.chart
        self._figure = controller.figure()
        self._canvas = FigureCanvasGTK4Agg(self._figure)
        self._canvas.set_size_request(config.width, config.height)
        self._canvas.set_hexpand(True)
        self._canvas.set_vexpand(True)
        self.append(self._canvas)

        self._totals_label.set_text(self._controller.final_totals_label())
