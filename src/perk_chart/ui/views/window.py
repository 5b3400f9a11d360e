"""Main application window."""

from gi.repository import Adw, Gtk

from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.ui.controllers.chart_controller import ChartController
from perk_chart.ui.state import UiState
from perk_chart.ui.views.chart_page import ChartPage
from perk_chart.ui.views.table_page import TablePage


class MainWindow(Adw.ApplicationWindow):
    """Top-level window with tabbed navigation."""

    def __init__(self, app: Adw.Application, state: UiState, counter: PerkCounter) -> None:
        super().__init__(application=app, title=state.title)
        self._state = state
        self._controller = ChartController(counter=counter, state=state)

        config = state.chart
        self.set_default_size(config.width + 80, config.height + 200)

        toolbar_view = Adw.ToolbarView()
        self.set_content(toolbar_view)

        header = Adw.HeaderBar()
        toolbar_view.add_top_bar(header)

        title_label = Gtk.Label(
            label=f"{state.title}  -  L0..L{max(0, state.max_level_exclusive - 1)}"
        )
        title_label.add_css_class("title-4")
        header.set_title_widget(title_label)

        tabs_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)
        tabs_box.set_hexpand(True)
        tabs_box.set_vexpand(True)
        toolbar_view.set_content(tabs_box)

        tab_view = Adw.TabView()
        tab_view.set_hexpand(True)
        tab_view.set_vexpand(True)
        tab_bar = Adw.TabBar.new()
        tab_bar.set_view(tab_view)
        tabs_box.append(tab_bar)
        tabs_box.append(tab_view)

        self._add_page(tab_view, "Chart", ChartPage(self._controller))
        self._add_page(tab_view, "Table", TablePage(self._controller))

    def _add_page(self, tab_view: Adw.TabView, title: str, child: Gtk.Widget) -> None:
        page = tab_view.append(child)
        page.set_title(title)
