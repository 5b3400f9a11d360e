"""Per-level table page view."""

from gi.repository import Gtk

from perk_chart.ui.controllers.chart_controller import ChartController


class TablePage(Gtk.Box):
    """Cumulative totals for every charted level."""

    def __init__(self, controller: ChartController) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        self._controller = controller
        self.set_hexpand(True)
        self.set_vexpand(True)
        self.set_margin_top(16)
        self.set_margin_bottom(16)
        self.set_margin_start(16)
        self.set_margin_end(16)

        title = Gtk.Label(label="Table")
        title.add_css_class("title-2")
        title.set_xalign(0)
        self.append(title)

        self._header = Gtk.Label(xalign=0)
        self._header.add_css_class("heading")
        self.append(self._header)

        scroll = Gtk.ScrolledWindow()
        scroll.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scroll.set_vexpand(True)
        self.append(scroll)
        self._list = Gtk.ListBox()
        self._list.set_selection_mode(Gtk.SelectionMode.NONE)
        scroll.set_child(self._list)

        self.refresh()

    def refresh(self) -> None:
        self._header.set_text("Level   " + "   ".join(self._controller.keys))
        child = self._list.get_first_child()
        while child is not None:
            nxt = child.get_next_sibling()
            self._list.remove(child)
            child = nxt

        for level, values in self._controller.table_rows():
            cells = "   ".join(f"{value:>{len(key)}}" for key, value in zip(self._controller.keys, values))
            label = Gtk.Label(label=f"L{level:>3}    {cells}", xalign=0)
            label.add_css_class("monospace")
            row = Gtk.ListBoxRow()
            row.set_child(label)
            self._list.append(row)
