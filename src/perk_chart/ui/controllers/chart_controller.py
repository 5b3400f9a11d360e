"""Controller for the chart and table pages."""

from dataclasses import dataclass, field

from matplotlib.figure import Figure

from perk_chart.engine.chart_figure import build_figure
from perk_chart.engine.chart_model import ChartData, build_chart_data
from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.level_summary import LevelSummary
from perk_chart.ui.state import UiState


@dataclass(slots=True)
class ChartController:
    """Owns the counter output shown by the chart and table pages."""

    counter: PerkCounter
    state: UiState
    summaries: list[LevelSummary] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.refresh()

    @property
    def keys(self) -> list[str]:
        return self.counter.get_keys()

    @property
    def max_level_exclusive(self) -> int:
        return self.state.max_level_exclusive

    def refresh(self) -> None:
        """Recompute summaries from scratch for the current bound."""
        self.summaries = self.counter.get_perks_by_level(self.state.max_level_exclusive)

    def chart_data(self) -> ChartData:
        return build_chart_data(self.summaries, self.keys, self.state.chart.y_label)

    def figure(self) -> Figure:
        """Matplotlib figure for the current summaries at the configured size."""
        return build_figure(self.chart_data(), self.state.chart)

    def summary_for_level(self, level: int) -> LevelSummary | None:
        if 0 <= level < len(self.summaries):
            return self.summaries[level]
        return None

    def table_rows(self) -> list[tuple[int, list[int]]]:
        """(level, values in key order) for each summary."""
        keys = self.keys
        return [(s.level, [s[key] for key in keys]) for s in self.summaries]

    def final_totals_label(self) -> str:
        if not self.summaries:
            return "No levels charted"
        last = self.summaries[-1]
        parts = [f"{key}: {last[key]}" for key in self.keys]
        return f"At L{last.level}  " + "  |  ".join(parts)
