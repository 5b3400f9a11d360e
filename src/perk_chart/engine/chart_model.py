"""Chart-facing adapter over per-level perk summaries.

This module intentionally contains no GUI code. It turns the counter output
into series and colors that any renderer can draw. Inputs are read only;
nothing here mutates the summaries or the key list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from perk_chart.models.constants import CHART_Y_LABEL
from perk_chart.models.level_summary import LevelSummary


# Same order as matplotlib "tab10" and d3.schemeCategory10.
CATEGORY10: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """One line: a key name and its value at each charted level."""

    name: str
    values: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class ChartData:
    """Everything a line chart needs: y label, series, and the level axis."""

    y_label: str
    series: tuple[ChartSeries, ...]
    levels: tuple[int, ...]

    @property
    def max_value(self) -> int:
        return max((max(s.values) for s in self.series if s.values), default=0)


def build_chart_data(
    summaries: Sequence[LevelSummary],
    keys: Sequence[str],
    y_label: str = CHART_Y_LABEL,
) -> ChartData:
    """Build one series per key, in key order."""
    series = tuple(
        ChartSeries(name=key, values=tuple(summary[key] for summary in summaries))
        for key in keys
    )
    return ChartData(
        y_label=y_label,
        series=series,
        levels=tuple(summary.level for summary in summaries),
    )


def series_colors(data: ChartData) -> dict[str, str]:
    """Assign palette colors by series order, wrapping after ten."""
    return {
        series.name: CATEGORY10[i % len(CATEGORY10)]
        for i, series in enumerate(data.series)
    }
