"""Matplotlib figure for the perks-by-level line chart.

Builds a plain `Figure` (no pyplot state), so the same figure can sit in a
GTK canvas or be rendered headless.
"""

from __future__ import annotations

from matplotlib.figure import Figure

from perk_chart.engine.chart_config import ChartConfig
from perk_chart.engine.chart_model import ChartData, series_colors


def build_figure(data: ChartData, config: ChartConfig | None = None) -> Figure:
    """One line per series in key order, with level on x and perks on y."""
    cfg = config or ChartConfig()
    fig = Figure(figsize=(cfg.width / cfg.dpi, cfg.height / cfg.dpi), dpi=cfg.dpi)
    ax = fig.add_subplot()
    draw_chart(ax, data, cfg)
    fig.tight_layout()
    return fig


def draw_chart(ax, data: ChartData, config: ChartConfig) -> None:
    colors = series_colors(data)
    for series in data.series:
        ax.plot(
            data.levels,
            series.values,
            label=series.name,
            color=colors[series.name],
            linewidth=config.line_width,
            solid_joinstyle="round",
            solid_capstyle="round",
        )
    ax.set_xlabel("Level")
    ax.set_ylabel(data.y_label)
    ax.set_ylim(bottom=0)
    if len(data.levels) > 1:
        ax.set_xlim(min(data.levels), max(data.levels))
    ax.grid(True, alpha=0.3)
    if data.series:
        ax.legend(loc="upper left")
