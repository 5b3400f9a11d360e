"""Perk counting and chart data interfaces."""

from perk_chart.engine.chart_model import ChartData, build_chart_data, series_colors
from perk_chart.engine.perk_counter import PerkCounter

__all__ = [
    "ChartData",
    "PerkCounter",
    "build_chart_data",
    "series_colors",
]
