"""Shared UI state and lightweight app metadata."""

from dataclasses import dataclass, field

from perk_chart.engine.chart_config import ChartConfig
from perk_chart.models.constants import DEFAULT_MAX_LEVEL_EXCLUSIVE


@dataclass(slots=True)
class UiState:
    """Top-level app state used by controllers and views."""

    title: str = "Perks by Level"
    max_level_exclusive: int = DEFAULT_MAX_LEVEL_EXCLUSIVE
    chart: ChartConfig = field(default_factory=ChartConfig)
