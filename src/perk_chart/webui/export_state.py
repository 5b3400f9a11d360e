"""Export chart state for the web UI runtime."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from perk_chart.engine.chart_config import ChartConfig
from perk_chart.engine.chart_model import build_chart_data, series_colors
from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.constants import DEFAULT_MAX_LEVEL_EXCLUSIVE
from perk_chart.models.perk_source import PerkSource, default_perk_sources


def _source_payload(source: PerkSource) -> dict[str, Any]:
    return {
        "name": str(source.name),
        "perk_count": int(source.perk_count),
        "kind": type(source).__name__,
    }


def build_webui_state(
    counter: PerkCounter | None = None,
    max_level_exclusive: int = DEFAULT_MAX_LEVEL_EXCLUSIVE,
    *,
    config: ChartConfig | None = None,
) -> dict[str, Any]:
    """Build a JSON-ready snapshot of the per-level table and chart data."""
    active = counter or PerkCounter(default_perk_sources())
    cfg = config or ChartConfig()
    keys = active.get_keys()
    summaries = active.get_perks_by_level(max_level_exclusive)
    data = build_chart_data(summaries, keys, cfg.y_label)

    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "app": {
            "max_level_exclusive": int(max_level_exclusive),
            "sources": [_source_payload(s) for s in active.sources],
        },
        "keys": keys,
        "rows": [summary.as_row() for summary in summaries],
        "chart": {
            "y": data.y_label,
            "levels": list(data.levels),
            "series": [
                {"name": series.name, "values": list(series.values)}
                for series in data.series
            ],
            "colors": series_colors(data),
            "width": cfg.width,
            "height": cfg.height,
            "margin": {
                "top": cfg.margin_top,
                "right": cfg.margin_right,
                "bottom": cfg.margin_bottom,
                "left": cfg.margin_left,
            },
        },
    }
