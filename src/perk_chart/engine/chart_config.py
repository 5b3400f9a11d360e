"""Rendering knobs for the perk chart.

Defaults match the 1000x600 browser chart in webui/. The desktop view
converts the pixel size to a matplotlib figure size through `dpi`.
"""

from dataclasses import dataclass

from perk_chart.models.constants import CHART_Y_LABEL


@dataclass(slots=True)
class ChartConfig:
    """Chart size, margins, and styling shared by the desktop and web views."""

    width: int = 1000
    height: int = 600
    dpi: int = 100
    # web view plot margins, px
    margin_top: int = 20
    margin_right: int = 20
    margin_bottom: int = 30
    margin_left: int = 40
    line_width: float = 1.5
    y_label: str = CHART_Y_LABEL
