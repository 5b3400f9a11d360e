import pytest

from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.perk_source import default_perk_sources
from perk_chart.ui.controllers.chart_controller import ChartController
from perk_chart.ui.state import UiState


def _controller(max_level_exclusive: int = 61) -> ChartController:
    return ChartController(
        counter=PerkCounter(default_perk_sources()),
        state=UiState(max_level_exclusive=max_level_exclusive),
    )


def test_chart_controller_computes_summaries_on_init():
    controller = _controller(11)
    assert len(controller.summaries) == 11
    assert controller.max_level_exclusive == 11
    assert controller.keys[0] == "Total Perks"


def test_chart_controller_rejects_negative_bound():
    with pytest.raises(ValueError):
        _controller(-1)


def test_chart_controller_refresh_rebuilds_for_state_bound():
    controller = _controller(11)
    controller.state.max_level_exclusive = 5
    controller.refresh()
    assert [s.level for s in controller.summaries] == [0, 1, 2, 3, 4]


def test_chart_controller_table_rows_follow_key_order():
    rows = _controller(5).table_rows()
    assert rows == [
        (0, [0, 0, 0]),
        (1, [0, 0, 0]),
        (2, [1, 1, 0]),
        (3, [2, 2, 0]),
        (4, [7, 3, 4]),
    ]


def test_chart_controller_summary_for_level():
    controller = _controller(11)
    assert controller.summary_for_level(10).total_perks == 25
    assert controller.summary_for_level(11) is None
    assert controller.summary_for_level(-1) is None


def test_chart_controller_figure_uses_state_chart_config():
    controller = _controller(11)
    controller.state.chart.width = 500
    controller.state.chart.height = 300
    fig = controller.figure()

    assert tuple(fig.get_size_inches()) == (5.0, 3.0)
    assert [line.get_label() for line in fig.axes[0].get_lines()] == controller.keys


def test_chart_controller_final_totals_label():
    assert _controller(11).final_totals_label() == (
        "At L10  Total Perks: 25  |  Perks via Player Selection: 9  |  Perks via Perk Card Pack: 16"
    )
    assert _controller(0).final_totals_label() == "No levels charted"
