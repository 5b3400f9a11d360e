from perk_chart.engine.chart_model import (
    CATEGORY10,
    ChartData,
    ChartSeries,
    build_chart_data,
    series_colors,
)
from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.perk_source import default_perk_sources


def _chart_data(n: int = 61) -> ChartData:
    counter = PerkCounter(default_perk_sources())
    return build_chart_data(counter.get_perks_by_level(n), counter.get_keys())


def test_series_follow_key_order():
    counter = PerkCounter(default_perk_sources())
    data = build_chart_data(counter.get_perks_by_level(11), counter.get_keys())

    assert [s.name for s in data.series] == counter.get_keys()
    assert data.levels == tuple(range(11))
    assert data.series[0].values == (0, 0, 1, 2, 7, 8, 13, 14, 19, 20, 25)
    assert data.y_label == "Perks"


def test_build_chart_data_does_not_mutate_inputs():
    counter = PerkCounter(default_perk_sources())
    summaries = counter.get_perks_by_level(5)
    keys = counter.get_keys()
    rows_before = [s.as_row() for s in summaries]
    keys_before = list(keys)

    build_chart_data(summaries, keys)

    assert [s.as_row() for s in summaries] == rows_before
    assert keys == keys_before


def test_max_value_over_all_series():
    assert _chart_data().max_value == 115
    assert _chart_data(0).max_value == 0


def test_series_colors_by_order_and_wrap():
    data = _chart_data()
    colors = series_colors(data)
    assert list(colors.values()) == list(CATEGORY10[:3])

    wide = ChartData(
        y_label="Perks",
        series=tuple(ChartSeries(name=f"S{i}", values=()) for i in range(11)),
        levels=(),
    )
    assert series_colors(wide)["S10"] == CATEGORY10[0]
