import json

import pytest

from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.perk_source import default_perk_sources
from scripts.dump_perks_by_level import format_table, main


def test_format_table_aligns_columns():
    counter = PerkCounter(default_perk_sources())
    lines = format_table(counter.get_perks_by_level(5), counter.get_keys())

    assert lines[0] == "Level | Total Perks | Perks via Player Selection | Perks via Perk Card Pack"
    assert set(lines[1]) == {"-"}
    assert len(lines) == 7
    assert lines[-1].split(" | ") == ["    4", "          7", "3".rjust(26), "4".rjust(24)]


def test_main_json_matches_counter(capsys):
    main(["--max-level", "11", "--json"])
    payload = json.loads(capsys.readouterr().out)

    counter = PerkCounter(default_perk_sources())
    assert payload["keys"] == counter.get_keys()
    assert payload["rows"] == [s.as_row() for s in counter.get_perks_by_level(11)]


def test_main_grants_text(capsys):
    main(["--max-level", "5", "--grants"])
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "Level  2 | +1 via Player Selection"
    assert "Level  4 | +4 via Perk Card Pack" in out
    assert out[-1] == "Total: 4 grants"


def test_main_rejects_negative_bound(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--max-level", "-3"])
    assert exc.value.code == 2
    assert "max_level_exclusive must be >= 0" in capsys.readouterr().err
