"""Dump cumulative perks per level for the default perk sources.

Usage:
    python -m scripts.dump_perks_by_level [--max-level N] [--json] [--grants]
"""

from __future__ import annotations

import argparse
import json

from perk_chart.engine.perk_counter import PerkCounter
from perk_chart.models.constants import DEFAULT_MAX_LEVEL_EXCLUSIVE
from perk_chart.models.level_summary import LevelSummary
from perk_chart.models.perk_source import default_perk_sources


def format_table(summaries: list[LevelSummary], keys: list[str]) -> list[str]:
    """Render summaries as fixed-width text lines, header first."""
    widths = [max(len(key), 3) for key in keys]
    header = "Level | " + " | ".join(key.rjust(w) for key, w in zip(keys, widths))
    lines = [header, "-" * len(header)]
    for summary in summaries:
        cells = " | ".join(str(summary[key]).rjust(w) for key, w in zip(keys, widths))
        lines.append(f"{summary.level:>5} | {cells}")
    return lines


def _rows_payload(summaries: list[LevelSummary], keys: list[str]) -> dict:
    return {
        "keys": keys,
        "rows": [summary.as_row() for summary in summaries],
    }


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dump perks by level")
    parser.add_argument("--max-level", type=int, default=DEFAULT_MAX_LEVEL_EXCLUSIVE,
                        help="Levels 0..N-1 (default: %(default)s)")
    parser.add_argument("--json", action="store_true",
                        help="Print keys and rows as JSON")
    parser.add_argument("--grants", action="store_true",
                        help="List individual grants instead of running totals")
    args = parser.parse_args(argv)

    counter = PerkCounter(default_perk_sources())
    try:
        summaries = counter.get_perks_by_level(args.max_level)
    except ValueError as exc:
        parser.error(str(exc))
    keys = counter.get_keys()

    if args.grants:
        grants = counter.get_perks_granted(args.max_level)
        if args.json:
            print(json.dumps(
                [{"level": g.level, "source": g.source, "perks": g.perks} for g in grants],
                indent=2,
            ))
            return
        for grant in grants:
            print(f"Level {grant.level:>2} | +{grant.perks} via {grant.source}")
        print(f"Total: {len(grants)} grants")
        return

    if args.json:
        print(json.dumps(_rows_payload(summaries, keys), indent=2))
        return

    for line in format_table(summaries, keys):
        print(line)


if __name__ == "__main__":
    main()
