"""Per-level cumulative perk totals."""

from __future__ import annotations

from dataclasses import dataclass, field

from perk_chart.models.constants import TOTAL_PERKS_KEY


@dataclass(frozen=True, slots=True)
class LevelSummary:
    """Running perk totals up to and including `level`.

    `perks_by_key` holds one cumulative count per source, keyed by
    `"Perks via <source name>"` in source order.
    """

    level: int
    total_perks: int = 0
    perks_by_key: dict[str, int] = field(default_factory=dict)

    def __getitem__(self, key: str) -> int:
        if key == TOTAL_PERKS_KEY:
            return self.total_perks
        return self.perks_by_key[key]

    def keys(self) -> list[str]:
        return [TOTAL_PERKS_KEY, *self.perks_by_key]

    def as_row(self) -> dict[str, int]:
        """Flatten to a single record: level, total, then per-source counts."""
        row = {"level": self.level, TOTAL_PERKS_KEY: self.total_perks}
        row.update(self.perks_by_key)
        return row
