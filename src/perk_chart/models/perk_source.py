"""Perk source rules.

A perk source decides, from the level alone, whether it grants perks and how
many. Sources hold no state beyond their construction parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class PerkSource(Protocol):
    """Anything that can report perks granted at a level."""

    @property
    def name(self) -> str: ...

    @property
    def perk_count(self) -> int: ...

    def is_available(self, level: int) -> bool: ...


@dataclass(frozen=True, slots=True)
class MilestonePerkSource:
    """Grants `perk_count` perks at every level from `min_level` onward.

    The threshold is inclusive and there is no upper bound.
    """

    name: str
    perk_count: int
    min_level: int

    def is_available(self, level: int) -> bool:
        return level >= self.min_level


@dataclass(frozen=True, slots=True)
class PeriodicPerkSource:
    """Grants `perk_count` perks on a two-range schedule.

    Every even level in [low_level, high_level), then every multiple of
    `step` from high_level onward. At exactly `high_level` only the `step`
    rule applies, even when the level is even.
    """

    name: str
    perk_count: int
    low_level: int
    high_level: int
    step: int

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"step must be > 0, got {self.step}")

    def is_available(self, level: int) -> bool:
        in_low_range = self.low_level <= level < self.high_level and level % 2 == 0
        in_high_range = level >= self.high_level and level % self.step == 0
        return in_low_range or in_high_range


@dataclass(frozen=True, slots=True)
class PerkGrant:
    """Perks granted by one source at one level."""

    level: int
    source: str
    perks: int


def default_perk_sources() -> list[PerkSource]:
    """The fixed rule set charted by the app, in legend order."""
    return [
        MilestonePerkSource("Player Selection", perk_count=1, min_level=2),
        PeriodicPerkSource("Perk Card Pack", perk_count=4, low_level=4, high_level=10, step=5),
    ]
