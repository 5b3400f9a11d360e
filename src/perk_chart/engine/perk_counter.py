"""Cumulative perk counting over a fixed list of perk sources.

This module intentionally contains no rendering code. It produces plain
per-level records that any chart or table can consume.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

from perk_chart.models.constants import TOTAL_PERKS_KEY, source_key
from perk_chart.models.level_summary import LevelSummary
from perk_chart.models.perk_source import PerkGrant, PerkSource


T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def level_range(max_level_exclusive: int) -> range:
    """Levels 0 .. max_level_exclusive - 1, validating the bound."""
    if isinstance(max_level_exclusive, bool) or not isinstance(max_level_exclusive, int):
        raise TypeError(f"max_level_exclusive must be an int, got {max_level_exclusive!r}")
    if max_level_exclusive < 0:
        raise ValueError(f"max_level_exclusive must be >= 0, got {max_level_exclusive}")
    return range(max_level_exclusive)


def index_by(values: Iterable[T], key_func: Callable[[T], K]) -> dict[K, list[T]]:
    """Group values by key, keeping input order within each group."""
    grouped: dict[K, list[T]] = {}
    for value in values:
        grouped.setdefault(key_func(value), []).append(value)
    return grouped


class PerkCounter:
    """Computes per-level running perk totals for an ordered source list."""

    __slots__ = ("_sources",)

    def __init__(self, perk_sources: Sequence[PerkSource]) -> None:
        self._sources = tuple(perk_sources)

    @property
    def sources(self) -> tuple[PerkSource, ...]:
        return self._sources

    def get_keys(self) -> list[str]:
        """Total key first, then one key per source in construction order."""
        return [TOTAL_PERKS_KEY, *(source_key(s.name) for s in self._sources)]

    def get_perks_granted(self, max_level_exclusive: int) -> list[PerkGrant]:
        """Every grant below the bound, ordered by level then source."""
        return [
            PerkGrant(level=level, source=source.name, perks=source.perk_count)
            for level in level_range(max_level_exclusive)
            for source in self._sources
            if source.is_available(level)
        ]

    def get_perks_by_level(self, max_level_exclusive: int) -> list[LevelSummary]:
        """One cumulative summary per level, level `i` at index `i`.

        Raises ValueError for a negative bound. Results are rebuilt on every
        call.
        """
        levels = level_range(max_level_exclusive)
        grants_by_level = index_by(self.get_perks_granted(max_level_exclusive), lambda g: g.level)

        summaries: list[LevelSummary] = []
        current = self._base_summary()
        for level in levels:
            current = self._add_perks(current, level, grants_by_level.get(level, []))
            summaries.append(current)
        return summaries

    def _base_summary(self) -> LevelSummary:
        return LevelSummary(
            level=0,
            total_perks=0,
            perks_by_key={key: 0 for key in self.get_keys()[1:]},
        )

    @staticmethod
    def _add_perks(previous: LevelSummary, level: int, grants: list[PerkGrant]) -> LevelSummary:
        perks_by_key = dict(previous.perks_by_key)
        total = previous.total_perks
        for grant in grants:
            perks_by_key[source_key(grant.source)] += grant.perks
            total += grant.perks
        return LevelSummary(level=level, total_perks=total, perks_by_key=perks_by_key)
