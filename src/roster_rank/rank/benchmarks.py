import logging
from collections.abc import Mapping
from types import MappingProxyType

from roster_rank.domain.game import Stat

logger = logging.getLogger(__name__)

_ZERO: Mapping[Stat, int] = MappingProxyType({stat: 0 for stat in Stat})


class BenchmarkTable:
    """Per-tier expected averages for each tracked stat."""

    def __init__(self, averages: Mapping[str, Mapping[Stat, int]]) -> None:
        table: dict[str, Mapping[Stat, int]] = {}
        for tier, stats in averages.items():
            missing = set(Stat) - set(stats)
            if missing:
                names = ", ".join(sorted(s.value for s in missing))
                raise ValueError(f"Benchmarks for {tier!r} are missing: {names}")
            table[tier] = MappingProxyType(dict(stats))
        self._table = MappingProxyType(table)

    @property
    def tiers(self) -> tuple[str, ...]:
        return tuple(self._table)

    def benchmarks_for(self, tier: str) -> Mapping[Stat, int]:
        found = self._table.get(tier)
        if found is None:
            logger.warning("No benchmarks for tier %r; scoring against zero averages", tier)
            return _ZERO
        return found


def _row(points: int, rebounds: int, assists: int, blocks: int, steals: int) -> dict[Stat, int]:
    return {
        Stat.POINTS: points,
        Stat.REBOUNDS: rebounds,
        Stat.ASSISTS: assists,
        Stat.BLOCKS: blocks,
        Stat.STEALS: steals,
    }


DEFAULT_BENCHMARKS = BenchmarkTable(
    {
        "Rookie": _row(5, 3, 2, 0, 1),
        "Bronze III": _row(7, 4, 2, 0, 1),
        "Bronze II": _row(9, 4, 3, 0, 2),
        "Bronze I": _row(11, 5, 3, 1, 2),
        "Silver III": _row(10, 4, 3, 1, 2),
        "Silver II": _row(11, 5, 3, 1, 2),
        "Silver I": _row(12, 6, 3, 1, 3),
        "Gold III": _row(10, 5, 6, 1, 2),
        "Gold II": _row(9, 5, 3, 1, 2),
        "Gold I": _row(13, 7, 2, 0, 3),
    }
)


def benchmarks_for(tier: str) -> Mapping[Stat, int]:
    return DEFAULT_BENCHMARKS.benchmarks_for(tier)
