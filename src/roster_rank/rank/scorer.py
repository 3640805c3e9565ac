import logging
from dataclasses import dataclass

from roster_rank.domain.game import GameStats, Stat
from roster_rank.rank.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable
from roster_rank.rank.delta import contribution

logger = logging.getLogger(__name__)

GAME_CEILING = 50
GAME_FLOOR = -20


@dataclass(frozen=True)
class GameScore:
    tier: str
    contributions: dict[Stat, int]
    raw_total: int
    delta: int


def clamp_total(raw_total: int) -> int:
    return max(min(raw_total, GAME_CEILING), GAME_FLOOR)


def score_breakdown(stats: GameStats, tier: str, benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS) -> GameScore:
    averages = benchmarks.benchmarks_for(tier)
    contributions = {stat: contribution(stat, stats.value(stat), averages.get(stat, 0)) for stat in Stat}
    raw_total = sum(contributions.values())
    delta = clamp_total(raw_total)
    logger.debug("Scored game against %s: raw=%d delta=%d", tier, raw_total, delta)
    return GameScore(tier=tier, contributions=contributions, raw_total=raw_total, delta=delta)


def score_game(stats: GameStats, tier: str, benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS) -> int:
    """Total rank-point delta for one game, clamped to [-20, +50]."""
    return score_breakdown(stats, tier, benchmarks).delta
