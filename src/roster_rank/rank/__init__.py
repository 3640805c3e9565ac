from roster_rank.rank.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable, benchmarks_for
from roster_rank.rank.delta import contribution
from roster_rank.rank.engine import GameEvaluation, RankUpdate, apply_game, evaluate_game
from roster_rank.rank.scorer import GameScore, score_breakdown, score_game
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, UNRANKED, Tier, TierTable, tier_for

__all__ = [
    "DEFAULT_BENCHMARKS",
    "DEFAULT_TIER_TABLE",
    "UNRANKED",
    "BenchmarkTable",
    "GameEvaluation",
    "GameScore",
    "RankUpdate",
    "Tier",
    "TierTable",
    "apply_game",
    "benchmarks_for",
    "contribution",
    "evaluate_game",
    "score_breakdown",
    "score_game",
    "tier_for",
]
