"""Apply a scored game to a player's running rank-point total.

Everything here is a pure function of its arguments: the pre-game tier is
always derived from the pre-game point total, and nothing is persisted. The
caller owns saving the new total and appending any transition event.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from roster_rank.domain.game import GameStats
from roster_rank.domain.transition import Direction, TransitionEvent
from roster_rank.rank.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable
from roster_rank.rank.scorer import GameScore, score_breakdown
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, TierTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankUpdate:
    old_points: int
    new_points: int
    old_tier: str
    new_tier: str
    transition: TransitionEvent | None = None

    @property
    def delta(self) -> int:
        return self.new_points - self.old_points


@dataclass(frozen=True)
class GameEvaluation:
    score: GameScore
    update: RankUpdate


def apply_game(
    current_points: int,
    delta: int,
    *,
    player_id: int,
    now: datetime,
    tier_table: TierTable = DEFAULT_TIER_TABLE,
    id_factory: Callable[[], UUID] = uuid4,
) -> RankUpdate:
    new_points = max(0, current_points + delta)
    old_tier = tier_table.tier_for(current_points)
    new_tier = tier_table.tier_for(new_points)

    if new_tier == old_tier:
        return RankUpdate(old_points=current_points, new_points=new_points, old_tier=old_tier, new_tier=new_tier)

    direction = Direction.PROMOTED if tier_table.compare(new_tier, old_tier) > 0 else Direction.DEMOTED
    event = TransitionEvent(
        id=id_factory(),
        occurred_at=now,
        new_tier=new_tier,
        player_id=player_id,
        direction=direction,
    )
    logger.info("Player %d %s: %s -> %s", player_id, direction.value, old_tier, new_tier)
    return RankUpdate(
        old_points=current_points,
        new_points=new_points,
        old_tier=old_tier,
        new_tier=new_tier,
        transition=event,
    )


def evaluate_game(
    stats: GameStats,
    current_points: int,
    *,
    player_id: int,
    now: datetime,
    tier_table: TierTable = DEFAULT_TIER_TABLE,
    benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS,
    id_factory: Callable[[], UUID] = uuid4,
) -> GameEvaluation:
    """Score ``stats`` against the pre-game tier's benchmarks and apply the delta."""
    score = score_breakdown(stats, tier_table.tier_for(current_points), benchmarks)
    update = apply_game(
        current_points,
        score.delta,
        player_id=player_id,
        now=now,
        tier_table=tier_table,
        id_factory=id_factory,
    )
    return GameEvaluation(score=score, update=update)
