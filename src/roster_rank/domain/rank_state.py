from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roster_rank.rank.engine import RankUpdate


@dataclass(frozen=True)
class PlayerRankState:
    player_id: int
    rank_points: int = 0
    last_known_tier: str | None = None

    def __post_init__(self) -> None:
        if self.rank_points < 0:
            raise ValueError(f"rank_points must be >= 0, got {self.rank_points}")

    def with_update(self, update: RankUpdate) -> PlayerRankState:
        return replace(self, rank_points=update.new_points, last_known_tier=update.new_tier)
