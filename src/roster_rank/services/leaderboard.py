from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from roster_rank.domain.player import Role
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, TierTable

if TYPE_CHECKING:
    from roster_rank.repos.protocols import PlayerRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardEntry:
    position: int
    username: str
    rank_points: int
    tier: str
    membership: str | None = None


class LeaderboardService:
    def __init__(self, player_repo: PlayerRepo, tier_table: TierTable = DEFAULT_TIER_TABLE) -> None:
        self._player_repo = player_repo
        self._tier_table = tier_table

    def standings(self, top: int | None = None) -> list[LeaderboardEntry]:
        players = self._player_repo.list_by_role(Role.PLAYER)
        players.sort(key=lambda p: (-p.rank_points, p.username))
        if top is not None:
            players = players[:top]
        logger.debug("Leaderboard with %d players", len(players))
        return [
            LeaderboardEntry(
                position=i + 1,
                username=p.username,
                rank_points=p.rank_points,
                tier=self._tier_table.tier_for(p.rank_points),
                membership=p.membership,
            )
            for i, p in enumerate(players)
        ]
