from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from roster_rank.db.connection import transaction
from roster_rank.domain.errors import PlayerNotFound
from roster_rank.domain.player import Membership, Player, Role
from roster_rank.domain.result import Err, Ok, rejected
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, TierTable
from roster_rank.repos.errors import DuplicateUsernameError
from roster_rank.services.rank_history import rank_notice

if TYPE_CHECKING:
    import sqlite3

    from roster_rank.domain.game import GameRecord
    from roster_rank.domain.result import Result, RosterResult
    from roster_rank.repos.protocols import GameRepo, PlayerRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerOverview:
    player: Player
    tier: str
    recent_games: list[GameRecord]  # newest first


class RosterService:
    def __init__(
        self,
        conn: sqlite3.Connection,
        player_repo: PlayerRepo,
        game_repo: GameRepo,
        tier_table: TierTable = DEFAULT_TIER_TABLE,
        *,
        recent_games: int = 5,
    ) -> None:
        self._conn = conn
        self._player_repo = player_repo
        self._game_repo = game_repo
        self._tier_table = tier_table
        self._recent_games = recent_games

    def add_player(
        self, username: str, role: Role = Role.PLAYER, membership: str | None = None
    ) -> RosterResult[Player]:
        username = username.strip()
        if not username:
            return rejected("Username must not be empty")
        player = Player(username=username, role=role, membership=membership)
        try:
            with transaction(self._conn):
                player_id = self._player_repo.insert(player)
        except DuplicateUsernameError as e:
            return rejected(str(e))
        logger.info("Added %s account %s", role.value, username)
        return Ok(replace(player, id=player_id))

    def overview(self, username: str) -> Result[PlayerOverview, PlayerNotFound]:
        """Account details, current tier and the most recent games."""
        player = self._player_repo.get_by_username(username)
        if player is None or player.id is None:
            return Err(PlayerNotFound(f"No player named {username!r}", username=username))
        games = self._game_repo.get_by_player(player.id)
        recent = games[-self._recent_games :][::-1] if self._recent_games > 0 else []
        return Ok(PlayerOverview(player, self._tier_table.tier_for(player.rank_points), recent))

    def edit_player(
        self, username: str, *, membership: Membership | None = None, role: Role | None = None
    ) -> RosterResult[Player]:
        """Change an account's membership plan and/or role. Fields left as None are kept."""
        if membership is None and role is None:
            return rejected("Nothing to change: pass a membership or a role.")
        with transaction(self._conn):
            player = self._player_repo.get_by_username(username)
            if player is None or player.id is None:
                return Err(PlayerNotFound(f"No player named {username!r}", username=username))
            if membership is not None:
                self._player_repo.update_membership(player.id, membership.value)
                player = replace(player, membership=membership.value)
            if role is not None:
                self._player_repo.update_role(player.id, role)
                player = replace(player, role=role)
        logger.info("Updated %s: membership=%s role=%s", username, player.membership, player.role.value)
        return Ok(player)

    def check_in(self, username: str) -> Result[str | None, PlayerNotFound]:
        """Acknowledge the player's current tier, returning a notice if it changed since last seen."""
        player = self._player_repo.get_by_username(username)
        if player is None or player.id is None:
            return Err(PlayerNotFound(f"No player named {username!r}", username=username))
        current = self._tier_table.tier_for(player.rank_points)
        notice = rank_notice(player.last_rank, current, self._tier_table)
        if notice is not None:
            with transaction(self._conn):
                self._player_repo.update_last_rank(player.id, current)
        return Ok(notice)
