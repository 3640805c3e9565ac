from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from roster_rank.db.connection import transaction
from roster_rank.domain.errors import PlayerNotFound, ValidationError
from roster_rank.domain.game import GameRecord, GameStats, Stat
from roster_rank.domain.player import Role
from roster_rank.domain.rank_state import PlayerRankState
from roster_rank.domain.result import Err, Ok, rejected
from roster_rank.domain.transition import Direction, TransitionEvent
from roster_rank.rank.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable
from roster_rank.rank.engine import evaluate_game
from roster_rank.rank.scorer import GameScore
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, TierTable

if TYPE_CHECKING:
    import sqlite3
    from collections.abc import Callable, Mapping

    from roster_rank.domain.result import Result, RosterResult
    from roster_rank.repos.protocols import GameRepo, PlayerRepo, TransitionLog

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill out all fields and select a player."

# Largest value a single stat field accepts.
MAX_STAT_VALUE = 999


def parse_game_form(fields: Mapping[str, str | None]) -> Result[GameStats, ValidationError]:
    """Validate raw form input into ``GameStats``.

    Every stat field is required and must be a whole number from 0 to
    ``MAX_STAT_VALUE``.
    """
    values: dict[str, int] = {}
    for stat in Stat:
        raw = fields.get(stat.value)
        if raw is None or not raw.strip():
            return Err(ValidationError(MISSING_FIELDS_MESSAGE, field=stat.value))
        text = raw.strip()
        if not text.isdecimal():
            return Err(ValidationError(f"{stat.value.capitalize()} must be a non-negative whole number.", stat.value))
        digits = text.lstrip("0") or "0"
        if len(digits) > len(str(MAX_STAT_VALUE)) or int(digits) > MAX_STAT_VALUE:
            return Err(ValidationError(f"{stat.value.capitalize()} must be at most {MAX_STAT_VALUE}.", stat.value))
        values[stat.value] = int(digits)
    return Ok(GameStats(**values))


def format_delta(delta: int) -> str:
    return f"{delta:+d} RP"


def transition_message(event: TransitionEvent) -> str:
    if event.direction is Direction.PROMOTED:
        return f"Promoted to {event.new_tier}!"
    return f"Demoted to {event.new_tier}."


@dataclass(frozen=True)
class GameOutcome:
    game_id: int
    username: str
    score: GameScore
    state: PlayerRankState
    old_points: int
    old_tier: str
    transition: TransitionEvent | None = None

    @property
    def delta(self) -> int:
        return self.score.delta

    @property
    def new_points(self) -> int:
        return self.state.rank_points

    @property
    def new_tier(self) -> str | None:
        return self.state.last_known_tier

    @property
    def message(self) -> str:
        return f"Game recorded. {format_delta(self.delta)}."

    @property
    def transition_message(self) -> str | None:
        return transition_message(self.transition) if self.transition else None


class GameRecorder:
    """Persist a game and apply its rank-point delta to the player.

    The game row, the new point total, and any transition event are written in
    one immediate transaction, so two submissions for the same player are
    scored one after the other against the freshly stored total.
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        player_repo: PlayerRepo,
        game_repo: GameRepo,
        transition_log: TransitionLog,
        *,
        tier_table: TierTable = DEFAULT_TIER_TABLE,
        benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._conn = conn
        self._player_repo = player_repo
        self._game_repo = game_repo
        self._transition_log = transition_log
        self._tier_table = tier_table
        self._benchmarks = benchmarks
        self._clock = clock

    def record(self, username: str, stats: GameStats, now: datetime | None = None) -> RosterResult[GameOutcome]:
        when = now if now is not None else self._clock()
        with transaction(self._conn, immediate=True):
            player = self._player_repo.get_by_username(username)
            if player is None or player.id is None:
                return Err(PlayerNotFound(f"No player named {username!r}", username=username))
            if player.role is not Role.PLAYER:
                return rejected(f"{username!r} is not a player account")

            game_id = self._game_repo.insert(GameRecord(player_id=player.id, stats=stats, played_at=when))
            evaluation = evaluate_game(
                stats,
                player.rank_points,
                player_id=player.id,
                now=when,
                tier_table=self._tier_table,
                benchmarks=self._benchmarks,
            )
            update = evaluation.update
            self._player_repo.update_rank_points(player.id, update.new_points)
            if update.transition is not None:
                self._transition_log.record(update.transition)

        logger.info(
            "Recorded game %d for %s: %s (%d -> %d)",
            game_id,
            username,
            format_delta(evaluation.score.delta),
            update.old_points,
            update.new_points,
        )
        state = PlayerRankState(player_id=player.id, rank_points=player.rank_points).with_update(update)
        return Ok(
            GameOutcome(
                game_id=game_id,
                username=username,
                score=evaluation.score,
                state=state,
                old_points=update.old_points,
                old_tier=update.old_tier,
                transition=update.transition,
            )
        )
