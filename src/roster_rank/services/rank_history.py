from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

from roster_rank.domain.errors import PlayerNotFound
from roster_rank.domain.result import Err, Ok
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, UNRANKED, TierTable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from roster_rank.domain.result import Result
    from roster_rank.domain.transition import TransitionEvent
    from roster_rank.repos.protocols import PlayerRepo, TransitionHistory

logger = logging.getLogger(__name__)


class HistoryFilter(Enum):
    ALL = "all"
    LAST_5 = "last-5"
    LAST_30_DAYS = "last-30-days"


def chart_index(tier: str, tier_table: TierTable = DEFAULT_TIER_TABLE) -> int | None:
    """1-based chart position of a tier (lowest tier = 1)."""
    index = tier_table.rank_index(tier)
    return None if index is None else index + 1


def rank_label(index: int, tier_table: TierTable = DEFAULT_TIER_TABLE) -> str:
    names = tier_table.names
    if 1 <= index <= len(names):
        return names[index - 1]
    return UNRANKED


def filter_history(
    events: Iterable[TransitionEvent],
    history_filter: HistoryFilter,
    *,
    now: datetime,
    tier_table: TierTable = DEFAULT_TIER_TABLE,
    recent_count: int = 5,
    recent_days: int = 30,
) -> list[TransitionEvent]:
    ordered = sorted(events, key=lambda e: e.occurred_at)
    match history_filter:
        case HistoryFilter.ALL:
            selected = ordered
        case HistoryFilter.LAST_5:
            selected = ordered[-recent_count:] if recent_count > 0 else []
        case HistoryFilter.LAST_30_DAYS:
            cutoff = now - timedelta(days=recent_days)
            selected = [e for e in ordered if e.occurred_at >= cutoff]
    return [e for e in selected if tier_table.rank_index(e.new_tier) is not None]


def chart_points(
    events: Iterable[TransitionEvent], tier_table: TierTable = DEFAULT_TIER_TABLE
) -> list[tuple[datetime, int]]:
    points: list[tuple[datetime, int]] = []
    for event in events:
        index = chart_index(event.new_tier, tier_table)
        if index is not None:
            points.append((event.occurred_at, index))
    return points


def rank_notice(last_seen: str | None, current: str, tier_table: TierTable = DEFAULT_TIER_TABLE) -> str | None:
    """Message to show when a player's tier differs from the one they last saw."""
    if last_seen == current:
        return None
    if last_seen is None:
        return f"Current Rank: {current}"
    if tier_table.compare(current, last_seen) > 0:
        return f"Promoted to {current}!"
    return f"Demoted to {current}."


class RankHistoryService:
    def __init__(
        self,
        player_repo: PlayerRepo,
        transition_log: TransitionHistory,
        tier_table: TierTable = DEFAULT_TIER_TABLE,
        *,
        recent_count: int = 5,
        recent_days: int = 30,
    ) -> None:
        self._player_repo = player_repo
        self._transition_log = transition_log
        self._tier_table = tier_table
        self._recent_count = recent_count
        self._recent_days = recent_days

    def history(
        self, username: str, history_filter: HistoryFilter, now: datetime
    ) -> Result[list[TransitionEvent], PlayerNotFound]:
        player = self._player_repo.get_by_username(username)
        if player is None or player.id is None:
            return Err(PlayerNotFound(f"No player named {username!r}", username=username))
        events = self._transition_log.get_by_player(player.id)
        logger.debug("Loaded %d rank changes for %s", len(events), username)
        return Ok(
            filter_history(
                events,
                history_filter,
                now=now,
                tier_table=self._tier_table,
                recent_count=self._recent_count,
                recent_days=self._recent_days,
            )
        )
