from roster_rank.services.coaching import CoachingService, SessionSlot, SlotStatus
from roster_rank.services.game_recorder import GameOutcome, GameRecorder, parse_game_form
from roster_rank.services.leaderboard import LeaderboardEntry, LeaderboardService
from roster_rank.services.rank_history import HistoryFilter, RankHistoryService, filter_history, rank_notice
from roster_rank.services.roster import PlayerOverview, RosterService

__all__ = [
    "CoachingService",
    "GameOutcome",
    "GameRecorder",
    "HistoryFilter",
    "LeaderboardEntry",
    "LeaderboardService",
    "PlayerOverview",
    "RankHistoryService",
    "RosterService",
    "SessionSlot",
    "SlotStatus",
    "filter_history",
    "parse_game_form",
    "rank_notice",
]
