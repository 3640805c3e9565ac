import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from roster_rank.config import Settings
from roster_rank.db.connection import create_connection
from roster_rank.repos.game_repo import SqliteGameRepo
from roster_rank.repos.player_repo import SqlitePlayerRepo
from roster_rank.repos.session_repo import SqliteSessionRepo
from roster_rank.repos.transition_log import SqliteTransitionLog
from roster_rank.services.coaching import CoachingService
from roster_rank.services.game_recorder import GameRecorder
from roster_rank.services.leaderboard import LeaderboardService
from roster_rank.services.rank_history import RankHistoryService
from roster_rank.services.roster import RosterService


@dataclass(frozen=True)
class RosterContext:
    conn: sqlite3.Connection
    roster: RosterService
    recorder: GameRecorder
    leaderboard: LeaderboardService
    history: RankHistoryService
    coaching: CoachingService


@contextmanager
def build_roster_context(settings: Settings) -> Iterator[RosterContext]:
    """Composition-root context manager for commands that touch the roster database."""
    conn = create_connection(settings.db_path)
    try:
        player_repo = SqlitePlayerRepo(conn)
        game_repo = SqliteGameRepo(conn)
        transition_log = SqliteTransitionLog(conn)
        yield RosterContext(
            conn=conn,
            roster=RosterService(conn, player_repo, game_repo, recent_games=settings.recent_games),
            recorder=GameRecorder(conn, player_repo, game_repo, transition_log),
            leaderboard=LeaderboardService(player_repo),
            history=RankHistoryService(
                player_repo,
                transition_log,
                recent_count=settings.recent_count,
                recent_days=settings.recent_days,
            ),
            coaching=CoachingService(conn, player_repo, SqliteSessionRepo(conn)),
        )
    finally:
        conn.close()
