import sqlite3
from datetime import UTC, datetime

from roster_rank.domain.game import GameRecord, GameStats
from roster_rank.repos.game_repo import SqliteGameRepo
from tests.helpers import seed_player


class TestSqliteGameRepo:
    def test_insert_and_get_by_player(self, conn: sqlite3.Connection) -> None:
        player_id = seed_player(conn, username="ann")
        repo = SqliteGameRepo(conn)
        played_at = datetime(2025, 4, 2, 19, 0, tzinfo=UTC)
        stats = GameStats(points=14, rebounds=6, assists=3, blocks=1, steals=2)
        game_id = repo.insert(GameRecord(player_id=player_id, stats=stats, played_at=played_at))
        games = repo.get_by_player(player_id)
        assert len(games) == 1
        assert games[0].id == game_id
        assert games[0].stats == stats
        assert games[0].played_at == played_at

    def test_games_ordered_by_time(self, conn: sqlite3.Connection) -> None:
        player_id = seed_player(conn, username="ann")
        repo = SqliteGameRepo(conn)
        stats = GameStats(points=1, rebounds=1, assists=1, blocks=1, steals=1)
        repo.insert(GameRecord(player_id=player_id, stats=stats, played_at=datetime(2025, 5, 1, tzinfo=UTC)))
        repo.insert(GameRecord(player_id=player_id, stats=stats, played_at=datetime(2025, 4, 1, tzinfo=UTC)))
        games = repo.get_by_player(player_id)
        assert [g.played_at.month for g in games] == [4, 5]

    def test_other_players_excluded(self, conn: sqlite3.Connection) -> None:
        ann = seed_player(conn, username="ann")
        bob = seed_player(conn, username="bob")
        repo = SqliteGameRepo(conn)
        stats = GameStats(points=1, rebounds=1, assists=1, blocks=1, steals=1)
        repo.insert(GameRecord(player_id=bob, stats=stats, played_at=datetime(2025, 4, 1, tzinfo=UTC)))
        assert repo.get_by_player(ann) == []
