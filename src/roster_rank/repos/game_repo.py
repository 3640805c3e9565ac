import sqlite3
from datetime import datetime

from roster_rank.domain.game import GameRecord, GameStats


class SqliteGameRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert(self, game: GameRecord) -> int:
        stats = game.stats
        cursor = self._conn.execute(
            """INSERT INTO game (player_id, points, rebounds, assists, blocks, steals, played_at)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                game.player_id,
                stats.points,
                stats.rebounds,
                stats.assists,
                stats.blocks,
                stats.steals,
                game.played_at.isoformat(),
            ),
        )
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_player(self, player_id: int) -> list[GameRecord]:
        rows = self._conn.execute(
            "SELECT * FROM game WHERE player_id = ? ORDER BY played_at, id",
            (player_id,),
        ).fetchall()
        return [self._row_to_game(row) for row in rows]

    @staticmethod
    def _row_to_game(row: sqlite3.Row) -> GameRecord:
        return GameRecord(
            id=row["id"],
            player_id=row["player_id"],
            stats=GameStats(
                points=row["points"],
                rebounds=row["rebounds"],
                assists=row["assists"],
                blocks=row["blocks"],
                steals=row["steals"],
            ),
            played_at=datetime.fromisoformat(row["played_at"]),
        )
