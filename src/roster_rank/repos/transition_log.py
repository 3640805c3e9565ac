import sqlite3
from datetime import datetime
from uuid import UUID

from roster_rank.domain.transition import Direction, TransitionEvent


class SqliteTransitionLog:
    """Append-only ``rank_change`` table. Events are never updated."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def record(self, event: TransitionEvent) -> None:
        self._conn.execute(
            """INSERT INTO rank_change (id, player_id, new_rank, direction, occurred_at)
               VALUES (?, ?, ?, ?, ?)""",
            (
                str(event.id),
                event.player_id,
                event.new_tier,
                event.direction.value,
                event.occurred_at.isoformat(),
            ),
        )

    def get_by_player(self, player_id: int) -> list[TransitionEvent]:
        rows = self._conn.execute(
            "SELECT * FROM rank_change WHERE player_id = ? ORDER BY occurred_at",
            (player_id,),
        ).fetchall()
        return [self._row_to_event(row) for row in rows]

    @staticmethod
    def _row_to_event(row: sqlite3.Row) -> TransitionEvent:
        return TransitionEvent(
            id=UUID(row["id"]),
            player_id=row["player_id"],
            new_tier=row["new_rank"],
            direction=Direction(row["direction"]),
            occurred_at=datetime.fromisoformat(row["occurred_at"]),
        )
