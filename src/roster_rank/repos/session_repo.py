from __future__ import annotations

import sqlite3
from datetime import datetime

from roster_rank.domain.session import CoachingSession


class SqliteSessionRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert(self, session: CoachingSession) -> int:
        cursor = self._conn.execute(
            """INSERT INTO coaching_session (title, coach_name, scheduled_at, player_id)
               VALUES (?, ?, ?, ?)""",
            (session.title, session.coach_name, session.scheduled_at.isoformat(), session.player_id),
        )
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, session_id: int) -> CoachingSession | None:
        row = self._conn.execute("SELECT * FROM coaching_session WHERE id = ?", (session_id,)).fetchone()
        return self._row_to_session(row) if row else None

    def get_booked_by(self, player_id: int) -> CoachingSession | None:
        row = self._conn.execute("SELECT * FROM coaching_session WHERE player_id = ?", (player_id,)).fetchone()
        return self._row_to_session(row) if row else None

    def list_all(self) -> list[CoachingSession]:
        rows = self._conn.execute("SELECT * FROM coaching_session ORDER BY scheduled_at, id").fetchall()
        return [self._row_to_session(row) for row in rows]

    def book(self, session_id: int, player_id: int) -> bool:
        """Claim an open session. Returns False if it is missing or already taken."""
        cursor = self._conn.execute(
            "UPDATE coaching_session SET player_id = ? WHERE id = ? AND player_id IS NULL",
            (player_id, session_id),
        )
        return cursor.rowcount == 1

    def release(self, session_id: int) -> None:
        self._conn.execute("UPDATE coaching_session SET player_id = NULL WHERE id = ?", (session_id,))

    def delete(self, session_id: int) -> None:
        self._conn.execute("DELETE FROM coaching_session WHERE id = ?", (session_id,))

    @staticmethod
    def _row_to_session(row: sqlite3.Row) -> CoachingSession:
        return CoachingSession(
            id=row["id"],
            title=row["title"],
            coach_name=row["coach_name"],
            scheduled_at=datetime.fromisoformat(row["scheduled_at"]),
            player_id=row["player_id"],
        )
