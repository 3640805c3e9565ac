import sqlite3

from roster_rank.domain.player import Player, Role
from roster_rank.repos.errors import DuplicateUsernameError


class SqlitePlayerRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def insert(self, player: Player) -> int:
        try:
            cursor = self._conn.execute(
                """INSERT INTO player (username, role, membership, rank_points, last_rank)
                   VALUES (?, ?, ?, ?, ?)""",
                (player.username, player.role.value, player.membership, player.rank_points, player.last_rank),
            )
        except sqlite3.IntegrityError:
            if self.get_by_username(player.username) is not None:
                raise DuplicateUsernameError(player) from None
            raise
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_id(self, player_id: int) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE id = ?", (player_id,)).fetchone()
        return self._row_to_player(row) if row else None

    def get_by_username(self, username: str) -> Player | None:
        row = self._conn.execute("SELECT * FROM player WHERE username = ?", (username,)).fetchone()
        return self._row_to_player(row) if row else None

    def list_by_role(self, role: Role) -> list[Player]:
        rows = self._conn.execute("SELECT * FROM player WHERE role = ? ORDER BY username", (role.value,)).fetchall()
        return [self._row_to_player(row) for row in rows]

    def update_rank_points(self, player_id: int, rank_points: int) -> None:
        self._conn.execute("UPDATE player SET rank_points = ? WHERE id = ?", (rank_points, player_id))

    def update_last_rank(self, player_id: int, last_rank: str | None) -> None:
        self._conn.execute("UPDATE player SET last_rank = ? WHERE id = ?", (last_rank, player_id))

    def update_membership(self, player_id: int, membership: str | None) -> None:
        self._conn.execute("UPDATE player SET membership = ? WHERE id = ?", (membership, player_id))

    def update_role(self, player_id: int, role: Role) -> None:
        self._conn.execute("UPDATE player SET role = ? WHERE id = ?", (role.value, player_id))

    @staticmethod
    def _row_to_player(row: sqlite3.Row) -> Player:
        return Player(
            id=row["id"],
            username=row["username"],
            role=Role(row["role"]),
            membership=row["membership"],
            rank_points=row["rank_points"],
            last_rank=row["last_rank"],
        )
