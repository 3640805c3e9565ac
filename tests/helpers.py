import sqlite3

from roster_rank.domain.player import Role


def seed_player(
    conn: sqlite3.Connection,
    *,
    username: str = "tester",
    role: Role = Role.PLAYER,
    rank_points: int = 0,
    membership: str | None = None,
    last_rank: str | None = None,
) -> int:
    """Insert a player row via raw SQL and commit, returning its id."""
    cursor = conn.execute(
        "INSERT INTO player (username, role, membership, rank_points, last_rank) VALUES (?, ?, ?, ?, ?)",
        (username, role.value, membership, rank_points, last_rank),
    )
    conn.commit()
    return cursor.lastrowid  # type: ignore[return-value]
