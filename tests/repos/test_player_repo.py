import sqlite3

import pytest

from roster_rank.domain.player import Player, Role
from roster_rank.repos.errors import DuplicateUsernameError
from roster_rank.repos.player_repo import SqlitePlayerRepo


class TestSqlitePlayerRepo:
    def test_insert_and_get_by_id(self, conn: sqlite3.Connection) -> None:
        repo = SqlitePlayerRepo(conn)
        player_id = repo.insert(Player(username="ann", membership="Gold"))
        player = repo.get_by_id(player_id)
        assert player is not None
        assert player.username == "ann"
        assert player.role is Role.PLAYER
        assert player.rank_points == 0
        assert player.membership == "Gold"
        assert player.last_rank is None

    def test_get_by_username(self, conn: sqlite3.Connection) -> None:
        repo = SqlitePlayerRepo(conn)
        repo.insert(Player(username="ann"))
        assert repo.get_by_username("ann") is not None
        assert repo.get_by_username("bob") is None

    def test_duplicate_username(self, conn: sqlite3.Connection) -> None:
        repo = SqlitePlayerRepo(conn)
        repo.insert(Player(username="ann"))
        with pytest.raises(DuplicateUsernameError, match="ann"):
            repo.insert(Player(username="ann", role=Role.EMPLOYEE))

    def test_list_by_role(self, conn: sqlite3.Connection) -> None:
        repo = SqlitePlayerRepo(conn)
        repo.insert(Player(username="zed"))
        repo.insert(Player(username="amy"))
        repo.insert(Player(username="coach", role=Role.EMPLOYEE))
        assert [p.username for p in repo.list_by_role(Role.PLAYER)] == ["amy", "zed"]
        assert [p.username for p in repo.list_by_role(Role.EMPLOYEE)] == ["coach"]

    def test_update_rank_points_and_last_rank(self, conn: sqlite3.Connection) -> None:
        repo = SqlitePlayerRepo(conn)
        player_id = repo.insert(Player(username="ann"))
        repo.update_rank_points(player_id, 120)
        repo.update_last_rank(player_id, "Bronze III")
        player = repo.get_by_id(player_id)
        assert player is not None
        assert player.rank_points == 120
        assert player.last_rank == "Bronze III"

    def test_update_membership_and_role(self, conn: sqlite3.Connection) -> None:
        repo = SqlitePlayerRepo(conn)
        player_id = repo.insert(Player(username="ann", membership="Gold"))
        repo.update_membership(player_id, "Competitive")
        repo.update_role(player_id, Role.EMPLOYEE)
        player = repo.get_by_id(player_id)
        assert player is not None
        assert player.membership == "Competitive"
        assert player.role is Role.EMPLOYEE

    def test_get_by_id_missing(self, conn: sqlite3.Connection) -> None:
        assert SqlitePlayerRepo(conn).get_by_id(999) is None
