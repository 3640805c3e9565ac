import sqlite3
from datetime import UTC, datetime

from roster_rank.domain.errors import PlayerNotFound
from roster_rank.domain.game import GameRecord, GameStats
from roster_rank.domain.player import Membership, Role
from roster_rank.domain.result import Err, Ok
from roster_rank.repos.game_repo import SqliteGameRepo
from roster_rank.repos.player_repo import SqlitePlayerRepo
from roster_rank.services.roster import RosterService
from tests.helpers import seed_player


def _service(conn: sqlite3.Connection, recent_games: int = 5) -> RosterService:
    return RosterService(conn, SqlitePlayerRepo(conn), SqliteGameRepo(conn), recent_games=recent_games)


class TestAddPlayer:
    def test_adds_player(self, conn: sqlite3.Connection) -> None:
        service = _service(conn)
        result = service.add_player("ann", membership="Silver")
        assert isinstance(result, Ok)
        assert result.value.id is not None
        stored = SqlitePlayerRepo(conn).get_by_username("ann")
        assert stored is not None
        assert stored.membership == "Silver"
        assert stored.rank_points == 0

    def test_adds_employee(self, conn: sqlite3.Connection) -> None:
        service = _service(conn)
        result = service.add_player("coach", role=Role.EMPLOYEE)
        assert isinstance(result, Ok)
        assert result.value.role is Role.EMPLOYEE

    def test_duplicate_username(self, conn: sqlite3.Connection) -> None:
        service = _service(conn)
        service.add_player("ann")
        result = service.add_player("ann")
        assert isinstance(result, Err)
        assert "ann" in result.error.message

    def test_blank_username(self, conn: sqlite3.Connection) -> None:
        service = _service(conn)
        assert isinstance(service.add_player("  "), Err)


class TestCheckIn:
    def test_first_check_in_reports_current_rank(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann", rank_points=40)
        service = _service(conn)
        assert service.check_in("ann") == Ok("Current Rank: Rookie")
        stored = SqlitePlayerRepo(conn).get_by_username("ann")
        assert stored is not None
        assert stored.last_rank == "Rookie"

    def test_second_check_in_is_quiet(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann", rank_points=40)
        service = _service(conn)
        service.check_in("ann")
        assert service.check_in("ann") == Ok(None)

    def test_reports_promotion_since_last_seen(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann", rank_points=260, last_rank="Bronze I")
        service = _service(conn)
        assert service.check_in("ann") == Ok("Promoted to Silver III!")

    def test_unknown_player(self, conn: sqlite3.Connection) -> None:
        service = _service(conn)
        assert isinstance(service.check_in("ghost"), Err)


def _add_games(conn: sqlite3.Connection, player_id: int, count: int) -> None:
    repo = SqliteGameRepo(conn)
    for day in range(1, count + 1):
        stats = GameStats(points=day, rebounds=1, assists=1, blocks=0, steals=0)
        repo.insert(GameRecord(player_id=player_id, stats=stats, played_at=datetime(2025, 5, day, tzinfo=UTC)))
    conn.commit()


class TestOverview:
    def test_shows_account_and_tier(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann", rank_points=260, membership="Competitive")
        result = _service(conn).overview("ann")
        assert isinstance(result, Ok)
        overview = result.value
        assert overview.player.membership == "Competitive"
        assert overview.player.role is Role.PLAYER
        assert overview.tier == "Silver III"
        assert overview.recent_games == []

    def test_lists_last_five_games_newest_first(self, conn: sqlite3.Connection) -> None:
        player_id = seed_player(conn, username="ann")
        _add_games(conn, player_id, 7)
        result = _service(conn).overview("ann")
        assert isinstance(result, Ok)
        assert [g.stats.points for g in result.value.recent_games] == [7, 6, 5, 4, 3]

    def test_recent_game_count_configurable(self, conn: sqlite3.Connection) -> None:
        player_id = seed_player(conn, username="ann")
        _add_games(conn, player_id, 4)
        result = _service(conn, recent_games=2).overview("ann")
        assert isinstance(result, Ok)
        assert [g.stats.points for g in result.value.recent_games] == [4, 3]

    def test_unknown_player(self, conn: sqlite3.Connection) -> None:
        result = _service(conn).overview("ghost")
        assert result == Err(PlayerNotFound("No player named 'ghost'", username="ghost"))


class TestEditPlayer:
    def test_change_membership(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann", membership="Gold")
        result = _service(conn).edit_player("ann", membership=Membership.DEACTIVATED)
        assert isinstance(result, Ok)
        assert result.value.membership == "Deactivated"
        stored = SqlitePlayerRepo(conn).get_by_username("ann")
        assert stored is not None
        assert stored.membership == "Deactivated"
        assert stored.role is Role.PLAYER

    def test_change_role(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann", membership="Casual")
        result = _service(conn).edit_player("ann", role=Role.EMPLOYEE)
        assert isinstance(result, Ok)
        stored = SqlitePlayerRepo(conn).get_by_username("ann")
        assert stored is not None
        assert stored.role is Role.EMPLOYEE
        assert stored.membership == "Casual"

    def test_nothing_to_change(self, conn: sqlite3.Connection) -> None:
        seed_player(conn, username="ann")
        assert isinstance(_service(conn).edit_player("ann"), Err)

    def test_unknown_player(self, conn: sqlite3.Connection) -> None:
        result = _service(conn).edit_player("ghost", membership=Membership.CASUAL)
        assert isinstance(result, Err)
        assert isinstance(result.error, PlayerNotFound)
