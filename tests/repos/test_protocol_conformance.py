from roster_rank.repos.game_repo import SqliteGameRepo
from roster_rank.repos.player_repo import SqlitePlayerRepo
from roster_rank.repos.protocols import GameRepo, PlayerRepo, SessionRepo, TransitionHistory, TransitionLog
from roster_rank.repos.session_repo import SqliteSessionRepo
from roster_rank.repos.transition_log import SqliteTransitionLog
from tests.fakes.repos import FakeGameRepo, FakePlayerRepo, FakeSessionRepo, InMemoryTransitionLog


class TestProtocolConformance:
    def test_player_repo_conforms(self) -> None:
        assert issubclass(SqlitePlayerRepo, PlayerRepo)
        assert issubclass(FakePlayerRepo, PlayerRepo)

    def test_game_repo_conforms(self) -> None:
        assert issubclass(SqliteGameRepo, GameRepo)
        assert issubclass(FakeGameRepo, GameRepo)

    def test_transition_log_conforms(self) -> None:
        assert issubclass(SqliteTransitionLog, TransitionLog)
        assert issubclass(SqliteTransitionLog, TransitionHistory)
        assert issubclass(InMemoryTransitionLog, TransitionHistory)

    def test_session_repo_conforms(self) -> None:
        assert issubclass(SqliteSessionRepo, SessionRepo)
        assert issubclass(FakeSessionRepo, SessionRepo)
