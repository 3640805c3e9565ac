from typing import Protocol, runtime_checkable

from roster_rank.domain.game import GameRecord
from roster_rank.domain.player import Player, Role
from roster_rank.domain.session import CoachingSession
from roster_rank.domain.transition import TransitionEvent


@runtime_checkable
class PlayerRepo(Protocol):
    def insert(self, player: Player) -> int: ...

    def get_by_id(self, player_id: int) -> Player | None: ...

    def get_by_username(self, username: str) -> Player | None: ...

    def list_by_role(self, role: Role) -> list[Player]: ...

    def update_rank_points(self, player_id: int, rank_points: int) -> None: ...

    def update_last_rank(self, player_id: int, last_rank: str | None) -> None: ...

    def update_membership(self, player_id: int, membership: str | None) -> None: ...

    def update_role(self, player_id: int, role: Role) -> None: ...


@runtime_checkable
class GameRepo(Protocol):
    def insert(self, game: GameRecord) -> int: ...

    def get_by_player(self, player_id: int) -> list[GameRecord]: ...


@runtime_checkable
class TransitionLog(Protocol):
    """Append-only sink for tier transitions."""

    def record(self, event: TransitionEvent) -> None: ...


@runtime_checkable
class TransitionHistory(TransitionLog, Protocol):
    def get_by_player(self, player_id: int) -> list[TransitionEvent]: ...


@runtime_checkable
class SessionRepo(Protocol):
    def insert(self, session: CoachingSession) -> int: ...

    def get_by_id(self, session_id: int) -> CoachingSession | None: ...

    def get_booked_by(self, player_id: int) -> CoachingSession | None: ...

    def list_all(self) -> list[CoachingSession]: ...

    def book(self, session_id: int, player_id: int) -> bool: ...

    def release(self, session_id: int) -> None: ...

    def delete(self, session_id: int) -> None: ...
