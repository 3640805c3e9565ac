from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from roster_rank.db.connection import transaction
from roster_rank.domain.errors import PlayerNotFound
from roster_rank.domain.player import Player, Role
from roster_rank.domain.result import Err, Ok, rejected
from roster_rank.domain.session import CoachingSession

if TYPE_CHECKING:
    import sqlite3
    from datetime import datetime

    from roster_rank.domain.result import RosterResult
    from roster_rank.repos.protocols import PlayerRepo, SessionRepo

logger = logging.getLogger(__name__)

ALREADY_BOOKED_MESSAGE = "You already have a session booked."


class SlotStatus(Enum):
    OPEN = "Open"
    BOOKED = "Booked"
    BOOKED_BY_YOU = "Booked by you"


@dataclass(frozen=True)
class SessionSlot:
    session: CoachingSession
    status: SlotStatus
    booked_by: str | None = None  # only filled in for employees


class CoachingService:
    """Coaching sessions: employees schedule them, players book one at a time."""

    def __init__(self, conn: sqlite3.Connection, player_repo: PlayerRepo, session_repo: SessionRepo) -> None:
        self._conn = conn
        self._player_repo = player_repo
        self._session_repo = session_repo

    def add_session(
        self, employee: str, title: str, coach_name: str, scheduled_at: datetime
    ) -> RosterResult[CoachingSession]:
        title, coach_name = title.strip(), coach_name.strip()
        if not title or not coach_name:
            return rejected("A session needs a title and a coach.")
        with transaction(self._conn):
            account = self._account(employee, Role.EMPLOYEE)
            if isinstance(account, Err):
                return account
            session = CoachingSession(title=title, coach_name=coach_name, scheduled_at=scheduled_at)
            session_id = self._session_repo.insert(session)
        logger.info("%s scheduled session %d: %s with %s", employee, session_id, title, coach_name)
        return Ok(replace(session, id=session_id))

    def delete_session(self, employee: str, session_id: int) -> RosterResult[CoachingSession]:
        with transaction(self._conn):
            account = self._account(employee, Role.EMPLOYEE)
            if isinstance(account, Err):
                return account
            session = self._session_repo.get_by_id(session_id)
            if session is None:
                return rejected(f"No coaching session #{session_id}")
            self._session_repo.delete(session_id)
        logger.info("%s deleted session %d", employee, session_id)
        return Ok(session)

    def schedule(self, viewer: str | None = None) -> RosterResult[list[SessionSlot]]:
        """Every session in date order, with its status as seen by ``viewer``."""
        account: Player | None = None
        if viewer is not None:
            account = self._player_repo.get_by_username(viewer)
            if account is None:
                return Err(PlayerNotFound(f"No player named {viewer!r}", username=viewer))
        return Ok([self._slot(session, account) for session in self._session_repo.list_all()])

    def book(self, username: str, session_id: int) -> RosterResult[CoachingSession]:
        with transaction(self._conn, immediate=True):
            account = self._account(username, Role.PLAYER)
            if isinstance(account, Err):
                return account
            player = account.value
            assert player.id is not None
            if self._session_repo.get_booked_by(player.id) is not None:
                return rejected(ALREADY_BOOKED_MESSAGE)
            session = self._session_repo.get_by_id(session_id)
            if session is None:
                return rejected(f"No coaching session #{session_id}")
            if not self._session_repo.book(session_id, player.id):
                return rejected("That session is already booked.")
        logger.info("%s booked session %d", username, session_id)
        return Ok(replace(session, player_id=player.id))

    def cancel(self, username: str) -> RosterResult[CoachingSession]:
        """Release the session ``username`` has booked."""
        with transaction(self._conn):
            account = self._account(username, Role.PLAYER)
            if isinstance(account, Err):
                return account
            player = account.value
            assert player.id is not None
            session = self._session_repo.get_booked_by(player.id)
            if session is None or session.id is None:
                return rejected("You have no session booked.")
            self._session_repo.release(session.id)
        logger.info("%s canceled session %d", username, session.id)
        return Ok(replace(session, player_id=None))

    def _account(self, username: str, role: Role) -> RosterResult[Player]:
        player = self._player_repo.get_by_username(username)
        if player is None or player.id is None:
            return Err(PlayerNotFound(f"No player named {username!r}", username=username))
        if player.role is not role:
            if role is Role.EMPLOYEE:
                return rejected("Only employees can manage coaching sessions.")
            return rejected("Only players can book coaching sessions.")
        return Ok(player)

    def _slot(self, session: CoachingSession, viewer: Player | None) -> SessionSlot:
        if session.player_id is None:
            return SessionSlot(session, SlotStatus.OPEN)
        if viewer is not None and session.player_id == viewer.id:
            return SessionSlot(session, SlotStatus.BOOKED_BY_YOU)
        if viewer is not None and viewer.role is Role.EMPLOYEE:
            booker = self._player_repo.get_by_id(session.player_id)
            return SessionSlot(session, SlotStatus.BOOKED, booked_by=booker.username if booker else None)
        return SessionSlot(session, SlotStatus.BOOKED)
