from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    PLAYER = "player"
    EMPLOYEE = "employee"


class Membership(Enum):
    """Plans an employee can assign when editing an account."""

    CASUAL = "Casual"
    COMPETITIVE = "Competitive"
    DEACTIVATED = "Deactivated"


@dataclass(frozen=True)
class Player:
    username: str
    role: Role = Role.PLAYER
    rank_points: int = 0
    membership: str | None = None  # free text on sign-up, a Membership value once edited
    last_rank: str | None = None  # last tier acknowledged on the dashboard
    id: int | None = None
