from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class Direction(Enum):
    PROMOTED = "promoted"
    DEMOTED = "demoted"


@dataclass(frozen=True)
class TransitionEvent:
    id: UUID
    occurred_at: datetime
    new_tier: str
    player_id: int
    direction: Direction
