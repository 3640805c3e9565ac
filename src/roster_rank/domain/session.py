from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CoachingSession:
    title: str
    coach_name: str
    scheduled_at: datetime
    player_id: int | None = None  # the booking player, None while open
    id: int | None = None

    @property
    def is_booked(self) -> bool:
        return self.player_id is not None
