from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Stat(Enum):
    POINTS = "points"
    REBOUNDS = "rebounds"
    ASSISTS = "assists"
    BLOCKS = "blocks"
    STEALS = "steals"


@dataclass(frozen=True)
class GameStats:
    points: int
    rebounds: int
    assists: int
    blocks: int
    steals: int

    def value(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def as_dict(self) -> dict[Stat, int]:
        return {stat: self.value(stat) for stat in Stat}


@dataclass(frozen=True)
class GameRecord:
    player_id: int
    stats: GameStats
    played_at: datetime
    id: int | None = None
