from roster_rank.domain.player import Player
from roster_rank.exceptions import RosterException


class DuplicateUsernameError(RosterException):
    def __init__(self, player: Player) -> None:
        self.player = player
        super().__init__(f"Username already taken: {player.username!r}")
