from dataclasses import dataclass


@dataclass(frozen=True)
class RosterError:
    message: str


@dataclass(frozen=True)
class ValidationError(RosterError):
    field: str | None = None


@dataclass(frozen=True)
class PlayerNotFound(RosterError):
    username: str = ""
