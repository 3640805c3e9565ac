class RosterException(Exception):
    """Base class for errors raised (rather than returned) by roster_rank."""
