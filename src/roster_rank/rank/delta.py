from roster_rank.domain.game import Stat

REWARD_MULTIPLIER = 2
PENALTY_MULTIPLIER = 1
STAT_CEILING = 50
STAT_FLOOR = -20


def contribution(stat: Stat, recorded: int, benchmark: int) -> int:
    """Clamped point contribution of one stat against its tier benchmark.

    Overperformance earns 2x the difference up to +50; underperformance costs
    1x the difference down to -20.
    """
    diff = recorded - benchmark
    if diff > 0:
        return min(diff * REWARD_MULTIPLIER, STAT_CEILING)
    if diff < 0:
        return max(diff * PENALTY_MULTIPLIER, STAT_FLOOR)
    return 0
