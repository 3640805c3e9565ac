import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

UNRANKED = "Unranked"


@dataclass(frozen=True)
class Tier:
    name: str
    lower_bound: int
    upper_bound: int | None = None  # None means no ceiling

    def contains(self, points: int) -> bool:
        if points < self.lower_bound:
            return False
        return self.upper_bound is None or points <= self.upper_bound


class TierTable:
    """Ordered, inclusive point ranges mapped to tier names (lowest first).

    Inverted, overlapping or out-of-order ranges are rejected. Gaps between
    ranges are allowed and resolve to ``UNRANKED``.
    """

    def __init__(self, tiers: Sequence[Tier], *, version: str = "1") -> None:
        if not tiers:
            raise ValueError("Tier table must contain at least one tier")
        for tier in tiers:
            if tier.upper_bound is not None and tier.upper_bound < tier.lower_bound:
                raise ValueError(
                    f"Tier {tier.name!r} ends at {tier.upper_bound}, below its start at {tier.lower_bound}"
                )
        for lower, upper in zip(tiers, tiers[1:]):
            if lower.upper_bound is None:
                raise ValueError(f"Tier {lower.name!r} is unbounded but is not the highest tier")
            if upper.lower_bound <= lower.upper_bound:
                raise ValueError(
                    f"Tier {upper.name!r} starts at {upper.lower_bound}, "
                    f"overlapping {lower.name!r} which ends at {lower.upper_bound}"
                )
        names = [t.name for t in tiers]
        if len(names) != len(set(names)):
            raise ValueError("Tier names must be unique")
        self._tiers = tuple(tiers)
        self._index = {t.name: i for i, t in enumerate(self._tiers)}
        self.version = version

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return self._tiers

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(t.name for t in self._tiers)

    @property
    def is_contiguous(self) -> bool:
        return all(
            lower.upper_bound is not None and upper.lower_bound == lower.upper_bound + 1
            for lower, upper in zip(self._tiers, self._tiers[1:])
        )

    def tier_for(self, points: int) -> str:
        lowest, highest = self._tiers[0], self._tiers[-1]
        if points < lowest.lower_bound:
            return lowest.name
        if highest.upper_bound is not None and points > highest.upper_bound:
            return highest.name
        for tier in self._tiers:
            if tier.contains(points):
                return tier.name
        logger.warning("No tier covers %d points in tier table v%s", points, self.version)
        return UNRANKED

    def rank_index(self, name: str) -> int | None:
        """Zero-based position of ``name`` in tier order, or None if unknown."""
        return self._index.get(name)

    def compare(self, a: str, b: str) -> int:
        """Negative if ``a`` ranks below ``b``, zero if equal, positive if above.

        Unknown names (including ``UNRANKED``) rank below every real tier.
        """
        ia = self._index.get(a, -1)
        ib = self._index.get(b, -1)
        return (ia > ib) - (ia < ib)


# Contiguous boundaries: each tier starts one point above the previous ceiling,
# and the top tier has no ceiling.
DEFAULT_TIER_TABLE = TierTable(
    [
        Tier("Rookie", 0, 100),
        Tier("Bronze III", 101, 150),
        Tier("Bronze II", 151, 200),
        Tier("Bronze I", 201, 250),
        Tier("Silver III", 251, 300),
        Tier("Silver II", 301, 350),
        Tier("Silver I", 351, 400),
        Tier("Gold III", 401, 450),
        Tier("Gold II", 451, 500),
        Tier("Gold I", 501),
    ],
    version="2",
)


def tier_for(points: int) -> str:
    return DEFAULT_TIER_TABLE.tier_for(points)
