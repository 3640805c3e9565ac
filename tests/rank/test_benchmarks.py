import pytest

from roster_rank.domain.game import Stat
from roster_rank.rank.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable, benchmarks_for
from roster_rank.rank.tier_table import DEFAULT_TIER_TABLE, UNRANKED


class TestDefaultBenchmarks:
    def test_every_tier_has_benchmarks(self) -> None:
        assert set(DEFAULT_BENCHMARKS.tiers) == set(DEFAULT_TIER_TABLE.names)

    def test_rookie_values(self) -> None:
        averages = benchmarks_for("Rookie")
        assert averages[Stat.POINTS] == 5
        assert averages[Stat.REBOUNDS] == 3
        assert averages[Stat.ASSISTS] == 2
        assert averages[Stat.BLOCKS] == 0
        assert averages[Stat.STEALS] == 1

    def test_gold_three_assists(self) -> None:
        assert benchmarks_for("Gold III")[Stat.ASSISTS] == 6

    def test_unknown_tier_returns_zeros(self) -> None:
        averages = benchmarks_for(UNRANKED)
        assert all(averages[stat] == 0 for stat in Stat)

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            benchmarks_for("Rookie")[Stat.POINTS] = 99  # type: ignore[index]


class TestBenchmarkTableConstruction:
    def test_rejects_missing_stats(self) -> None:
        with pytest.raises(ValueError, match="steals"):
            BenchmarkTable({"Rookie": {Stat.POINTS: 1, Stat.REBOUNDS: 1, Stat.ASSISTS: 1, Stat.BLOCKS: 1}})
