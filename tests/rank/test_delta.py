import pytest

from roster_rank.domain.game import Stat
from roster_rank.rank.delta import contribution


class TestContribution:
    def test_at_benchmark_is_zero(self) -> None:
        assert contribution(Stat.POINTS, 5, 5) == 0

    def test_overperformance_doubles(self) -> None:
        assert contribution(Stat.POINTS, 15, 5) == 20

    def test_overperformance_capped_at_fifty(self) -> None:
        assert contribution(Stat.POINTS, 40, 5) == 50
        assert contribution(Stat.POINTS, 30, 5) == 50

    def test_underperformance_single_rate(self) -> None:
        assert contribution(Stat.REBOUNDS, 1, 4) == -3

    def test_underperformance_floored_at_minus_twenty(self) -> None:
        assert contribution(Stat.POINTS, 0, 25) == -20
        assert contribution(Stat.POINTS, 0, 20) == -20

    @pytest.mark.parametrize("benchmark", [0, 1, 5, 13, 60])
    def test_bounded_and_monotonic(self, benchmark: int) -> None:
        previous = None
        for value in range(0, 120):
            result = contribution(Stat.STEALS, value, benchmark)
            assert -20 <= result <= 50
            if previous is not None:
                assert result >= previous
            previous = result
