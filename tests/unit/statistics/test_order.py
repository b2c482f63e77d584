from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import rankdata

from statkit import statistics
from statkit.errors import InsufficientDataError, InvalidArgumentError
from statkit.statistics import RankTieBreaker


class TestOrderStatistics:
    data = [5.0, 1.0, 4.0, 2.0, 3.0]

    @pytest.mark.parametrize("k, expected", [(1, 1.0), (3, 3.0), (5, 5.0)])
    def test_order_statistic(self, k: int, expected: float) -> None:
        assert statistics.order_statistic(self.data, k) == expected

    @pytest.mark.parametrize("k", [0, 6, -1])
    def test_order_statistic_out_of_range(self, k: int) -> None:
        with pytest.raises(InvalidArgumentError):
            statistics.order_statistic(self.data, k)

    def test_median_and_quartiles(self) -> None:
        assert statistics.median(self.data) == 3.0
        assert statistics.median([4.0, 1.0, 3.0, 2.0]) == 2.5
        assert statistics.lower_quartile(self.data) == 2.0
        assert statistics.upper_quartile(self.data) == 4.0
        assert statistics.interquartile_range(self.data) == 2.0

    @pytest.mark.parametrize("tau", [0.0, 0.1, 0.33, 0.5, 0.9, 1.0])
    def test_quantile_matches_numpy(self, tau: float) -> None:
        data = [0.3, -1.2, 8.0, 2.5, 2.5, 4.1, 0.0]
        assert statistics.quantile(data, tau) == pytest.approx(np.quantile(data, tau))

    def test_percentile(self) -> None:
        assert statistics.percentile(self.data, 50.0) == statistics.median(self.data)
        assert statistics.percentile(self.data, 100.0) == 5.0

    def test_invalid_levels(self) -> None:
        with pytest.raises(InvalidArgumentError):
            statistics.quantile(self.data, 1.5)
        with pytest.raises(InvalidArgumentError):
            statistics.percentile(self.data, -1.0)

    def test_empty_sample(self) -> None:
        with pytest.raises(InsufficientDataError):
            statistics.median([])
        with pytest.raises(InsufficientDataError):
            statistics.order_statistic([], 1)


class TestRanks:
    data = [10.0, 20.0, 10.0, 30.0, 20.0, 10.0]

    @pytest.mark.parametrize(
        "tie_breaker, expected",
        [
            (RankTieBreaker.AVERAGE, [2.0, 4.5, 2.0, 6.0, 4.5, 2.0]),
            (RankTieBreaker.MIN, [1.0, 4.0, 1.0, 6.0, 4.0, 1.0]),
            (RankTieBreaker.MAX, [3.0, 5.0, 3.0, 6.0, 5.0, 3.0]),
            (RankTieBreaker.FIRST, [1.0, 4.0, 2.0, 6.0, 5.0, 3.0]),
        ],
    )
    def test_tie_breakers(self, tie_breaker: RankTieBreaker, expected: list[float]) -> None:
        result = statistics.ranks(self.data, tie_breaker)
        assert result.tolist() == expected

    @pytest.mark.parametrize("tie_breaker", list(RankTieBreaker))
    def test_matches_scipy(self, tie_breaker: RankTieBreaker) -> None:
        data = np.random.default_rng(3).integers(0, 5, size=40).astype(float)
        np.testing.assert_array_equal(
            statistics.ranks(data, tie_breaker), rankdata(data, method=tie_breaker.value)
        )

    def test_default_is_average(self) -> None:
        assert statistics.ranks([1.0, 1.0]).tolist() == [1.5, 1.5]

    def test_empty_sample(self) -> None:
        assert statistics.ranks([]).size == 0
