from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from statkit.distributions.support import ContinuousSupport, IntegerSupport, SimplexSupport
from statkit.errors import InvalidParameterError
from statkit.types import ContinuousSupportShape1D


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_continuous_support_doesnt_contain_inf(self, infinity):
        # infinities are limits, not points of the real line
        support = ContinuousSupport()
        assert infinity not in support
        assert support.contains(infinity) is False

    @pytest.mark.parametrize(
        "points,expected_result",
        [
            (np.array([-1.0, 0.0, 0.5, 1.0]), [False, True, True, False]),
            (np.array([]), []),
        ],
    )
    def test_continuous_support_contains_array(self, points, expected_result):
        result = self.support_example.contains(points)
        assert isinstance(result, np.ndarray)
        assert result.tolist() == expected_result

    @pytest.mark.parametrize(
        "support, expected_shape",
        [
            (ContinuousSupport(1, 0), ContinuousSupportShape1D.EMPTY),
            (ContinuousSupport(0, 1), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(left=0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(right=0), ContinuousSupportShape1D.RAY_LEFT),
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
            (ContinuousSupport(1, 1), ContinuousSupportShape1D.SINGLE_POINT),
        ],
        ids=["empty", "bounded", "ray_right", "ray_left", "real_line", "single_point"],
    )
    def test_continuous_support_shape_variants(self, support, expected_shape):
        assert support.shape == expected_shape

    def test_inf_bound_is_not_closed(self):
        assert ContinuousSupport().left_closed is False
        assert ContinuousSupport().right_closed is False

    def test_clip(self):
        assert self.support_example.clip(-3.0) == 0.0
        assert self.support_example.clip(0.25) == 0.25
        assert self.support_example.clip(7.0) == 1.0


class TestIntegerSupport:
    bounded = IntegerSupport(1, 5)
    unbounded = IntegerSupport(0)

    @pytest.mark.parametrize(
        "point, expected_result",
        [(1, True), (5, True), (3.0, True), (2.5, False), (0, False), (6, False), (inf, False)],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.bounded) is expected_result
        assert self.bounded.contains(point) is expected_result

    def test_contains_array(self):
        result = self.unbounded.contains(np.array([-1, 0, 0.5, 10**6]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, False, True]

    def test_bounds_and_size(self):
        assert self.bounded.first() == 1
        assert self.bounded.last() == 5
        assert self.bounded.size == 5.0
        assert self.bounded.is_bounded
        assert self.unbounded.last() is None
        assert self.unbounded.size == inf
        assert not self.unbounded.is_bounded

    def test_reversed_bounds_raise(self):
        with pytest.raises(InvalidParameterError):
            IntegerSupport(3, 2)

    @pytest.mark.parametrize(
        "x, expected_prev", [(0, None), (1, None), (1.5, 1), (2, 1), (4.9, 4), (9, 5)]
    )
    def test_prev(self, x, expected_prev):
        assert self.bounded.prev(x) == expected_prev

    @pytest.mark.parametrize(
        "x, expected_points", [(0, []), (1, [1]), (2.7, [1, 2]), (10, [1, 2, 3, 4, 5])]
    )
    def test_iter_leq(self, x, expected_points):
        assert list(self.bounded.iter_leq(x)) == expected_points

    def test_next_and_iteration(self):
        assert self.bounded.next(4) == 5
        assert self.bounded.next(5) is None
        assert list(self.bounded) == [1, 2, 3, 4, 5]

        points = self.unbounded.iter_points()
        assert [next(points) for _ in range(3)] == [0, 1, 2]


class TestSimplexSupport:
    def test_open_probability_simplex(self):
        support = SimplexSupport(3)

        assert [0.2, 0.3, 0.5] in support
        assert not support.contains([0.0, 0.5, 0.5])
        assert not support.contains([0.2, 0.3, 0.6])
        assert not support.contains([0.5, 0.5])
        assert not support.contains([0.2, np.nan, 0.8])

    def test_count_vectors(self):
        support = SimplexSupport(3, total=4, integer=True)

        assert support.contains([0, 1, 3])
        assert support.contains(np.array([4.0, 0.0, 0.0]))
        assert not support.contains([1, 1, 1])
        assert not support.contains([1.5, 1.5, 1])
        assert not support.contains([-1, 2, 3])
