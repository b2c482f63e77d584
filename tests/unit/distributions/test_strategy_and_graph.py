from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from statkit.distributions import fitters
from statkit.distributions.computation import AnalyticalComputation
from statkit.distributions.registry import distribution_type_register
from statkit.distributions.support import ContinuousSupport
from statkit.errors import InvalidArgumentError
from statkit.types import CharacteristicName, Kind
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class TestComputationStrategy(DistributionTestBase):
    def test_uniform_ppf_only(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        cdf = distr.computation_strategy.query_method(self.CDF, distr)
        pdf = distr.computation_strategy.query_method(self.PDF, distr)
        ppf = distr.computation_strategy.query_method(self.PPF, distr)

        assert ppf(0.3) == pytest.approx(0.3, rel=1e-12, abs=1e-12)

        for x, expected in [(-0.5, 0.0), (0.2, 0.2), (0.9, 0.9), (1.5, 1.0)]:
            assert cdf(x) == pytest.approx(expected, rel=5e-3, abs=5e-4)

        for x, expected in [(0.25, 1.0), (0.75, 1.0), (-0.1, 0.0), (1.1, 0.0)]:
            assert pdf(x) == pytest.approx(expected, rel=5e-3, abs=5e-3)

    def test_uniform_pdf_only(self) -> None:
        distr = self.make_uniform_pdf_distribution()

        cdf = distr.computation_strategy.query_method(self.CDF, distr)
        ppf = distr.computation_strategy.query_method(self.PPF, distr)

        assert cdf(0.3) == pytest.approx(0.3, rel=5e-3, abs=5e-4)
        assert cdf(0.8) == pytest.approx(0.8, rel=5e-3, abs=5e-4)
        assert cdf(-2.0) == pytest.approx(0.0, abs=1e-6)
        assert cdf(3.0) == pytest.approx(1.0, abs=1e-6)

        for q in (0.1, 0.5, 0.9):
            assert ppf(q) == pytest.approx(q, rel=5e-3, abs=5e-4)

    @pytest.mark.parametrize("mu, sigma", [(1.5, 0.7)])
    def test_normal_with_pdf_only(self, mu: float, sigma: float) -> None:
        distr = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[float, float](
                    target=self.PDF, func=self.make_normal_pdf_function(mu, sigma)
                ),
            ],
            support=ContinuousSupport(),
        )

        pdf = distr.computation_strategy.query_method(self.PDF, distr)
        cdf = distr.computation_strategy.query_method(self.CDF, distr)
        ppf = distr.computation_strategy.query_method(self.PPF, distr)

        expected_pdf_mu = 1.0 / (sigma * math.sqrt(2.0 * math.pi))
        assert pdf(mu) == pytest.approx(expected_pdf_mu, rel=5e-3, abs=5e-4)

        def cdf_closed(x: float) -> float:
            return 0.5 * (1.0 + math.erf((x - mu) / (sigma * math.sqrt(2.0))))

        assert cdf(mu) == pytest.approx(0.5, abs=2e-3)

        x1 = mu + sigma
        assert cdf(x1) == pytest.approx(cdf_closed(x1), rel=5e-3, abs=5e-4)

        assert ppf(0.5) == pytest.approx(mu, rel=5e-3, abs=5e-3)

        q1 = cdf_closed(mu + sigma)
        assert ppf(q1) == pytest.approx(mu + sigma, rel=7e-3, abs=7e-3)

    def test_logistic_cdf_round_trip(self) -> None:
        distr = self.make_logistic_cdf_distribution()

        ppf = distr.query_method(self.PPF)
        cdf = distr.query_method(self.CDF)
        for q in (1e-6, 0.1, 0.5, 0.9, 1.0 - 1e-6):
            assert cdf(ppf(q)) == pytest.approx(q, abs=1e-9)

    def test_derived_indefinitive_characteristics(self) -> None:
        distr = self.make_logistic_cdf_distribution()

        sf = distr.query_method(CharacteristicName.SF)
        median = distr.query_method(CharacteristicName.MEDIAN)
        ln_pdf = distr.query_method(CharacteristicName.LN_PDF)

        assert sf(1.0) == pytest.approx(1.0 / (1.0 + math.e), rel=1e-12)
        assert median(None) == pytest.approx(0.0, abs=1e-9)
        assert ln_pdf(0.0) == pytest.approx(math.log(0.25), rel=1e-6)

    def test_fitted_ppf_rejects_probabilities_outside_unit_interval(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        ppf = distr.query_method(self.PPF)

        with pytest.raises(InvalidArgumentError):
            ppf(1.5)
        assert math.isnan(ppf(math.nan))

    def test_fitted_ppf_maps_extremes_to_support_bounds(self) -> None:
        distr = self.make_uniform_pdf_distribution()
        ppf = distr.query_method(self.PPF)

        assert ppf(0.0) == 0.0
        assert ppf(1.0) == 1.0

    def test_options_reach_the_fitter(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        coarse = distr.query_method(self.PPF, x_tol=1e-2)
        fine = distr.query_method(self.PPF)

        assert coarse(0.7) == pytest.approx(fine(0.7), abs=0.05)
        assert coarse(0.7) != pytest.approx(fine(0.7), abs=1e-9)

    def test_concurrent_resolution_of_one_distribution(self, monkeypatch) -> None:
        distribution_type_register()
        distr = self.make_logistic_cdf_distribution()
        barrier = threading.Barrier(2, timeout=5.0)
        resolve = fitters._resolve

        def _resolve_together(distribution, name):
            # Both threads are inside the ppf fit at the same time.
            barrier.wait()
            return resolve(distribution, name)

        monkeypatch.setattr(fitters, "_resolve", _resolve_together)

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [pool.submit(lambda: distr.query_method(self.PPF)(0.5)) for _ in range(2)]
            results = [future.result() for future in futures]

        assert results == pytest.approx([0.0, 0.0], abs=1e-12)


class TestDiscreteFitters(DistributionTestBase):
    def test_pmf_only_distribution(self) -> None:
        distr = self.make_discrete_point_pmf_distribution()

        cdf = distr.query_method(self.CDF)
        ppf = distr.query_method(self.PPF)
        sf = distr.query_method(CharacteristicName.SF)

        for x, expected in [(-1.0, 0.0), (0.0, 0.2), (0.5, 0.2), (1.0, 0.7), (2.0, 1.0)]:
            assert cdf(x) == pytest.approx(expected, abs=1e-12)

        for q, expected in [(0.0, 0.0), (0.1, 0.0), (0.2, 0.0), (0.21, 1.0), (0.69, 1.0)]:
            assert ppf(q) == expected
        assert ppf(0.95) == 2.0
        assert ppf(1.0) == 2.0

        assert sf(1.0) == pytest.approx(0.3, abs=1e-12)

    def test_pmf_recovered_from_cdf(self) -> None:
        distr = self.make_discrete_point_pmf_distribution()
        cdf = distr.query_method(self.CDF)

        cdf_only = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.DISCRETE,
            analytical_computations=[AnalyticalComputation(target=self.CDF, func=cdf)],
            support=distr.support,
        )
        pmf = cdf_only.query_method(self.PMF)

        assert pmf(0.0) == pytest.approx(0.2, abs=1e-12)
        assert pmf(1.0) == pytest.approx(0.5, abs=1e-12)
        assert pmf(2.0) == pytest.approx(0.3, abs=1e-12)
        assert pmf(1.5) == 0.0
        assert pmf(3.0) == 0.0

    def test_cdf_recovered_from_ppf(self) -> None:
        distr = self.make_discrete_point_pmf_distribution()
        ppf = distr.query_method(self.PPF)

        ppf_only = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.DISCRETE,
            analytical_computations=[AnalyticalComputation(target=self.PPF, func=ppf)],
            support=distr.support,
        )
        cdf = ppf_only.query_method(self.CDF)

        assert cdf(-0.5) == 0.0
        assert cdf(0.0) == pytest.approx(0.2, abs=1e-9)
        assert cdf(1.0) == pytest.approx(0.7, abs=1e-9)
        assert cdf(2.0) == pytest.approx(1.0, abs=1e-9)

    def test_discrete_fitters_require_integer_support(self) -> None:
        distr = self.make_discrete_point_pmf_distribution(is_with_support=False)

        with pytest.raises(LookupError, match="integer support"):
            distr.query_method(self.CDF)
