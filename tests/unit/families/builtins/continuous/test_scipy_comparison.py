"""
Cross-checks of every continuous family against scipy.stats.

Each case pairs a distribution of the family with the frozen scipy
distribution describing the same law. Points are taken from scipy quantiles
so that they cover both tails of the support.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import stats

from statkit.errors import UndefinedQuantityError
from statkit.families.configuration import configure_families_register
from statkit.types import FamilyName

PROBABILITIES = (0.01, 0.05, 0.3, 0.5, 0.8, 0.97, 0.995)

CASES = [
    pytest.param(FamilyName.NORMAL, {"mu": 1.0, "sigma": 2.0}, stats.norm(1.0, 2.0), id="normal"),
    pytest.param(
        FamilyName.LOG_NORMAL,
        {"mu": 0.3, "sigma": 0.6},
        stats.lognorm(0.6, scale=math.exp(0.3)),
        id="log_normal",
    ),
    pytest.param(
        FamilyName.CONTINUOUS_UNIFORM,
        {"lower_bound": -1.0, "upper_bound": 3.0},
        stats.uniform(-1.0, 4.0),
        id="uniform",
    ),
    pytest.param(
        FamilyName.EXPONENTIAL, {"lambda_": 1.5}, stats.expon(scale=1 / 1.5), id="exponential"
    ),
    pytest.param(
        FamilyName.GAMMA, {"shape": 2.5, "rate": 2.0}, stats.gamma(2.5, scale=0.5), id="gamma"
    ),
    pytest.param(
        FamilyName.ERLANG, {"shape": 3, "rate": 0.5}, stats.gamma(3, scale=2.0), id="erlang"
    ),
    pytest.param(FamilyName.CHI_SQUARED, {"freedom": 4.5}, stats.chi2(4.5), id="chi_squared"),
    pytest.param(FamilyName.CHI, {"freedom": 3.0}, stats.chi(3.0), id="chi"),
    pytest.param(FamilyName.BETA, {"alpha": 2.0, "beta": 3.5}, stats.beta(2.0, 3.5), id="beta"),
    pytest.param(
        FamilyName.STUDENTS_T,
        {"location": 1.0, "scale": 2.0, "freedom": 7.0},
        stats.t(7.0, 1.0, 2.0),
        id="students_t",
    ),
    pytest.param(
        FamilyName.CAUCHY,
        {"location": -1.0, "scale": 0.5},
        stats.cauchy(-1.0, 0.5),
        id="cauchy",
    ),
    pytest.param(
        FamilyName.LAPLACE,
        {"location": 0.5, "scale": 1.5},
        stats.laplace(0.5, 1.5),
        id="laplace",
    ),
    pytest.param(
        FamilyName.WEIBULL,
        {"shape": 1.7, "scale": 2.0},
        stats.weibull_min(1.7, scale=2.0),
        id="weibull",
    ),
    pytest.param(
        FamilyName.PARETO, {"scale": 1.5, "shape": 5.0}, stats.pareto(5.0, scale=1.5), id="pareto"
    ),
    pytest.param(
        FamilyName.TRIANGULAR,
        {"minimum": 0.0, "maximum": 4.0, "mode": 1.0},
        stats.triang(0.25, 0.0, 4.0),
        id="triangular",
    ),
    pytest.param(
        FamilyName.INVERSE_GAMMA,
        {"shape": 5.5, "scale": 2.0},
        stats.invgamma(5.5, scale=2.0),
        id="inverse_gamma",
    ),
    pytest.param(
        FamilyName.FISHER_SNEDECOR,
        {"freedom_1": 5.0, "freedom_2": 12.0},
        stats.f(5.0, 12.0),
        id="fisher_snedecor",
    ),
    pytest.param(
        FamilyName.GUMBEL, {"location": 1.0, "scale": 2.0}, stats.gumbel_r(1.0, 2.0), id="gumbel"
    ),
]

# laws without finite moments
NO_MOMENTS = {FamilyName.CAUCHY}

EXPECTED_MODES = {
    FamilyName.NORMAL: 1.0,
    FamilyName.LOG_NORMAL: math.exp(0.3 - 0.36),
    FamilyName.CONTINUOUS_UNIFORM: 1.0,
    FamilyName.EXPONENTIAL: 0.0,
    FamilyName.GAMMA: 0.75,
    FamilyName.ERLANG: 4.0,
    FamilyName.CHI_SQUARED: 2.5,
    FamilyName.CHI: math.sqrt(2.0),
    FamilyName.BETA: 1.0 / 3.5,
    FamilyName.STUDENTS_T: 1.0,
    FamilyName.CAUCHY: -1.0,
    FamilyName.LAPLACE: 0.5,
    FamilyName.WEIBULL: 2.0 * (0.7 / 1.7) ** (1.0 / 1.7),
    FamilyName.PARETO: 1.5,
    FamilyName.TRIANGULAR: 1.0,
    FamilyName.INVERSE_GAMMA: 2.0 / 6.5,
    FamilyName.FISHER_SNEDECOR: 3.0 / 5.0 * 12.0 / 14.0,
    FamilyName.GUMBEL: 1.0,
}


class TestAgainstScipy:
    def setup_method(self):
        self.registry = configure_families_register()

    def make(self, family_name, params):
        return self.registry.get(family_name)(**params)

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_density(self, family_name, params, reference):
        dist = self.make(family_name, params)

        for q in PROBABILITIES:
            x = float(reference.ppf(q))
            assert dist.pdf(x) == pytest.approx(float(reference.pdf(x)), rel=1e-9, abs=1e-300)
            assert dist.ln_pdf(x) == pytest.approx(
                float(reference.logpdf(x)), rel=1e-9, abs=1e-12
            )

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_distribution_function(self, family_name, params, reference):
        dist = self.make(family_name, params)

        for q in PROBABILITIES:
            x = float(reference.ppf(q))
            assert dist.cdf(x) == pytest.approx(float(reference.cdf(x)), rel=1e-9)
            assert dist.sf(x) == pytest.approx(float(reference.sf(x)), rel=1e-9)

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_quantile(self, family_name, params, reference):
        dist = self.make(family_name, params)

        for q in PROBABILITIES:
            assert dist.inverse_cdf(q) == pytest.approx(
                float(reference.ppf(q)), rel=1e-8, abs=1e-12
            )
        assert dist.median() == pytest.approx(float(reference.median()), rel=1e-8, abs=1e-12)

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_moments(self, family_name, params, reference):
        dist = self.make(family_name, params)
        if family_name in NO_MOMENTS:
            for quantity in ("mean", "variance", "skewness", "kurtosis"):
                with pytest.raises(UndefinedQuantityError):
                    getattr(dist, quantity)()
            return

        mean, var, skew, kurt = (float(v) for v in reference.stats(moments="mvsk"))
        assert dist.mean() == pytest.approx(mean, rel=1e-10, abs=1e-12)
        assert dist.variance() == pytest.approx(var, rel=1e-10)
        assert dist.std_dev() == pytest.approx(math.sqrt(var), rel=1e-10)
        assert dist.skewness() == pytest.approx(skew, rel=1e-8, abs=1e-12)
        assert dist.kurtosis() == pytest.approx(kurt, rel=1e-8, abs=1e-12)

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_entropy(self, family_name, params, reference):
        dist = self.make(family_name, params)

        assert dist.entropy() == pytest.approx(float(reference.entropy()), rel=1e-7, abs=1e-10)

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_mode(self, family_name, params, reference):
        dist = self.make(family_name, params)
        mode = dist.mode()

        assert mode == pytest.approx(EXPECTED_MODES[family_name], rel=1e-12, abs=1e-15)
        if family_name not in (FamilyName.EXPONENTIAL, FamilyName.CONTINUOUS_UNIFORM):
            assert dist.pdf(mode) >= dist.pdf(mode + 1e-3)
            assert dist.pdf(mode) >= dist.pdf(mode - 1e-3)

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_nan_argument_gives_nan(self, family_name, params, reference):
        dist = self.make(family_name, params)

        for characteristic in (dist.pdf, dist.ln_pdf, dist.cdf, dist.sf, dist.inverse_cdf):
            assert math.isnan(characteristic(math.nan))

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_bounds(self, family_name, params, reference):
        dist = self.make(family_name, params)
        lower, upper = (float(v) for v in reference.support())

        assert dist.min() == lower
        assert dist.max() == upper

    @pytest.mark.parametrize("family_name, params, reference", CASES)
    def test_sample_mean(self, family_name, params, reference, rng):
        dist = self.make(family_name, params)
        n = 20_000
        draws = dist.sample(n, rng).array[:, 0]
        lower, upper = (float(v) for v in reference.support())

        assert ((draws >= lower) & (draws <= upper)).all()
        if family_name in NO_MOMENTS:
            assert float(stats.kstest(draws, reference.cdf).pvalue) > 1e-4
            return
        tolerance = 5.0 * math.sqrt(float(reference.var()) / n)
        assert float(draws.mean()) == pytest.approx(float(reference.mean()), abs=tolerance)
