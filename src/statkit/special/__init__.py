"""
Special functions subpackage

Pure functions of floats underlying the distribution families:

- gamma family (:mod:`.gamma`): ``gamma``, ``ln_gamma``, ``digamma``,
  ``trigamma``, ``inv_digamma`` and the regularized incomplete gamma
  functions ``gamma_lr`` / ``gamma_ur``;
- beta family (:mod:`.beta`): ``beta``, ``ln_beta``, ``beta_reg``,
  ``beta_inc``, ``inv_beta_reg``;
- error function family (:mod:`.erf`): ``erf``, ``erfc``, ``erf_inv``,
  ``erfc_inv``;
- factorials and coefficients (:mod:`.factorial`), ``logistic`` / ``logit``,
  harmonic numbers.

Arguments outside a function's domain raise
:class:`~statkit.errors.InvalidArgumentError`; exhausted iteration budgets raise
:class:`~statkit.errors.ConvergenceError`. ``nan`` arguments propagate.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta import beta, beta_inc, beta_reg, inv_beta_reg, ln_beta
from .erf import erf, erf_inv, erfc, erfc_inv
from .factorial import (
    MAX_FACTORIAL,
    binomial,
    factorial,
    ln_binomial,
    ln_factorial,
    multinomial,
)
from .gamma import (
    digamma,
    gamma,
    gamma_li,
    gamma_lr,
    gamma_ui,
    gamma_ur,
    inv_digamma,
    ln_gamma,
    trigamma,
)
from .harmonic import gen_harmonic, harmonic
from .logistic import logistic, logit

__all__ = [
    # gamma
    "gamma",
    "ln_gamma",
    "gamma_lr",
    "gamma_ur",
    "gamma_li",
    "gamma_ui",
    "digamma",
    "trigamma",
    "inv_digamma",
    # beta
    "beta",
    "ln_beta",
    "beta_reg",
    "beta_inc",
    "inv_beta_reg",
    # error function
    "erf",
    "erfc",
    "erf_inv",
    "erfc_inv",
    # factorial
    "MAX_FACTORIAL",
    "factorial",
    "ln_factorial",
    "binomial",
    "ln_binomial",
    "multinomial",
    # misc
    "logistic",
    "logit",
    "harmonic",
    "gen_harmonic",
]
