from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from statkit.families import ParametricFamilyRegister
from statkit.types import CharacteristicName, GenericCharacteristicName
from tests.unit.families.test_basic import TestBaseFamily


class TestAnalyticalComputationCache(TestBaseFamily):
    def _fallback_characteristics(self) -> dict[GenericCharacteristicName, dict[str, object]]:
        return {
            CharacteristicName.PDF: {"base": lambda params, x: params.value},
            CharacteristicName.CDF: {"base": lambda params, x: params.value},
        }

    def test_computations_are_cached_per_instance(self) -> None:
        family = self.make_default_family(distr_characteristics=self._fallback_characteristics())
        ParametricFamilyRegister.register(family)

        distribution = family.distribution("alt", value=2.0)
        computations1 = distribution.analytical_computations
        assert computations1 is distribution.analytical_computations

        # alt(value=2.0) falls back to base(value=2.0)
        assert computations1[CharacteristicName.PDF](1.23) == pytest.approx(2.0)
        assert computations1[CharacteristicName.CDF](0.5) == pytest.approx(2.0)

        other = family.distribution("alt", value=5.0)
        computations2 = other.analytical_computations
        assert computations2 is not computations1
        assert computations2[CharacteristicName.PDF](1.23) == pytest.approx(5.0)

    def test_instances_are_immutable(self) -> None:
        family = self.make_default_family(distr_characteristics=self._fallback_characteristics())
        ParametricFamilyRegister.register(family)

        distribution = family.distribution(value=7.0)
        replacement = family.parametrizations["base"](value=1.0)  # type: ignore[call-arg]
        with pytest.raises(dataclasses.FrozenInstanceError):
            distribution.parametrization = replacement  # type: ignore[misc]

    def test_resolved_methods_are_cached(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)
        distribution = family.distribution(value=0.5)

        fitted = distribution.query_method(CharacteristicName.SF)
        assert distribution.query_method(CharacteristicName.SF) is fitted
        assert distribution.query_method(CharacteristicName.SF, x_tol=1e-3) is not fitted

    def test_cache_is_not_shared_between_instances(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        first = family.distribution(value=0.5)
        second = family.distribution(value=0.5)

        assert first == second
        assert first.query_method(CharacteristicName.SF) is not second.query_method(
            CharacteristicName.SF
        )
