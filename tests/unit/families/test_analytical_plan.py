from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from statkit.families import ParametricFamilyRegister
from statkit.types import CharacteristicName
from tests.unit.families.test_basic import TestBaseFamily


class TestAnalyticalPlan(TestBaseFamily):
    def test_family_analytical_plan_picks_provider_correctly(self) -> None:
        fam = self.make_default_family()

        plan = fam._analytical_plan
        assert set(plan.keys()) == {"base", "alt"}

        # 'alt' has its own CDF; PDF and PPF exist for 'base' only
        assert plan["alt"][CharacteristicName.CDF] == "alt"
        assert plan["alt"][CharacteristicName.PDF] == "base"
        assert plan["alt"][CharacteristicName.PPF] == "base"

        assert plan["base"][CharacteristicName.PDF] == "base"
        assert plan["base"][CharacteristicName.CDF] == "base"
        assert plan["base"][CharacteristicName.PPF] == "base"

    def test_characteristic_missing_for_base_is_left_out(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={CharacteristicName.CDF: {"alt": lambda p, x: x}}
        )

        assert CharacteristicName.CDF not in fam._analytical_plan["base"]
        assert fam._analytical_plan["alt"][CharacteristicName.CDF] == "alt"

    def test_single_function_is_a_base_form(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={CharacteristicName.MEAN: lambda p, _: p.value}
        )
        ParametricFamilyRegister.register(fam)

        assert fam.distr_characteristics[CharacteristicName.MEAN].keys() == {"base"}
        assert fam.distribution("alt", value=0.4).mean() == 0.4

    def test_own_form_receives_own_parameters(self) -> None:
        fam = self.make_default_family(
            distr_characteristics={
                CharacteristicName.CDF: {
                    "base": lambda p, x: ("base", p.name),
                    "alt": lambda p, x: ("alt", p.name),
                },
                CharacteristicName.PDF: {"base": lambda p, x: ("base", p.name)},
            }
        )
        ParametricFamilyRegister.register(fam)

        computations = fam.distribution("alt", value=0.3).analytical_computations

        assert computations[CharacteristicName.CDF](0.0) == ("alt", "alt")
        assert computations[CharacteristicName.PDF](0.0) == ("base", "base")
