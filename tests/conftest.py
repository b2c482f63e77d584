from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import numpy as np
import pytest

from statkit.distributions.registry import reset_characteristic_registry
from statkit.families.configuration import reset_families_register


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_characteristic_registry()
    reset_families_register()
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source shared by sampling tests."""
    return np.random.default_rng(20250101)
