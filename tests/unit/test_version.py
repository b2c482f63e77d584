from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import re
from importlib.metadata import version

import statkit

PEP440 = re.compile(r"^(\d+!)?\d+(\.\d+)*((a|b|rc)\d+)?(\.post\d+)?(\.dev\d+)?$")


def test_version_is_installed_distribution_version() -> None:
    assert statkit.__version__ == version("statkit")
    assert PEP440.match(statkit.__version__)


def test_package_logger_is_silent_by_default() -> None:
    handlers = logging.getLogger("statkit").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_public_namespace() -> None:
    for name in ("special", "statistics", "StatkitError", "FamilyName", "ParametricFamily"):
        assert name in statkit.__all__
        assert hasattr(statkit, name)
