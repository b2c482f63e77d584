"""
statkit
=======

Probability distributions and the special functions underlying them:
densities, cumulative distribution functions, quantiles, moments and random
variates for univariate and multivariate parametric families, plus
descriptive and order statistics over finite samples.

Subpackages :mod:`statkit.special` and :mod:`statkit.statistics` are
imported as namespaces; the distribution framework and families are
re-exported here.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from . import special, statistics
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("statkit")
__all__ = [
    "__version__",
    "special",
    "statistics",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _types_all
