"""
Numeric Constants
=================

Floating point constants shared by the special functions and the
distribution families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys

SQRT_2 = 1.4142135623730950488016887242096980785696718753769
"""sqrt(2)"""

SQRT_PI = 1.7724538509055160272981674833411451827810681741641
"""sqrt(pi)"""

SQRT_2PI = 2.5066282746310005024157652848110452530069867406099
"""sqrt(2 * pi)"""

INV_SQRT_PI = 0.56418958354775628694807945156077258584405062932900
"""1 / sqrt(pi)"""

TWO_INV_SQRT_PI = 1.1283791670955125738961589031215451716881012586580
"""2 / sqrt(pi)"""

LN_PI = 1.1447298858494001741434273513530587116472948129153
"""ln(pi)"""

LN_2 = 0.69314718055994530941723212145817656807550013436026
"""ln(2)"""

LN_SQRT_2PI = 0.91893853320467274178032973640561763986139747363778
"""ln(sqrt(2 * pi))"""

LN_SQRT_2PIE = 1.4189385332046727417803297364056176398613974736378
"""ln(sqrt(2 * pi * e))"""

LN_2_SQRT_E_OVER_PI = 0.62078223763524522234551844578164721225185272790259
"""ln(2 * sqrt(e / pi))"""

TWO_SQRT_E_OVER_PI = 1.8603827342052657173362492472666631120594218414085
"""2 * sqrt(e / pi)"""

EULER_MASCHERONI = 0.57721566490153286060651209008240243104215933593992
"""Euler-Mascheroni constant gamma"""

ZETA_3 = 1.2020569031595942853997381615114499907649862923405
"""Apery's constant zeta(3)"""

F64_MAX_LN = 709.782712893384
"""Largest x with finite exp(x)."""

F64_MIN_LN = -745.1332191019412
"""Smallest x with non-zero exp(x)."""

F64_EPSILON = sys.float_info.epsilon
"""Machine epsilon 2^-52."""

F64_MIN_POSITIVE = sys.float_info.min
"""Smallest positive normalized double."""

__all__ = [
    "SQRT_2",
    "SQRT_PI",
    "SQRT_2PI",
    "INV_SQRT_PI",
    "TWO_INV_SQRT_PI",
    "LN_PI",
    "LN_2",
    "LN_SQRT_2PI",
    "LN_SQRT_2PIE",
    "LN_2_SQRT_E_OVER_PI",
    "TWO_SQRT_E_OVER_PI",
    "EULER_MASCHERONI",
    "ZETA_3",
    "F64_MAX_LN",
    "F64_MIN_LN",
    "F64_EPSILON",
    "F64_MIN_POSITIVE",
]
