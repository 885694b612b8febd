"""
ULP (unit in the last place) distance comparison.

Adjacent representable floats of the same sign differ by exactly one when
their bit patterns are read as signed integers, so the integer distance
counts how many floats lie between two values.
"""

from typing import Optional

import numpy as np

from .float_bits import FloatFormat, common_format, float_format, to_bits
from .tolerance import UlpTolerance


def _distance(lhs, rhs, fmt: FloatFormat) -> Optional[int]:
    # ULP distance doesn't make sense for NaNs
    if np.isnan(lhs) or np.isnan(rhs):
        return None

    ilhs = to_bits(lhs, fmt)
    irhs = to_bits(rhs, fmt)

    # the subtraction would overflow across the sign boundary
    if (ilhs < 0) != (irhs < 0):
        return None

    return abs(ilhs - irhs)


def ulp_distance(a, b) -> Optional[int]:
    """
    Distance between two floats in ULPs.

    Returns:
        The number of representable floats between ``a`` and ``b``, or None
        when either is NaN or their sign bits differ.
    """
    fmt = common_format(a, b)
    return _distance(fmt.float_type(a), fmt.float_type(b), fmt)


def approx_equal(a, b, tolerance: UlpTolerance) -> bool:
    """Check that ``a`` and ``b`` are at most ``tolerance.threshold`` ULPs apart"""
    fmt = common_format(a, b)
    lhs, rhs = fmt.float_type(a), fmt.float_type(b)

    distance = _distance(lhs, rhs, fmt)
    if distance is None:
        # catches 0.0 == -0.0, false whenever a NaN is involved
        return bool(lhs == rhs)

    return distance <= tolerance.threshold


def ulp_distance_array(golden: np.ndarray, test: np.ndarray):
    """
    Element-wise ULP distance.

    Returns:
        Tuple of (distance as int64, mask of elements where it is defined)
    """
    fmt = float_format(golden)
    igolden = golden.view(fmt.int_type).astype(np.int64)
    itest = test.view(fmt.int_type).astype(np.int64)

    defined = ~np.isnan(golden) & ~np.isnan(test) & ((igolden < 0) == (itest < 0))
    # undefined elements may wrap around, they are masked out below
    distance = np.where(defined, np.abs(igolden - itest), 0)
    return distance, defined


def approx_equal_array(golden: np.ndarray, test: np.ndarray,
                       tolerance: UlpTolerance) -> np.ndarray:
    """Element-wise version of approx_equal, returns a boolean mask"""
    distance, defined = ulp_distance_array(golden, test)
    return np.where(defined, distance <= tolerance.threshold, golden == test)
