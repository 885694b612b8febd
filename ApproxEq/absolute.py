"""
Absolute difference comparison.
"""

import numpy as np

from .float_bits import common_format, float_format
from .tolerance import AbsoluteTolerance


def approx_equal(a, b, tolerance: AbsoluteTolerance) -> bool:
    """Check ``|a - b| <= tolerance.threshold`` in the operands' precision"""
    fmt = common_format(a, b)
    lhs, rhs = fmt.float_type(a), fmt.float_type(b)

    # equal infinities have a NaN difference
    if lhs == rhs:
        return True

    with np.errstate(over="ignore", invalid="ignore"):
        diff = np.abs(lhs - rhs)
        threshold = fmt.float_type(tolerance.threshold)

    # NaN compares false against any threshold
    return bool(diff <= threshold)


def approx_equal_array(golden: np.ndarray, test: np.ndarray,
                       tolerance: AbsoluteTolerance) -> np.ndarray:
    """Element-wise version of approx_equal, returns a boolean mask"""
    fmt = float_format(golden)
    with np.errstate(over="ignore", invalid="ignore"):
        diff = np.abs(golden - test)
        threshold = fmt.float_type(tolerance.threshold)
        return (golden == test) | (diff <= threshold)
