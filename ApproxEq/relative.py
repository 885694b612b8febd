"""
Relative difference comparison.

The bound ``threshold * max(|a|, |b|)`` collapses near zero: with a threshold
below one, zero is not relatively equal to a nonzero normal value. Rounding of
the bound can still let a subnormal (or the smallest normal) through, for
example ``0.0`` and ``5e-324`` with a threshold of ``0.99``. Callers that need
robustness near zero combine this method with the absolute one.

An infinite operand makes the bound infinite, so with a positive threshold
every non-NaN value is relatively equal to an infinity.
"""

import numpy as np

from .float_bits import common_format, float_format
from .tolerance import RelativeTolerance


def approx_equal(a, b, tolerance: RelativeTolerance) -> bool:
    """Check ``|a - b| <= tolerance.threshold * max(|a|, |b|)``"""
    fmt = common_format(a, b)
    lhs, rhs = fmt.float_type(a), fmt.float_type(b)

    # equal infinities have a NaN difference
    if lhs == rhs:
        return True

    with np.errstate(over="ignore", invalid="ignore"):
        diff = np.abs(lhs - rhs)
        largest = np.maximum(np.abs(lhs), np.abs(rhs))
        bound = fmt.float_type(tolerance.threshold) * largest

    return bool(diff <= bound)


def relative_error(golden: np.ndarray, test: np.ndarray) -> np.ndarray:
    """``|golden - test| / max(|golden|, |test|)``, zero where the values are equal"""
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        diff = np.abs(golden - test)
        largest = np.maximum(np.abs(golden), np.abs(test))
        return np.where(diff == 0, 0, diff / largest).astype(golden.dtype)


def approx_equal_array(golden: np.ndarray, test: np.ndarray,
                       tolerance: RelativeTolerance) -> np.ndarray:
    """Element-wise version of approx_equal, returns a boolean mask"""
    fmt = float_format(golden)
    with np.errstate(over="ignore", invalid="ignore"):
        diff = np.abs(golden - test)
        largest = np.maximum(np.abs(golden), np.abs(test))
        bound = fmt.float_type(tolerance.threshold) * largest
        return (golden == test) | (diff <= bound)
