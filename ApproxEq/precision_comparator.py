"""
Element-wise approximate comparison of numpy arrays.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from . import absolute, relative, ulp
from .comparator import ComparisonConfig
from .float_bits import float_format
from .tolerance import AbsoluteTolerance, RelativeTolerance, Tolerance, UlpTolerance

logger = logging.getLogger(__name__)


_ARRAY_METHODS = {
    AbsoluteTolerance: absolute.approx_equal_array,
    RelativeTolerance: relative.approx_equal_array,
    UlpTolerance: ulp.approx_equal_array,
}


@dataclass
class ComparisonResult:
    """Result of an array comparison"""
    method: str
    total_elements: int
    mismatched_elements: int
    max_absolute_error: float
    max_relative_error: float
    max_ulp_distance: Optional[int]
    passed: bool
    mismatch_indices: List[Tuple[int, ...]] = field(default_factory=list)

    @property
    def pass_rate(self) -> float:
        if not self.total_elements:
            return 1.0
        return 1 - self.mismatched_elements / self.total_elements


def _check_arrays(golden, test) -> Tuple[np.ndarray, np.ndarray]:
    golden = np.asarray(golden)
    test = np.asarray(test)

    if golden.shape != test.shape:
        raise ValueError(f"Shape mismatch: {golden.shape} vs {test.shape}")
    if golden.dtype != test.dtype:
        raise TypeError(f"Dtype mismatch: {golden.dtype} vs {test.dtype}")
    float_format(golden)
    return golden, test


def approx_equal_array(golden, test, tolerance: Tolerance) -> np.ndarray:
    """
    Element-wise approx_equal.

    Args:
        golden: Reference array, float32 or float64
        test: Array of the same shape and dtype
        tolerance: AbsoluteTolerance, RelativeTolerance or UlpTolerance

    Returns:
        Boolean array, True where the elements are approximately equal
    """
    golden, test = _check_arrays(golden, test)
    method = _ARRAY_METHODS.get(type(tolerance))
    if method is None:
        raise TypeError(f"Unsupported tolerance: {tolerance!r}")
    return method(golden, test, tolerance)


class PrecisionComparator:
    """Compare golden and test arrays and report error statistics"""

    def __init__(self, config: Optional[ComparisonConfig] = None):
        """
        Initialize the precision comparator.

        Args:
            config: Default tolerances, used when compare_arrays is not
                given an explicit tolerance
        """
        self.config = config or ComparisonConfig()

    def compare_arrays(self, golden, test,
                       tolerance: Optional[Tolerance] = None) -> ComparisonResult:
        """
        Compare two arrays element by element.

        Without an explicit tolerance an element passes when it is within the
        configured absolute or relative tolerance.

        Returns:
            ComparisonResult with mismatch counts and error maxima
        """
        golden, test = _check_arrays(golden, test)
        logger.debug(f"Comparing arrays of shape {golden.shape} and dtype {golden.dtype}")

        if tolerance is None:
            abs_tol, rel_tol = self.config.absolute(), self.config.relative()
            mask = (absolute.approx_equal_array(golden, test, abs_tol)
                    | relative.approx_equal_array(golden, test, rel_tol))
            method = f"{abs_tol} or {rel_tol}"
        else:
            mask = approx_equal_array(golden, test, tolerance)
            method = str(tolerance)

        mismatched = int(mask.size - np.count_nonzero(mask))
        result = ComparisonResult(
            method=method,
            total_elements=int(mask.size),
            mismatched_elements=mismatched,
            max_absolute_error=self._max_absolute_error(golden, test),
            max_relative_error=self._max_relative_error(golden, test),
            max_ulp_distance=self._max_ulp_distance(golden, test),
            passed=mismatched == 0,
            mismatch_indices=[tuple(int(i) for i in idx) for idx in np.argwhere(~mask)],
        )
        logger.debug(f"Compared {result.total_elements} elements, {mismatched} mismatched")

        if mismatched:
            logger.warning(f"{mismatched}/{result.total_elements} elements differ within {method}")
        if self.config.verbose:
            logger.info(f"Pass rate: {result.pass_rate:.2%}")
            logger.info(f"Max absolute error: {result.max_absolute_error:.2e}")
            logger.info(f"Max relative error: {result.max_relative_error:.2e}")
        return result

    def _max_absolute_error(self, golden: np.ndarray, test: np.ndarray) -> float:
        """Largest |golden - test| over elements where it is defined"""
        with np.errstate(over="ignore", invalid="ignore"):
            diff = np.abs(golden.ravel() - test.ravel())
        diff = diff[~np.isnan(diff)]
        return float(diff.max()) if diff.size else 0.0

    def _max_relative_error(self, golden: np.ndarray, test: np.ndarray) -> float:
        """Largest relative error over elements where it is defined"""
        errors = relative.relative_error(golden.ravel(), test.ravel())
        errors = errors[~np.isnan(errors)]
        return float(errors.max()) if errors.size else 0.0

    def _max_ulp_distance(self, golden: np.ndarray, test: np.ndarray) -> Optional[int]:
        """Largest ULP distance, None if it is undefined everywhere"""
        distance, defined = ulp.ulp_distance_array(golden.ravel(), test.ravel())
        if not defined.any():
            return None
        return int(distance[defined].max())


def compare_arrays(golden, test,
                   tolerance: Optional[Tolerance] = None,
                   config: Optional[ComparisonConfig] = None) -> ComparisonResult:
    """Compare two arrays with a PrecisionComparator built from ``config``"""
    return PrecisionComparator(config).compare_arrays(golden, test, tolerance)
