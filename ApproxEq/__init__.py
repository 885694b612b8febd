"""
ApproxEq - Approximate equality comparison for IEEE-754 floating-point numbers.
"""

from .tolerance import Tolerance, AbsoluteTolerance, RelativeTolerance, UlpTolerance
from .comparator import approx_equal, assert_approx_equal, ComparisonConfig
from .ulp import ulp_distance
from .precision_comparator import PrecisionComparator, ComparisonResult, approx_equal_array, compare_arrays

__version__ = "1.0.0"
__all__ = [
    "Tolerance",
    "AbsoluteTolerance",
    "RelativeTolerance",
    "UlpTolerance",
    "approx_equal",
    "assert_approx_equal",
    "ComparisonConfig",
    "ulp_distance",
    "PrecisionComparator",
    "ComparisonResult",
    "approx_equal_array",
    "compare_arrays",
]
