"""
Generic approximate equality entry point.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from . import absolute, relative, ulp
from .tolerance import AbsoluteTolerance, RelativeTolerance, Tolerance, UlpTolerance

logger = logging.getLogger(__name__)


_METHODS = {
    AbsoluteTolerance: absolute.approx_equal,
    RelativeTolerance: relative.approx_equal,
    UlpTolerance: ulp.approx_equal,
}


@dataclass
class ComparisonConfig:
    """Default tolerances for comparisons that are not given one"""
    abs_tol: float = 1e-5
    rel_tol: float = 1e-5
    ulp_tol: int = 4
    verbose: bool = False

    def absolute(self) -> AbsoluteTolerance:
        return AbsoluteTolerance.tol(self.abs_tol)

    def relative(self) -> RelativeTolerance:
        return RelativeTolerance.tol(self.rel_tol)

    def ulp(self) -> UlpTolerance:
        return UlpTolerance.tol(self.ulp_tol)

    def tolerances(self) -> Tuple[AbsoluteTolerance, RelativeTolerance, UlpTolerance]:
        """The absolute, relative and ULP tolerances, in that order"""
        return self.absolute(), self.relative(), self.ulp()


def approx_equal(a, b, tolerance: Tolerance) -> bool:
    """
    Check if two floats are approximately equal.

    The method is picked from the tolerance type. Methods can be combined at
    the call site, for example::

        approx_equal(x, y, AbsoluteTolerance.tol(1e-5)) or \\
            approx_equal(x, y, RelativeTolerance.tol(1e-5))

    Args:
        a: Left operand, a Python float or a numpy float32/float64 scalar
        b: Right operand of the same precision as ``a``
        tolerance: AbsoluteTolerance, RelativeTolerance or UlpTolerance

    Returns:
        True if the operands are within tolerance; always False when either
        is NaN
    """
    method = _METHODS.get(type(tolerance))
    if method is None:
        raise TypeError(f"Unsupported tolerance: {tolerance!r}")
    return method(a, b, tolerance)


def assert_approx_equal(a, b,
                        tolerance: Optional[Tolerance] = None,
                        config: Optional[ComparisonConfig] = None,
                        msg: Optional[str] = None) -> None:
    """
    Assert that two floats are approximately equal.

    Without an explicit tolerance the absolute and relative tolerances of
    ``config`` are combined with ``or``.
    """
    if tolerance is None:
        config = config or ComparisonConfig()
        abs_tol, rel_tol = config.absolute(), config.relative()
        passed = approx_equal(a, b, abs_tol) or approx_equal(a, b, rel_tol)
        within = f"{abs_tol} or {rel_tol}"
    else:
        passed = approx_equal(a, b, tolerance)
        within = str(tolerance)

    if passed:
        return

    detail = f"{a!r} != {b!r} within {within}"
    distance = ulp.ulp_distance(a, b)
    if distance is not None:
        detail += f" (ulp distance {distance})"
    logger.debug(f"Approximate equality failed: {detail}")
    raise AssertionError(msg or detail)
