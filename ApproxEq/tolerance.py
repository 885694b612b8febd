"""
Tolerance value types for approximate float comparison.
"""

import numbers
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Tolerance:
    """Base class of the tolerance values accepted by approx_equal"""
    threshold: Union[float, int]


@dataclass(frozen=True)
class AbsoluteTolerance(Tolerance):
    """
    Absolute difference: ``|a - b| <= threshold``.

    Prefer this method when the values are near zero.
    """
    threshold: float

    def __post_init__(self):
        object.__setattr__(self, "threshold", _check_real(self.threshold, "Absolute"))

    @classmethod
    def tol(cls, x: float) -> "AbsoluteTolerance":
        """
        Create an absolute difference tolerance.

        Raises:
            ValueError: if ``x`` is negative or NaN
        """
        return cls(x)


@dataclass(frozen=True)
class RelativeTolerance(Tolerance):
    """
    Relative difference: ``|a - b| <= threshold * max(|a|, |b|)``.

    This method breaks down when the values are near zero; combine it with
    an AbsoluteTolerance using ``or`` to cover that range.
    """
    threshold: float

    def __post_init__(self):
        object.__setattr__(self, "threshold", _check_real(self.threshold, "Relative"))

    @classmethod
    def tol(cls, x: float) -> "RelativeTolerance":
        """
        Create a relative difference tolerance.

        Raises:
            ValueError: if ``x`` is negative or NaN
        """
        return cls(x)


@dataclass(frozen=True)
class UlpTolerance(Tolerance):
    """
    ULP distance: at most ``threshold`` representable floats apart.

    The distance is measured with a signed integer of the operands' width,
    32 bits for single precision and 64 bits for double precision.
    """
    threshold: int

    def __post_init__(self):
        object.__setattr__(self, "threshold", _check_integral(self.threshold))

    @classmethod
    def tol(cls, n: int) -> "UlpTolerance":
        """
        Create a ULP distance tolerance.

        Raises:
            ValueError: if ``n`` is negative
        """
        return cls(n)


def _check_real(value, kind: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{kind} threshold must be a real number, got {value!r}")
    value = float(value)
    # NaN fails this check too
    if not value >= 0:
        raise ValueError(f"{kind} threshold must be non-negative, got {value}")
    return value


def _check_integral(value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Ulp threshold must be an integer, got {value!r}")
    value = int(value)
    if value < 0:
        raise ValueError(f"Ulp threshold must be non-negative, got {value}")
    return value
